import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from wordcrawl.profiler.profiler import Profiler
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.crawler_factory import CrawlerFactory

logger = logging.getLogger(__name__)


class CrawlRequest(BaseModel):
    startPages: List[str]
    ignoredUrls: List[str] = []
    ignoredWords: List[str] = []
    parallelism: int = -1
    implementationOverride: str = ""
    maxDepth: int = 0
    timeoutSeconds: int = 1
    popularWordCount: int = 0


def create_crawls_router(crawler_factory: CrawlerFactory, config_parser: CrawlerConfigParser, profiler: Optional[Profiler] = None):
    router = APIRouter(prefix="/crawls", tags=["Crawls"])

    @router.post("")
    def run_crawl(req: CrawlRequest):
        """Run a crawl to completion and return its ranked word counts."""
        try:
            cfg = config_parser.parse(req.model_dump())
            crawler = crawler_factory.create(cfg)
        except ValueError as e:
            logger.warning("Rejected crawl request: %s", e)
            raise HTTPException(status_code=400, detail=str(e))
        result = crawler.crawl(cfg.start_pages)
        return result.to_dict()

    @router.get("/profile", response_class=PlainTextResponse)
    def profile():
        if profiler is None:
            raise HTTPException(status_code=404, detail="profiling not enabled")
        return profiler.report()

    return router
