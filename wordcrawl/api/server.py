from fastapi import FastAPI

from wordcrawl.api.routers import create_crawls_router, create_systems_router
from wordcrawl.container import ENV, Container
from wordcrawl.services.crawl_executor import available_parallelism
from wordcrawl.services.crawler_factory import executor_names


def create_app(container: Container = None) -> FastAPI:
    """Build the FastAPI application around a (possibly injected) container."""
    container = container or Container()
    app = FastAPI(title="WordCrawl")
    app.include_router(create_systems_router(ENV, executor_names(), available_parallelism))
    app.include_router(
        create_crawls_router(
            crawler_factory=container.crawler_factory(),
            config_parser=container.config_parser(),
            profiler=container.profiler(),
        )
    )
    return app
