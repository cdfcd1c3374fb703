import argparse
import logging
import sys

import uvicorn

from wordcrawl.api.server import create_app
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigValidationError, FileOperationError

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordcrawl", description="Crawl pages and rank their most frequent words.")
    sub = parser.add_subparsers(dest="command", required=True)

    crawl = sub.add_parser("crawl", help="run one crawl from a JSON/YAML config file")
    crawl.add_argument("config_path")

    serve = sub.add_parser("serve", help="start the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def run_crawl(container: Container, config_path: str) -> int:
    try:
        cfg = container.config_loader().load(config_path)
    except (ConfigValidationError, FileOperationError) as e:
        logger.error("Could not load config %s: %s", config_path, e)
        return 2

    crawler = container.crawler_factory().create(cfg)
    result = crawler.crawl(cfg.start_pages)

    container.result_writer().write(result, cfg.result_path or None)
    container.profiler().write_report(cfg.profile_output_path or None)
    return 0


def main(argv=None, container: Container = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    container = container or Container()
    logging.basicConfig(
        level=container.config.WORDCRAWL_LOG_LEVEL() or "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "crawl":
        return run_crawl(container, args.config_path)

    uvicorn.run(create_app(container), host=args.host, port=args.port)
    return 0


if __name__ == '__main__':
    sys.exit(main())
