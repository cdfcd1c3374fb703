"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.profiler.profiler import Profiler
from wordcrawl.services.config_loader import ConfigLoader
from wordcrawl.services.crawl_result_writer import CrawlResultWriter
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.crawler_factory import CrawlerFactory
from wordcrawl.services.http_service import HttpService


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single page request. The crawl deadline is checked only
#   between requests, so this also bounds how far a crawl can overrun it.
#
# WORDCRAWL_LOG_LEVEL (str, default: "INFO")
#   Root log level applied by run.py.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "WordCrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "WORDCRAWL_LOG_LEVEL": env.log_level(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WordCrawl application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    # One profiler per process run; every crawler built here reports into it
    profiler = providers.Singleton(
        Profiler
    )

    config_parser = providers.Singleton(
        CrawlerConfigParser
    )

    config_loader = providers.Singleton(
        ConfigLoader,
        parser=config_parser,
    )

    result_writer = providers.Singleton(
        CrawlResultWriter
    )

    crawler_factory = providers.Singleton(
        CrawlerFactory,
        http_service=http_service,
        profiler=profiler,
    )
