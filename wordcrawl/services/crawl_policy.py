import logging

from wordcrawl.domain.crawl_context import CrawlContext

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limit, deadline and ignored URLs.

    Separates policy decisions from crawl orchestration logic.
    """

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if URL should be skipped because no depth budget is left."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_deadline(self, url: str, context: CrawlContext) -> bool:
        """Check if the crawl deadline has passed before starting on `url`."""
        if context.is_expired():
            logger.debug("Skipping (deadline passed) %s", url)
            return True
        return False

    def should_skip_due_to_ignored_url(self, url: str, context: CrawlContext) -> bool:
        """Check if URL fully matches one of the configured ignored URL patterns."""
        for pattern in context.config.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False

    def should_skip_due_to_visited(self, url: str, context: CrawlContext) -> bool:
        """Claim `url` for this crawl; skip if another step already claimed it."""
        if not context.claim(url):
            logger.debug("Skipping (visited) %s", url)
            return True
        return False

    def should_skip(self, url: str, depth: int, context: CrawlContext) -> bool:
        # order matters: the claim must come last so skipped URLs stay unclaimed
        return (
            self.should_skip_due_to_depth(depth)
            or self.should_skip_due_to_deadline(url, context)
            or self.should_skip_due_to_ignored_url(url, context)
            or self.should_skip_due_to_visited(url, context)
        )
