"""
Per-validator memoized code-set lookups.

A CodeSetCache lives as long as one validator instance. Each endpoint is
fetched from the enum source at most once; the result (even an empty one) is
kept for the rest of the instance's life and never invalidated.

Not thread-safe: do not share one instance between concurrent validations.
"""
from typing import Dict, Tuple

from report_scheduler.app.logging_config import get_logger
from report_scheduler.app.services.code_sources import CodeMapSource

logger = get_logger(__name__)


class CodeSetCache:
    """Lazy endpoint -> valid codes lookup over a CodeMapSource."""

    def __init__(self, source: CodeMapSource):
        self.source = source
        self._codes: Dict[str, Tuple[str, ...]] = {}

    def lookup(self, endpoint: str) -> Tuple[str, ...]:
        """
        Return the valid codes of an endpoint, in source order.

        Empty-string codes are dropped and labels ignored. An endpoint the
        source knows nothing about yields an empty tuple, which makes every
        membership check against it fail.
        """
        if endpoint in self._codes:
            return self._codes[endpoint]

        code_map = self.source.get_code_map(endpoint) or {}
        codes = tuple(str(code) for code in code_map.keys() if str(code) != "")
        if not codes:
            logger.warning("Code set is empty", endpoint=endpoint)
        else:
            logger.debug("Code set fetched", endpoint=endpoint, count=len(codes))

        self._codes[endpoint] = codes
        return codes

    @property
    def endpoints(self) -> Tuple[str, ...]:
        """Endpoints fetched so far."""
        return tuple(self._codes)
