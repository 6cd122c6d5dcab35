"""
Named TTL caches using cachetools.

The caches themselves are not locked: callers sharing one across threads
guard access themselves (see JsonFileCodeMapSource).
"""
import structlog
from cachetools import TTLCache

logger = structlog.get_logger(__name__)

# Global registry of named caches
_cache_registry: dict[str, TTLCache] = {}


def get_ttl_cache(name: str, maxsize: int = 1000, ttl: int = 3600) -> TTLCache:
    """
    Get or create a named TTL cache with automatic expiration.

    The first call for a name fixes its maxsize/ttl; later calls return the
    existing cache unchanged.

    Args:
        name: Unique identifier for the cache (e.g., 'code_set_documents')
        maxsize: Maximum number of entries in cache (default: 1000)
        ttl: Time-to-live in seconds (default: 3600 = 1 hour)

    Returns:
        TTLCache instance with specified parameters
    """
    if name not in _cache_registry:
        logger.info(
            "Creating new TTL cache",
            cache_name=name,
            maxsize=maxsize,
            ttl_seconds=ttl
            )
        _cache_registry[name] = TTLCache(maxsize=maxsize, ttl=ttl)

    return _cache_registry[name]
