"""
Code-set (enum) sources.

A code source answers `get_code_map(endpoint)` with an ordered mapping from
code to human label, e.g. for "codes/srodow":

    {"Mon": "Monday", "Tue": "Tuesday", ...}

Validators only consume the codes (keys); labels are for UIs.

Sources:
- StaticCodeMapSource: in-memory mapping (tests, embedding applications)
- JsonFileCodeMapSource: JSON document on disk, cached in a shared TTL cache
"""
import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional

from report_scheduler.app.config import get_settings
from report_scheduler.app.logging_config import get_logger
from report_scheduler.app.utils.cache_utils import get_ttl_cache

logger = get_logger(__name__)

CODE_SET_DOCUMENTS_CACHE = "code_set_documents"


class CodeSourceError(Exception):
    """Base exception for code source errors (unreadable or corrupt source)."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class CodeMapSource(ABC):
    """Abstract enum source."""

    @abstractmethod
    def get_code_map(self, endpoint: str) -> Mapping[str, str]:
        """
        Return the ordered code -> label mapping of an endpoint.

        Unknown endpoints return an empty mapping.
        """
        raise NotImplementedError


class StaticCodeMapSource(CodeMapSource):
    """In-memory enum source."""

    def __init__(self, code_maps: Mapping[str, Mapping[str, str]]):
        self._code_maps = {endpoint: dict(codes) for endpoint, codes in code_maps.items()}

    def get_code_map(self, endpoint: str) -> Mapping[str, str]:
        return dict(self._code_maps.get(endpoint, {}))


class JsonFileCodeMapSource(CodeMapSource):
    """
    Enum source backed by a JSON document `{endpoint: {code: label}}`.

    The parsed document is kept in a named cachetools TTLCache shared by every
    instance reading the same file, so many short-lived validators do not
    re-read the file. Access to the shared cache is serialized with a lock.
    """

    _lock = threading.Lock()

    def __init__(self, path: str | Path, ttl: int = 3600):
        self.path = Path(path)
        self.ttl = ttl

    def get_code_map(self, endpoint: str) -> Mapping[str, str]:
        document = self._load_document()
        code_map = document.get(endpoint)
        if code_map is None:
            logger.warning("Unknown code set endpoint", endpoint=endpoint, path=str(self.path))
            return {}
        if not isinstance(code_map, dict):
            raise CodeSourceError(
                f"Code set '{endpoint}' in {self.path} must be an object",
                error_code="INVALID_CODE_SET",
                details={"endpoint": endpoint}
                )
        return dict(code_map)

    def _load_document(self) -> dict:
        cache = get_ttl_cache(CODE_SET_DOCUMENTS_CACHE, maxsize=32, ttl=self.ttl)
        key = str(self.path.resolve())

        with self._lock:
            document = cache.get(key)
            if document is None:
                document = self._read_document()
                cache[key] = document
        return document

    def _read_document(self) -> dict:
        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError as e:
            logger.error("Code set file not found", path=str(self.path))
            raise CodeSourceError(
                f"Code set file not found: {self.path}",
                error_code="FILE_NOT_FOUND",
                details={"path": str(self.path)}
                ) from e
        except ValueError as e:
            logger.error("Code set file is not valid JSON", path=str(self.path), error=str(e))
            raise CodeSourceError(
                f"Code set file is not valid JSON: {self.path}",
                error_code="INVALID_JSON",
                details={"path": str(self.path), "error": str(e)}
                ) from e

        if not isinstance(document, dict):
            raise CodeSourceError(
                f"Code set file must contain a JSON object: {self.path}",
                error_code="INVALID_DOCUMENT",
                details={"path": str(self.path)}
                )

        logger.debug("Code set file loaded", path=str(self.path), endpoints=len(document))
        return document


def get_default_code_source() -> CodeMapSource:
    """Build the enum source configured in settings (CODE_SETS_FILE, CODE_SETS_CACHE_TTL)."""
    settings = get_settings()
    return JsonFileCodeMapSource(settings.CODE_SETS_FILE, ttl=settings.CODE_SETS_CACHE_TTL)
