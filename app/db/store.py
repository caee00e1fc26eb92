import logging
import threading
from typing import Dict, Optional, Set, Tuple

from app.core.exceptions import ShortCodeNotFound
from app.utils import encoding
from app.utils.urls import normalize_long_url

logger = logging.getLogger(__name__)


class MappingStore:
    """In-memory bidirectional mapping between long URLs and short codes.

    All three collections live behind one lock, so the long->short and
    short->long views are only ever changed together.
    """

    def __init__(self):
        self._long_to_short: Dict[str, str] = {}
        self._short_to_long: Dict[str, str] = {}
        self._codes: Set[str] = set()
        self._lock = threading.Lock()

    def get_or_create(self, long_url_raw: str) -> Tuple[str, bool]:
        """Return ``(short_code, created)`` for the normalized URL."""
        long_url = normalize_long_url(long_url_raw)
        with self._lock:
            existing = self._long_to_short.get(long_url)
            if existing is not None:
                return existing, False

            short_code = encoding.generate_unique_code(self._codes)
            self._long_to_short[long_url] = short_code
            self._short_to_long[short_code] = long_url
            self._codes.add(short_code)

        logger.debug("Allocated %s -> %s", short_code, long_url[:50])
        return short_code, True

    def get_or_create_short(self, long_url_raw: str) -> str:
        short_code, _ = self.get_or_create(long_url_raw)
        return short_code

    def resolve(self, short_code: str) -> str:
        with self._lock:
            long_url = self._short_to_long.get(short_code)
        if long_url is None:
            raise ShortCodeNotFound(short_code)
        return long_url

    def lookup_short(self, long_url_raw: str) -> Optional[str]:
        long_url = normalize_long_url(long_url_raw)
        with self._lock:
            return self._long_to_short.get(long_url)

    def __contains__(self, short_code: object) -> bool:
        with self._lock:
            return short_code in self._codes

    def __len__(self) -> int:
        with self._lock:
            return len(self._short_to_long)
