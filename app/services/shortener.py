import logging

from app.db.store import MappingStore


logger = logging.getLogger(__name__)


class URLService:

    @staticmethod
    def create_short_url(store: MappingStore, long_url: str) -> str:
        short_code, created = store.get_or_create(long_url)
        if created:
            logger.info("Created short URL '%s' for URL: %s", short_code, long_url[:50])
        else:
            logger.info("short URL already existed : '%s' for URL: %s", short_code, long_url[:50])
        return short_code

    @staticmethod
    def get_long_url(store: MappingStore, short_code: str) -> str:
        return store.resolve(short_code)
