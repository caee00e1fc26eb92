from concurrent.futures import ThreadPoolExecutor
import threading

import pytest

from app.core.exceptions import ShortCodeNotFound
from app.utils.encoding import ALPHABET, SHORT_CODE_LENGTH


def test_get_or_create_short_idempotent(store):
    code1 = store.get_or_create_short("https://example.com/a")
    code2 = store.get_or_create_short("https://example.com/a")
    assert code1 == code2
    assert len(store) == 1


def test_get_or_create_reports_creation(store):
    assert store.get_or_create("https://example.com/a")[1] is True
    assert store.get_or_create("https://example.com/a")[1] is False


def test_resolve_returns_long_url(store):
    code = store.get_or_create_short("https://example.com/a")
    assert store.resolve(code) == "https://example.com/a"
    assert code in store


@pytest.mark.parametrize("raw,expected", [
    ("www.google.com", "http://www.google.com"),
    ("https://example.com", "https://example.com"),
    ("HTTPS://Example.com", "HTTPS://Example.com"),
    ("ftp://example.com", "http://ftp://example.com"),
    ("", "http://"),
])
def test_get_or_create_short_normalizes(store, raw, expected):
    code = store.get_or_create_short(raw)
    assert store.resolve(code) == expected
    assert store.lookup_short(expected) == code


def test_resolve_unknown_code(store):
    with pytest.raises(ShortCodeNotFound) as exc_info:
        store.resolve("doesNotExist")
    assert exc_info.value.short_code == "doesNotExist"


def test_lookup_short_missing(store):
    assert store.lookup_short("https://example.com/missing") is None


def test_uniqueness_and_bijection(store):
    urls = [f"https://example.com/page/{i}" for i in range(2000)]
    codes = [store.get_or_create_short(url) for url in urls]

    assert len(set(codes)) == len(urls)
    assert len(store) == len(urls)
    for url, code in zip(urls, codes):
        assert len(code) == SHORT_CODE_LENGTH
        assert set(code) <= set(ALPHABET)
        assert store.resolve(code) == url


def test_concurrent_creation_same_url(store):
    """Many threads racing on one URL end up with a single mapping."""
    workers = 32
    barrier = threading.Barrier(workers)

    def create():
        barrier.wait()
        return store.get_or_create_short("https://example.com/race")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        codes = list(pool.map(lambda _: create(), range(workers)))

    assert len(set(codes)) == 1
    assert len(store) == 1


def test_concurrent_creation_distinct_urls(store):
    urls = [f"https://example.com/{i}" for i in range(500)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        codes = list(pool.map(store.get_or_create_short, urls))

    assert len(set(codes)) == len(urls)
    for url, code in zip(urls, codes):
        assert store.resolve(code) == url
