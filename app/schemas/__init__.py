# re-export common schemas for simpler imports
from .url import (
    ErrorResponse,
    RetrieveLongURLRequest,
    RetrieveLongURLResponse,
    ShortenURLRequest,
    ShortenURLResponse,
)

__all__ = [
    "ShortenURLRequest",
    "ShortenURLResponse",
    "RetrieveLongURLRequest",
    "RetrieveLongURLResponse",
    "ErrorResponse",
]
