from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse
import logging

from app.core.exceptions import ShortCodeNotFound
from app.db.Connection import database
from app.db.store import MappingStore
from app.schemas import (
    ErrorResponse,
    RetrieveLongURLRequest,
    RetrieveLongURLResponse,
    ShortenURLRequest,
    ShortenURLResponse,
)
from app.services.shortener import URLService

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "URL not found"


def _not_found(status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"Error": NOT_FOUND_MESSAGE})


@router.post("/short", response_model=ShortenURLResponse, tags=["shortener"])
def shorten_url_endpoint(url_request: ShortenURLRequest, store: MappingStore = Depends(database.get_store)):
    """Shorten a long URL. The same long URL always yields the same code."""
    short_code = URLService.create_short_url(store, url_request.long_url)
    return ShortenURLResponse(short_url=short_code)


@router.get(
    "/retrieveLongUrl",
    response_model=RetrieveLongURLResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    tags=["shortener"],
)
def retrieve_long_url_endpoint(url_request: RetrieveLongURLRequest, store: MappingStore = Depends(database.get_store)):
    """Get the original long URL from a short code sent in the request body."""
    try:
        long_url = URLService.get_long_url(store, url_request.short_url)
    except ShortCodeNotFound:
        logger.warning(f"Lookup 400: Short code not found: {url_request.short_url}")
        return _not_found(status.HTTP_400_BAD_REQUEST)
    return RetrieveLongURLResponse(long_url=long_url)


@router.get(
    "/{short_url}",
    status_code=status.HTTP_302_FOUND,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    tags=["redirect"],
)
def redirect_to_url_endpoint(short_url: str, store: MappingStore = Depends(database.get_store)):
    """
    Access the shortened URL and get redirected to the original long URL.
    """
    try:
        long_url = URLService.get_long_url(store, short_url)
    except ShortCodeNotFound:
        logger.warning(f"Redirect 404: Short code not found: {short_url}")
        return _not_found(status.HTTP_404_NOT_FOUND)

    logger.info(f"Redirect {short_url} -> {long_url[:50]}")
    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
