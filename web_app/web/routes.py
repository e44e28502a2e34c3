"""Shorten and redirect routes served at the site root."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from ..api.schemas import ShortenRequest, ShortenResponse, ErrorResponse
from shortener.common.url_builder import build_short_url
from shortener.database.base import StorageError

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body or URL"},
        500: {"model": ErrorResponse, "description": "Storage error"},
    },
    summary="Create short URL",
    description="Store the URL under a new random short code and return the short URL.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config
    
    try:
        code = await service.shorten(body.url)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error: {e}",
        )
    
    return ShortenResponse(short_url=build_short_url(code, config.base_url))


@router.api_route(
    "/shorten",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def shorten_method_not_allowed():
    """Registered ahead of the redirect route so /shorten is never taken as a code."""
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Only POST method is allowed",
        headers={"Allow": "POST"},
    )


@router.api_route(
    "/{short_code:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL.
    
    Any method is accepted and the whole path after the leading slash is the
    code, so / and /a/b are looked up (and not found) like any other code.
    """
    service = request.app.state.service
    
    try:
        original_url = await service.get_original_url(short_code)
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error: {e}",
        )
    
    if original_url is None:
        return PlainTextResponse("URL not found", status_code=status.HTTP_404_NOT_FOUND)
    
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
