"""Redirect endpoint for resolving tokens to original URLs."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.api import schemas
from urlshortener.api.dependencies import get_shortener_service
from urlshortener.db.session import get_db
from urlshortener.services.exceptions import URLNotFoundError
from urlshortener.services.shortener import ShortenUrlService

router = APIRouter(tags=["redirect"])


@router.get(
    "/{token}",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "Unknown or malformed token"},
    }
)
async def redirect_to_url(
    token: str = Path(..., description="Token returned when the URL was shortened"),
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenUrlService = Depends(get_shortener_service),
):
    try:
        url = await shortener_service.resolve(db, token)
    except URLNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return RedirectResponse(url=url.original_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
