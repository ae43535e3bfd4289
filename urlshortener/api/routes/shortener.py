from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.api import schemas
from urlshortener.api.dependencies import get_base_url, get_shortener_service
from urlshortener.db.session import get_db
from urlshortener.services.exceptions import URLCreationError, URLValidationError
from urlshortener.services.shortener import ShortenUrlService

router = APIRouter(tags=["shortener"])


@router.post(
    "/shorten",
    response_model=schemas.ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": schemas.ErrorResponse, "description": "URL could not be stored"},
    }
)
async def create_short_url(
    request: schemas.ShortenRequest,
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenUrlService = Depends(get_shortener_service),
    base_url: str = Depends(get_base_url)
):
    try:
        token = await shortener_service.shorten(db, request.url)
    except URLValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=schemas.ErrorResponse(
                detail=str(e),
                error_code="validation_error",
                field_errors=e.errors,
            ).model_dump(),
        )
    except URLCreationError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=schemas.ErrorResponse(
                detail=str(e),
                error_code="persistence_error",
            ).model_dump(),
        )

    return schemas.ShortenResponse(
        token=token,
        short_url=f"{base_url}/{token}",
        original_url=request.url,
    )
