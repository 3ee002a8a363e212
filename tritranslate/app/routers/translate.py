import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..languages import LANGUAGES, Language
from ..schemas import ErrorResponse, LanguageResponse, TranslateRequest, TranslateResponse
from ..services import TranslationRequestError, validate_translation_request
from ..translation_client import GeminiTranslationClient, get_translation_client

logger = logging.getLogger(__name__)

TRANSLATION_ERROR_MESSAGE = "An error occurred during translation."

router = APIRouter(tags=["translate"])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get("/languages", response_model=list[LanguageResponse])
def list_languages() -> list[Language]:
    return list(LANGUAGES)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def translate(
    payload: TranslateRequest,
    client: GeminiTranslationClient = Depends(get_translation_client),
) -> TranslateResponse | JSONResponse:
    try:
        text, target_languages = validate_translation_request(payload.text, payload.target_languages)
    except TranslationRequestError as exc:
        logger.info("Rejected translation request: %s", exc.message)
        return error_response(exc.status_code, exc.message)

    logger.info("Translating %d characters into %s", len(text), ", ".join(target_languages))
    try:
        translations = await client.translate(text, target_languages)
    except Exception:
        logger.exception("Translation failed for %s", ", ".join(target_languages))
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, TRANSLATION_ERROR_MESSAGE)

    return TranslateResponse(translations=translations)
