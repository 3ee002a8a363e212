import logging
from pathlib import Path
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import GEMINI_MODEL, LOG_LEVEL, get_gemini_api_key
from .routers import translate
from .routers.translate import error_response
from .services import InvalidLanguageCount, TranslationRequestError, validate_translation_request

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if not get_gemini_api_key():
        logger.warning("GEMINI_API_KEY is not set; translation requests will fail.")
    logger.info("Using Gemini model %s", GEMINI_MODEL)
    yield


app = FastAPI(
    title="TriTranslate API",
    version="0.1.0",
    description="Translate short text into three languages at once",
    lifespan=lifespan,
)

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"
api_router = APIRouter(prefix="/api")
api_router.include_router(translate.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable bodies get the same 400 envelope as the router's own checks.
    body = exc.body if isinstance(exc.body, dict) else {}
    try:
        validate_translation_request(body.get("text"), body.get("targetLanguages"))
    except TranslationRequestError as error:
        return error_response(error.status_code, error.message)
    return error_response(InvalidLanguageCount.status_code, InvalidLanguageCount.message)


@app.get("/health", include_in_schema=False)
@api_router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def landing_page() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html")


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(api_router)
