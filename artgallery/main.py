import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from artgallery.api.routes import auth, galleries
from artgallery.core.exceptions import GalleryAPIError

# ⭐ Import logging system
from artgallery.core.logging_config import get_logger

logger = get_logger()

app = FastAPI(
    title="Virtual Exhibition Gallery API",
    version="1.0.0",
    description="API for galleries, their halls and gallery authors"
)

# ⭐ Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")

    try:
        response = await call_next(request)
        logger.info(f"RESPONSE: {response.status_code} {request.url}")
        return response

    except Exception as e:
        logger.error(f"ERROR: {request.url} -> {str(e)}")
        raise e


# ⭐ CORS (important for frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------- ERROR ENVELOPE --------
def failure(status_code: int, message: str, headers=None):
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


@app.exception_handler(GalleryAPIError)
async def gallery_error_handler(request: Request, exc: GalleryAPIError):
    return failure(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return failure(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Details stay in the logs
    logger.warning(f"VALIDATION: {request.method} {request.url} -> {exc.errors()}")
    return failure(400, "Invalid request")


# -------- ROUTERS REGISTER ORDER MATTERS --------
app.include_router(auth.router)
app.include_router(galleries.router)

@app.get("/", tags=["Root"])
def root():
    return {"message": "Backend running successfully"}
