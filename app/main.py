"""
FastAPI application entry point for the STEM keyword detection backend.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.api import explain, keywords
from app.schemas.keywords import ErrorResponse

import logging

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="STEM Keyword Detection Backend",
    description="Detects STEM terminology in OCR text and explains math content",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(keywords.router, prefix="/api/ai", tags=["Keyword Detection"])
app.include_router(explain.router, prefix="/api/ai", tags=["Explanation AI"])


def _error_body(message: str) -> dict:
    return ErrorResponse(error=message).model_dump(mode="json")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Return HTTP errors in the structured error shape."""
    return JSONResponse(status_code=exc.status_code, content=_error_body(str(exc.detail)))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Turn request validation failures into a readable 400 error."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(status_code=400, content=_error_body("; ".join(messages) or "Invalid request"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unexpected failures and return a generic error."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(status_code=500, content=_error_body("Internal server error"))


@app.on_event("startup")
async def startup_event():
    """Execute on application startup."""
    from agent.keyword_detection import get_default_dictionary

    dictionary = get_default_dictionary()
    logger.info("STEM Keyword Detection Backend starting...")
    logger.info(f"Port: {settings.PYTHON_BACKEND_PORT}")
    logger.info(f"CORS origins: {settings.allowed_origins_list}")
    logger.info(f"Keyword dictionary loaded: {len(dictionary.fields())} fields, {len(dictionary)} keywords")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {
        "service": "STEM Keyword Detection Backend",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/api/ai/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "message": "Keyword detection backend is running"
    }
