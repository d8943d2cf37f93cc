# backend/app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .database import engine, SessionLocal
from . import models
from .api import projects, files, chat, ai
from .config import settings
from .schemas.base import ErrorResponse
from .services.ai import ai_service
from .services.seed import seed_service
from .utils.logging import api_logger

# Create all tables on startup
models.Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_service.seed_demo_data(db)
        finally:
            db.close()
    if not ai_service.api_key:
        api_logger.warning("OPENAI_API_KEY is not set, AI endpoints will fail")
    yield


app = FastAPI(title="CodeForge IDE API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify your actual frontend URL
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(projects.router)
app.include_router(files.router)
app.include_router(chat.router)
app.include_router(ai.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    api_logger.warning("Rejected invalid request", extra={
        "path": request.url.path,
        "method": request.method,
        "error_count": len(exc.errors())
    })
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request data", detail=jsonable_encoder(exc.errors())).model_dump()
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    api_logger.error("Unhandled error", extra={
        "path": request.url.path,
        "method": request.method,
        "error": str(exc)
    }, exc_info=exc)
    return JSONResponse(status_code=500, content=ErrorResponse(error="Internal server error").model_dump(exclude_none=True))


@app.get("/")
async def root():
    return {"message": "CodeForge IDE API is running"}
