"""Exception handlers: plain-text 401s, JSON everything else."""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException


class GenerationError(Exception):
    """The text-generation service failed or returned unusable output."""


def setup_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException):
        if exc.status_code == 401:
            return PlainTextResponse(str(exc.detail), status_code=401)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        print(f"[AI] generation failed path={request.url.path}: {exc}", flush=True)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        print(f"[DB] error path={request.url.path}: {exc!r}", flush=True)
        return JSONResponse(status_code=500, content={"detail": "Database error"})
