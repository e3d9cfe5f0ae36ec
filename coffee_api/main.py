from http import HTTPStatus
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from pymongo.errors import PyMongoError

import uvicorn

from coffee_api.config import app_config
from coffee_api.routers import users, coffee
from coffee_api.database.base_repo import BaseRepository
from coffee_api.dependencies.dependencies import create_repo
from coffee_api.handlers.exceptions import InvalidDocumentIdError
from coffee_api.middlewares.middleware import RequestLoggingMiddleware
from coffee_api.common.log import (
    log_app_startup, log_app_shutdown, log_server_listening, log_validation_error, log_database_error, set_log_level
)

GREETING = "HOT HOT HOT COFFEEEEEEE"


def _server_error() -> PlainTextResponse:
    return PlainTextResponse(HTTPStatus.INTERNAL_SERVER_ERROR.phrase, status_code = HTTPStatus.INTERNAL_SERVER_ERROR)


async def invalid_document_id_handler(request: Request, exc: InvalidDocumentIdError):
    log_validation_error("document_id", exc.message, {"method": request.method, "path": request.url.path})
    return _server_error()


async def database_error_handler(request: Request, exc: PyMongoError):
    log_database_error(f"{request.method} {request.url.path}", str(exc))
    return _server_error()


def create_app(repo: BaseRepository, database_url: str) -> FastAPI:
    """
    Build the FastAPI application around an already constructed repository.

    The repository lives as long as the app: it is connected on startup,
    closed on shutdown and never replaced in between.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_app_startup()
        await repo.connect(database_url)

        yield

        await repo.close()
        log_app_shutdown()

    app = FastAPI(title = "Coffee API", lifespan = lifespan)
    app.state.repo = repo

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins = app_config.CORS_ORIGINS,
        allow_methods = ["*"],
        allow_headers = ["*"],
    )

    app.add_exception_handler(InvalidDocumentIdError, invalid_document_id_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)

    @app.get("/", response_class = PlainTextResponse)
    async def root():
        return GREETING

    app.include_router(coffee.router)
    app.include_router(users.router)

    return app


set_log_level(app_config.LOG_LEVEL)

app = create_app(create_repo(), app_config.DATABASE_URL)


if __name__ == "__main__":
    log_server_listening(app_config.HOST, app_config.PORT)
    uvicorn.run(app, host = app_config.HOST, port = app_config.PORT)
