import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .logging_config import setup_logging
from .db import configure_db, init_db, session_scope
from .errors import PlayerDirectoryError
from .seed import seed_accounts
from .settings import Settings
from .config import CORS_ALLOW_ORIGINS

from .routers.auth import router as auth_router
from .routers.me import router as me_router
from .routers.players import router as players_router

log = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db()
        with session_scope() as s:
            seed_accounts(s, settings)
        log.info("DB initialized")
        yield

    app = FastAPI(
        title="Player Directory",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    configure_db(settings.db_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PlayerDirectoryError)
    async def player_directory_error(request: Request, exc: PlayerDirectoryError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    # Wrong shapes (non-object body, bad JSON) are structural errors, not 422s
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": "Malformed request", "errors": ["MalformedRequest"]})

    app.include_router(auth_router)
    app.include_router(me_router)
    app.include_router(players_router)

    return app
