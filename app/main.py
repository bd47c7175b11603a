# app/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.core.config import Settings, load_settings
from app.core.errors import ConfigError, ConflictError
from app.core.logging_config import configure_logging
from app.database import create_db_engine, create_session_factory, init_db
from app.routers import users

logger = logging.getLogger("users_service.main")


def _error_body(status_code: int, message, error: str) -> dict:
    return {"statusCode": status_code, "message": message, "error": error}


async def _conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body(status.HTTP_409_CONFLICT, exc.message, "Conflict"),
    )


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        # drop the leading "body"/"query" segment so messages name the field
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field = ".".join(loc)
        messages.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(status.HTTP_400_BAD_REQUEST, messages, "Bad Request"),
    )


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    synchronize: Optional[bool] = None,
) -> FastAPI:
    """
    Build the application.

    Without an explicit engine the settings are loaded from the environment,
    so a missing DATABASE_* variable raises ConfigError before anything serves.
    """
    if engine is None:
        if settings is None:
            settings = load_settings()
        engine = create_db_engine(settings)
    if synchronize is None:
        synchronize = settings.synchronize if settings is not None else True

    init_db(engine, synchronize)

    app = FastAPI(title="Users service")
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_exception_handler(ConflictError, _conflict_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)

    app.include_router(users.router)

    @app.get("/")
    def root():
        return {"status": "ok"}

    return app


def run() -> None:
    import uvicorn

    try:
        settings = load_settings()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    configure_logging(settings.log_level)
    logger.info("Starting users service on http://%s:%s (env=%s)", settings.host, settings.port, settings.app_env)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
