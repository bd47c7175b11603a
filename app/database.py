# app/database.py
import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import Settings

logger = logging.getLogger("users_service.database")

Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    return create_engine(settings.database_url, echo=settings.database_echo, future=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def init_db(engine: Engine, synchronize: bool) -> None:
    """Create missing tables from the model metadata when synchronize mode is on."""
    # import models so SQLAlchemy registers them
    import app.models.user  # noqa: F401

    if not synchronize:
        logger.info("Schema synchronize disabled; expecting tables to exist")
        return
    Base.metadata.create_all(bind=engine)
    logger.info("Schema synchronized for tables: %s", ", ".join(sorted(Base.metadata.tables)))


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
