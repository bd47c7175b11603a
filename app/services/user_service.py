# app/services/user_service.py
import datetime
import logging
from typing import List

from app.core.errors import EmailAlreadyTakenError
from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger("users_service.users")


def create_user(repository: UserRepository, email: str) -> User:
    """
    Persist a new user unless one with exactly this email already exists.
    Raises EmailAlreadyTakenError on a duplicate; nothing is written in that case.
    """
    existing = repository.find_by_email(email)
    if existing is not None:
        logger.warning("Rejected duplicate email (existing id=%s)", existing.id)
        raise EmailAlreadyTakenError(email)

    user = User(email=email, created_at=datetime.datetime.now(datetime.timezone.utc))
    user = repository.insert(user)
    logger.info("Created user id=%s", user.id)
    return user


def list_users(repository: UserRepository) -> List[User]:
    return repository.list_all()
