# app/repositories/user_repository.py
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository(Protocol):
    """Persistence operations the user service depends on."""

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def insert(self, user: User) -> User:
        ...

    def list_all(self) -> List[User]:
        ...


class SqlAlchemyUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def insert(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_all(self) -> List[User]:
        return self.db.query(User).all()
