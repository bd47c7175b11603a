# app/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.user_repository import SqlAlchemyUserRepository, UserRepository
from app.schemas.user import ErrorOut, UserCreate, UserOut
from app.services.user_service import create_user, list_users

router = APIRouter(prefix="/users", tags=["Users"])

def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SqlAlchemyUserRepository(db)

@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorOut},
        status.HTTP_409_CONFLICT: {"model": ErrorOut},
    },
)
def create(payload: UserCreate, repository: UserRepository = Depends(get_user_repository)):
    """Create a user. 409 if the email is already taken."""
    return create_user(repository, str(payload.email))

@router.get("", response_model=List[UserOut])
def find_all(repository: UserRepository = Depends(get_user_repository)):
    return list_users(repository)
