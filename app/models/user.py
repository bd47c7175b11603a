# app/models/user.py
from sqlalchemy import Column, Integer, String, TIMESTAMP
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # no unique constraint; uniqueness is checked by the service before insert
    email = Column(String, nullable=False)
    created_at = Column("createdAt", TIMESTAMP(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
