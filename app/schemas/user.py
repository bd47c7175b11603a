# app/schemas/user.py
from datetime import datetime
from typing import Any, List, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

class UserCreate(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        # validate only; the address is stored exactly as submitted
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(f"value is not a valid email address: {exc}") from None
        return v

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")

class ErrorOut(BaseModel):
    statusCode: int
    message: Union[str, List[Any]]
    error: str
