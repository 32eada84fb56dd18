from typing import Optional

from pydantic import BaseModel, Field

from app.models.enums import Role
from app.schemas.common import CamelModel


class UserLogin(BaseModel):
    username: str
    password: str


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    name: Optional[str] = None


# no password field: hashes never leave the API
class UserOut(CamelModel):
    id: int
    username: str
    role: Role
    name: Optional[str] = None
    department: Optional[str] = None


class LoginOut(UserOut):
    access_token: str
    token_type: str = "bearer"
