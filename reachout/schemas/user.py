from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, EmailStr
from reachout.models.user import UserRole, UserStatus


class User(BaseModel):
    id: UUID
    email: EmailStr
    full_name: str
    role: UserRole
    status: UserStatus
    created_at: datetime

    class Config:
        from_attributes = True

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class LoginResponse(Token):
    user: User

class LogoutResponse(BaseModel):
    message: str
    redirect: str
