from collections.abc import Generator
from datetime import datetime, timezone
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from reachout.core.config import settings
from reachout.core.database import db
from reachout.core.security import decode_access_token
from reachout.models.user import RevokedToken, User as UserModel, UserRole, UserStatus
from reachout.services.dashboard import AdminDashboardController, DashboardContext
from reachout.services.data_client import AuthSession, DataClient, SqlDataClient


class TokenPayload(BaseModel):
    sub: str | None = None
    jti: str | None = None
    exp: int | None = None

# OAuth2 scheme setup
reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login"
)

_data_client = SqlDataClient(db)

def get_db() -> Generator[Session, None, None]:
    with db.session() as session:
        yield session

def get_data_client() -> DataClient:
    return _data_client

# Type dependencies
SessionDep = Annotated[Session, Depends(get_db)]
TokenDep = Annotated[str, Depends(reusable_oauth2)]
DataClientDep = Annotated[DataClient, Depends(get_data_client)]


def check_user_status(user: UserModel) -> None:
    """
    Centralized user status checking logic to ensure consistent error handling
    Raises appropriate HTTPException based on user status
    """
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    if user.status != UserStatus.ACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account has been disabled. Please contact support for assistance."
        )


def get_auth_session(
    session: SessionDep,
    token: TokenDep,
) -> AuthSession:
    """
    Validate the access token and return the operator's session.
    Signed-out (revoked) tokens are refused.
    """
    payload = decode_access_token(token)
    try:
        token_data = TokenPayload(**payload)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Could not validate credentials",
        )

    if token_data.sub is None or token_data.jti is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token payload"
        )

    try:
        user_id = UUID(token_data.sub)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                            detail="Invalid userID format")

    if session.get(RevokedToken, token_data.jti) is not None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session has ended. Please sign in again.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = session.query(UserModel).filter(UserModel.id == user_id).first()

    # Centralized status checking
    check_user_status(user)

    return AuthSession(
        user_id=user.id,
        email=user.email,
        access_token=token,
        jti=token_data.jti,
        expires_at=datetime.fromtimestamp(token_data.exp or 0, tz=timezone.utc),
    )

# Current operator dependency
CurrentSession = Annotated[AuthSession, Depends(get_auth_session)]


def get_current_user(session: SessionDep, auth: CurrentSession) -> UserModel:
    return session.get(UserModel, auth.user_id)

CurrentUser = Annotated[UserModel, Depends(get_current_user)]


def get_current_operator(current_user: CurrentUser) -> UserModel:
    """
    Verify the current user may use the admin dashboard
    """
    if current_user.role not in (UserRole.SUPER_ADMIN, UserRole.ADMIN):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return current_user

CurrentOperator = Annotated[UserModel, Depends(get_current_operator)]


def get_dashboard(
    client: DataClientDep,
    auth: CurrentSession,
    operator: CurrentOperator,
) -> AdminDashboardController:
    return AdminDashboardController(DashboardContext(client=client, auth=auth))

DashboardDep = Annotated[AdminDashboardController, Depends(get_dashboard)]
