import logging
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from reachout.api.deps import CurrentUser, DashboardDep, DataClientDep, SessionDep
from reachout.core.exceptions import AuthError, DataClientError
from reachout.models.user import User as UserModel
from reachout.schemas.user import LoginResponse, LogoutResponse, User

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
async def login(
    session: SessionDep,
    client: DataClientDep,
    form_data: OAuth2PasswordRequestForm = Depends(),
) -> Any:
    """
    OAuth2 compatible token login, get an access token for future requests.
    """
    try:
        auth = await client.sign_in(form_data.username, form_data.password)
    except AuthError as e:
        logger.warning(f"Failed sign-in for {form_data.username}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )
    except DataClientError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )

    user = session.get(UserModel, auth.user_id)
    return LoginResponse(
        access_token=auth.access_token,
        token_type="bearer",
        user=User.model_validate(user)
    )

@router.post("/logout", response_model=LogoutResponse)
async def logout(dashboard: DashboardDep) -> Any:
    """
    End the current session. The token used for this request stops working.
    """
    location = await dashboard.sign_out()
    return LogoutResponse(message="Signed out successfully", redirect=location)

@router.get("/me", response_model=User)
async def read_users_me(
    current_user: CurrentUser,
) -> Any:
    """
    Get current user.
    """
    return User.model_validate(current_user)
