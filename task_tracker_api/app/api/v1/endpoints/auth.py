"""
Authentication endpoints for API v1.

``/signup`` registers a user and ``/signin`` exchanges credentials for a
bearer token used by the task routes.
"""

from fastapi import APIRouter, HTTPException, status

from task_tracker_api.app.core.exceptions import AuthenticationError, ConflictError
from task_tracker_api.app.schemas.user import AccessToken, AuthCredentials, UserRead
from task_tracker_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def sign_up(credentials: AuthCredentials) -> UserRead:
    """Register a new user.  Responds 409 if the username is taken."""
    try:
        return await UserService().sign_up(credentials)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/signin", response_model=AccessToken)
async def sign_in(credentials: AuthCredentials) -> AccessToken:
    """Return an access token.  Responds 401 on bad credentials."""
    try:
        return await UserService().sign_in(credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
