from fastapi import APIRouter, Depends
from sqlmodel import Session, select
from app.core.database import get_session
from app.core.exceptions import AuthenticationError
from app.core.security import create_access_token
from app.models import User
from app.schemas.auth import LoginRequest, LoginResponse, TokenData, UserResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    session: Session = Depends(get_session)
):
    """Login with email and password and receive a bearer token."""
    user = session.exec(select(User).where(User.email == login_data.email)).first()

    if not user or not user.verify_password(login_data.password):
        logger.info(f"Failed login attempt for {login_data.email}")
        raise AuthenticationError("Invalid credentials")

    return LoginResponse(
        message="Login successful",
        data=TokenData(
            user=UserResponse.model_validate(user),
            access_token=create_access_token(user.id),
        ),
    )
