from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Login request schema."""
    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Password")


class UserResponse(BaseModel):
    """User response schema (without password)."""
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class TokenData(BaseModel):
    """Issued token and the user it belongs to."""
    user: UserResponse
    access_token: str
    token_type: str = "Bearer"


class LoginResponse(BaseModel):
    """Authentication response schema."""
    success: bool = True
    message: str
    data: TokenData
