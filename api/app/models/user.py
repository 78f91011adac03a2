"""
User model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
import hashlib


class User(SQLModel, table=True):
    """User table - API accounts allowed to manage translations."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)  # Email address, used to log in
    password: str  # Hashed password
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @staticmethod
    def hash_password(password: str) -> str:
        """Simple password hashing using SHA256."""
        return hashlib.sha256(password.encode()).hexdigest()

    def verify_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""
        return self.password == self.hash_password(password)
