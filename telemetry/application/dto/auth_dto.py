from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class _Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserRegistrationRequest(_Credentials):
    """DTO for user registration request"""


class UserLoginRequest(_Credentials):
    """DTO for user login request"""


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
