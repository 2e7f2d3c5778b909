from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(None, alias="fullName", examples=["Ann"], description="Display name")
    email: Optional[str] = Field(None, examples=["a@x.com"], description="Email used to log in")
    password: Optional[str] = Field(None, examples=["secret1"], description="Plaintext password, stored hashed")


class UserLogin(BaseModel):
    email: Optional[str] = Field(None, examples=["a@x.com"], description="Email of the user")
    password: Optional[str] = Field(None, examples=["secret1"], description="Password for the user account")


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., examples=[1], description="User identification number")
    full_name: Optional[str] = Field(None, serialization_alias="fullName", examples=["Ann"])
    email: Optional[str] = Field(None, examples=["a@x.com"])


class SignupResponse(BaseModel):
    message: str = Field(..., examples=["User registered successfully!"])
    user: UserResponse


class LoginResponse(BaseModel):
    token: str = Field(..., examples=["eyJhbGciOiJIUzI1NiIsInR"], description="JWT access token, valid for one hour")
    user_id: int = Field(..., serialization_alias="userId", examples=[1])
