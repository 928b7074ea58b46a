from typing import List, Optional

from pydantic import BaseModel, EmailStr, constr

NonEmptyStr = constr(strip_whitespace=True, min_length=1, max_length=255)


class SignUpFields(BaseModel):
    username: NonEmptyStr
    email: EmailStr
    # Passwords are not stripped; surrounding spaces are part of the secret.
    password: constr(min_length=1, max_length=1024)


class SignUpRequest(BaseModel):
    user: SignUpFields


class LoginFields(BaseModel):
    email: EmailStr
    password: constr(min_length=1, max_length=1024)


class LoginRequest(BaseModel):
    user: LoginFields


class UserOut(BaseModel):
    """Public view of an account. Never carries the password hash."""

    email: str
    username: str
    token: str

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    user: UserOut


class ProfileOut(BaseModel):
    username: str
    bio: Optional[str] = None
    image: Optional[str] = None

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    profile: ProfileOut


class ValidationResult(BaseModel):
    loc: str
    msg: str


class MessageResponse(BaseModel):
    message: str
    errors: Optional[List[ValidationResult]] = None


def format_errors(errors) -> List[ValidationResult]:
    return [
        ValidationResult(loc=".".join(str(p) for p in error["loc"]), msg=error["msg"])
        for error in errors
    ]
