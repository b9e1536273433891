"""Auth input schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from fallback_store.domain.enums import ProfileRole


class SignInWithPasswordCredentials(BaseModel):
    """Credentials for sign_in_with_password. The password is accepted but never checked."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr = Field(...)
    password: str = Field(..., min_length=1)


class SignUpCredentials(BaseModel):
    """Credentials and optional profile fields for sign_up."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr = Field(...)
    password: str = Field(..., min_length=1)
    first_name: str = ""
    last_name: str = ""
    role: ProfileRole = ProfileRole.PARTICIPANT
