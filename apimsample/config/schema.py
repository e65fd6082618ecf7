"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator


class ApiSettings(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    bearer_token: str = ""

    @field_validator("api_key", "bearer_token")
    @classmethod
    def _ascii_header_value(cls, v: str) -> str:
        # Both are sent as HTTP header values, which httpx encodes as ASCII
        if not v.isascii():
            raise ValueError("must contain only ASCII characters")
        return v


class AuthenticationSettings(BaseModel):
    """Identity provider settings, consumed by the backend only."""

    model_config = {"extra": "forbid"}

    authority: str = ""
    audience: str = ""
    swagger_client_id: str = ""


class FrontendSettings(BaseModel):
    model_config = {"extra": "forbid"}

    title: str = "APIM Sample Client"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiSettings
    authentication: AuthenticationSettings = AuthenticationSettings()
    frontend: FrontendSettings = FrontendSettings()
