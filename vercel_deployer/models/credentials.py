"""Vercel credential model."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class VercelCredentials(BaseModel):
    """Access token plus optional team scope."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    access_token: SecretStr = Field(..., alias="accessToken")
    team_id: str | None = Field(default=None, alias="teamId")

    @field_validator("access_token")
    @classmethod
    def check_token(cls, value: SecretStr) -> SecretStr:
        token = value.get_secret_value().strip()
        if not token:
            raise ValueError("Vercel access token is required")
        # Legacy tokens contain ':' and are rejected by the API
        if ":" in token:
            raise ValueError(
                "Legacy Vercel token format; create a new token at "
                "https://vercel.com/account/tokens"
            )
        return SecretStr(token)

    @field_validator("team_id")
    @classmethod
    def blank_team_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
