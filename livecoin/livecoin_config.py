import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from livecoin import livecoin_constants as CONSTANTS
from livecoin.livecoin_auth import LivecoinAuth


ENV_PREFIX = "LIVECOIN_"


class LivecoinConfig(BaseModel):
    """
    Connection settings for a LivecoinClient. Credentials may stay empty when only
    public endpoints are used.
    """
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(default="")
    api_secret: SecretStr = Field(default=SecretStr(""))
    rest_url: str = Field(default=CONSTANTS.REST_URL)
    request_timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("rest_url")
    @classmethod
    def validate_rest_url(cls, v: str):
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"{v} is not an http(s) url")
        return v.rstrip("/")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> "LivecoinConfig":
        """
        Builds a config from <prefix>API_KEY, <prefix>API_SECRET, <prefix>REST_URL and
        <prefix>REQUEST_TIMEOUT. Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        fields = {
            "api_key": environ.get(f"{prefix}API_KEY"),
            "api_secret": environ.get(f"{prefix}API_SECRET"),
            "rest_url": environ.get(f"{prefix}REST_URL"),
            "request_timeout": environ.get(f"{prefix}REQUEST_TIMEOUT"),
        }
        return cls(**{k: v for k, v in fields.items() if v not in (None, "")})

    def create_auth(self) -> LivecoinAuth:
        return LivecoinAuth(api_key=self.api_key, secret_key=self.api_secret.get_secret_value())
