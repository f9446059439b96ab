import hmac
import hashlib
from typing import Dict

from pydantic import BaseModel, ConfigDict, SecretStr

from livecoin import livecoin_constants as CONSTANTS


class LivecoinAuth(BaseModel):
    """
    Auth class required by Livecoin API. Instances are immutable, login with a new one instead.
    """
    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    secret_key: SecretStr = SecretStr("")

    def __init__(self, api_key: str = "", secret_key: str = ""):
        super().__init__(api_key=api_key, secret_key=secret_key)

    def sign(self, payload: str) -> str:
        """
        Signs the canonical parameter string.
        :return: upper case hex HMAC-SHA256 digest keyed by the secret
        """
        return hmac.new(
            self.secret_key.get_secret_value().encode('utf-8'),
            payload.encode('utf-8'),
            hashlib.sha256
        ).hexdigest().upper()

    def get_headers(self, payload: str) -> Dict[str, str]:
        """
        Generates authenticated headers for the request.
        :param payload: the canonical parameter string that is sent with the request
        :return: a dictionary of auth headers
        """
        return {
            CONSTANTS.API_KEY_HEADER: self.api_key,
            CONSTANTS.SIGN_HEADER: self.sign(payload),
        }
