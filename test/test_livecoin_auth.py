import hashlib
import hmac

import pytest
from pydantic import ValidationError

from livecoin.livecoin_auth import LivecoinAuth


def reference_sign(secret: str, message: str) -> str:
    return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest().upper()


def test_signature_matches_reference_hmac():
    message = "currencyPair=BTC%2FUSD&price=10000&quantity=0.1"
    auth = LivecoinAuth(api_key="key", secret_key="s3cr3t")
    signature = auth.sign(message)
    assert signature == reference_sign("s3cr3t", message)
    assert len(signature) == 64
    assert signature == signature.upper()


def test_signing_is_deterministic():
    auth = LivecoinAuth(api_key="key", secret_key="s3cr3t")
    assert auth.sign("currency=BTC") == auth.sign("currency=BTC")


def test_signature_changes_with_message_or_secret():
    auth = LivecoinAuth(api_key="key", secret_key="s3cr3t")
    base = auth.sign("currency=BTC")
    assert auth.sign("currency=BTD") != base
    assert LivecoinAuth(api_key="key", secret_key="s3cr3T").sign("currency=BTC") != base


def test_empty_payload_is_signed():
    auth = LivecoinAuth(api_key="key", secret_key="s3cr3t")
    assert auth.sign("") == reference_sign("s3cr3t", "")


def test_get_headers():
    auth = LivecoinAuth(api_key="my-key", secret_key="s3cr3t")
    headers = auth.get_headers("orderId=88504958")
    assert headers == {
        "API-key": "my-key",
        "Sign": reference_sign("s3cr3t", "orderId=88504958"),
    }


def test_empty_credentials_still_sign():
    headers = LivecoinAuth().get_headers("currency=BTC")
    assert headers["API-key"] == ""
    assert headers["Sign"] == reference_sign("", "currency=BTC")


def test_auth_is_immutable():
    auth = LivecoinAuth(api_key="key", secret_key="s3cr3t")
    with pytest.raises(ValidationError):
        auth.api_key = "other"
    with pytest.raises(ValidationError):
        auth.secret_key = "other"
    assert auth.get_headers("")["API-key"] == "key"


def test_repr_hides_secret():
    assert "s3cr3t" not in repr(LivecoinAuth(api_key="key", secret_key="s3cr3t"))
