from livecoin.livecoin_auth import LivecoinAuth
from livecoin.livecoin_client import LivecoinClient
from livecoin.livecoin_config import LivecoinConfig
from livecoin.livecoin_errors import TransportError
from livecoin.livecoin_request_handler import LivecoinRequestHandler

__all__ = [
    "LivecoinAuth",
    "LivecoinClient",
    "LivecoinConfig",
    "LivecoinRequestHandler",
    "TransportError",
]
