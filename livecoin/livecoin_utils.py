from decimal import Decimal
from typing import Mapping, Optional, Union
from urllib.parse import quote, urlencode


Scalar = Union[str, int, float, Decimal, bool]


# join paths with exactly one separator between each part
def join_paths(*paths: str) -> str:
    return "/".join(p.strip("/") for p in paths if p and p.strip("/"))


def format_param_value(value: Scalar) -> str:
    """
    Renders a scalar the way the exchange expects to see it on the wire.
    Booleans are lower case, numbers use plain positional notation (never an exponent).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def get_param_string(params: Optional[Mapping[str, Scalar]]) -> str:
    """
    Returns the canonical query string for a parameter mapping.

    Keys are sorted by code point, keys and values are percent-encoded with only
    alphanumerics and "-_.~" left as is (a space becomes %20, "/" becomes %2F).
    Parameters whose value is None are left out. The same string is signed and
    sent, so it must be computed exactly once per request.
    """
    if not params:
        return ""
    items = [(str(key), format_param_value(value))
             for key, value in params.items() if value is not None]
    return urlencode(sorted(items), quote_via=quote)


def convert_to_exchange_trading_pair(ticker: str, pair: str) -> str:
    return f"{ticker}/{pair}".upper()


def convert_to_exchange_currency(currency: str) -> str:
    return currency.upper()
