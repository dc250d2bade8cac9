"""Dekigokoro: async Python client for the Dekigokoro currency API."""

__version__ = "0.1.0"

from .client import DekigokoroClient, create_dekigokoro_client
from .config import DekigokoroConfig, Settings, get_settings
from .exceptions import (
    DekigokoroAuthError,
    DekigokoroBadRequestError,
    DekigokoroDecodeError,
    DekigokoroError,
    DekigokoroHTTPError,
    DekigokoroNotFoundError,
    DekigokoroRateLimitError,
    DekigokoroServerError,
    DekigokoroTransportError,
    InvalidArgumentError,
)
from .models import (
    ChangeBalanceRequest,
    PlayerCurrency,
    PlayerCurrencyRanked,
    SetBalanceRequest,
)

__all__ = [
    "__version__",
    "DekigokoroClient",
    "create_dekigokoro_client",
    "DekigokoroConfig",
    "Settings",
    "get_settings",
    "DekigokoroError",
    "InvalidArgumentError",
    "DekigokoroTransportError",
    "DekigokoroDecodeError",
    "DekigokoroHTTPError",
    "DekigokoroBadRequestError",
    "DekigokoroAuthError",
    "DekigokoroNotFoundError",
    "DekigokoroRateLimitError",
    "DekigokoroServerError",
    "PlayerCurrency",
    "PlayerCurrencyRanked",
    "SetBalanceRequest",
    "ChangeBalanceRequest",
]
