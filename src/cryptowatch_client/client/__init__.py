"""HTTP client for the Cryptowatch REST API."""

from cryptowatch_client.client.envelope import ApiRequester, minutes_until_reset, unwrap
from cryptowatch_client.client.rest_client import CryptowatchClient
from cryptowatch_client.client.routes import Route

__all__ = [
    "ApiRequester",
    "CryptowatchClient",
    "Route",
    "minutes_until_reset",
    "unwrap",
]
