from .client import AddressClient
from .config_types import ClientConfig
from .errors import AddressClientError, ConfigurationError, RequestFailed, ResponseDecodeError
from .signing import FeePriority

__all__ = [
    "AddressClient",
    "ClientConfig",
    "AddressClientError",
    "ConfigurationError",
    "RequestFailed",
    "ResponseDecodeError",
    "FeePriority",
]
