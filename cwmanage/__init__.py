"""
Client for the ConnectWise Manage REST API.

Some results come back as a single object, most as a paginated list. Use
Client.get_all for lists (it follows pagination) and Client.get_single for
endpoints such as /system/info that return one object.

    from cwmanage import Client, ClientBuilder

    config = ClientBuilder(company_id, public_key, private_key, client_id).build()
    client = Client(config)
    members = client.get_all("/system/members", [("fields", "id,identifier")])

Credentials can also be read from CWMANAGE_* environment variables (or a
.env file) with Client.from_env().
"""
from cwmanage.client import Client
from cwmanage.config import (
    DEFAULT_API_CODEBASE,
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    ClientBuilder,
    ClientConfig,
)
from cwmanage.exceptions import (
    ApplicationError,
    ConfigurationError,
    ConnectWiseError,
    CustomFieldNotFoundError,
    HTTPStatusError,
    NotFoundError,
    ParseError,
    TransportError,
)
from cwmanage.patch import PatchOperation, build_patch_body

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientBuilder",
    "ClientConfig",
    "DEFAULT_API_CODEBASE",
    "DEFAULT_API_URL",
    "DEFAULT_API_VERSION",
    "PatchOperation",
    "build_patch_body",
    "ConnectWiseError",
    "ConfigurationError",
    "TransportError",
    "HTTPStatusError",
    "ParseError",
    "ApplicationError",
    "NotFoundError",
    "CustomFieldNotFoundError",
]
