import os
import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from cwmanage.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# NA cloud instance. Point at your own cloud region or on-premise host with api_url.
DEFAULT_API_URL = "na.myconnectwise.net"
DEFAULT_API_CODEBASE = "v4_6_release"
DEFAULT_API_VERSION = "3.0"

ENV_PREFIX = "CWMANAGE_"
REQUIRED_ENV_VARS = ("COMPANY_ID", "PUBLIC_KEY", "PRIVATE_KEY", "CLIENT_ID")


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings shared by every request a client makes.

    Args:
        company_id: Company short name (the one used to log in to Manage)
        public_key: Public key of the API member
        private_key: Private key of the API member
        client_id: Client id registered with ConnectWise
        api_url: API host, without scheme
        codebase: Release codebase segment of the URL
        api_version: API version segment of the URL
        timeout: Seconds to wait on the transport, or None for the requests default
    """
    company_id: str
    public_key: str
    private_key: str = field(repr=False)
    client_id: str
    api_url: str = DEFAULT_API_URL
    codebase: str = DEFAULT_API_CODEBASE
    api_version: str = DEFAULT_API_VERSION
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be a positive number of seconds, got {self.timeout!r}")

    def with_overrides(self, **changes) -> "ClientConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ClientConfig":
        """
        Build a config from CWMANAGE_* environment variables.

        A .env file is loaded first: dotenv_path if given, otherwise the nearest
        .env found from the current working directory upwards. Variables
        already set in the environment take precedence over the file.
        """
        # Search from the working directory, not from this installed module
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(ENV_PREFIX + name)]
        if missing:
            names = ", ".join(ENV_PREFIX + name for name in missing)
            logger.error(f"Missing ConnectWise settings: {names}")
            raise ConfigurationError(f"{names} needs to be set")

        builder = ClientBuilder(
            os.getenv("CWMANAGE_COMPANY_ID"),
            os.getenv("CWMANAGE_PUBLIC_KEY"),
            os.getenv("CWMANAGE_PRIVATE_KEY"),
            os.getenv("CWMANAGE_CLIENT_ID"),
        )
        if os.getenv("CWMANAGE_API_URL"):
            builder.api_url(os.getenv("CWMANAGE_API_URL"))
        if os.getenv("CWMANAGE_CODEBASE"):
            builder.codebase(os.getenv("CWMANAGE_CODEBASE"))
        if os.getenv("CWMANAGE_API_VERSION"):
            builder.api_version(os.getenv("CWMANAGE_API_VERSION"))
        if os.getenv("CWMANAGE_TIMEOUT"):
            try:
                builder.timeout(float(os.getenv("CWMANAGE_TIMEOUT")))
            except ValueError:
                raise ConfigurationError(
                    f"CWMANAGE_TIMEOUT must be a number, got {os.getenv('CWMANAGE_TIMEOUT')!r}"
                )
        return builder.build()


class ClientBuilder:
    """
    Chained construction of a ClientConfig.

        config = (
            ClientBuilder("myco", "pub", "priv", "client-id")
            .codebase("v2022_1")
            .api_version("2022.1")
            .build()
        )
    """

    def __init__(self, company_id: str, public_key: str, private_key: str, client_id: str):
        self._settings = {
            "company_id": company_id,
            "public_key": public_key,
            "private_key": private_key,
            "client_id": client_id,
        }

    def api_url(self, api_url: str) -> "ClientBuilder":
        self._settings["api_url"] = api_url
        return self

    def codebase(self, codebase: str) -> "ClientBuilder":
        self._settings["codebase"] = codebase
        return self

    def api_version(self, api_version: str) -> "ClientBuilder":
        self._settings["api_version"] = api_version
        return self

    def timeout(self, timeout: Optional[float]) -> "ClientBuilder":
        self._settings["timeout"] = timeout
        return self

    def build(self) -> ClientConfig:
        return ClientConfig(**self._settings)
