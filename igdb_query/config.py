"""Configuration classes for igdb-query."""

import os
from dataclasses import dataclass
from typing import Dict, Optional

from igdb_query.errors import MissingCredentials
from igdb_query.pagination import DEFAULT_MAX_LIMIT, DEFAULT_MAX_OFFSET

DEFAULT_BASE_URL = "https://api.igdb.com/v4/"
DEFAULT_IMAGE_BASE_URL = "https://images.igdb.com/igdb/image/upload/"

CLIENT_ID_ENV = "IGDB_CLIENT_ID"
ACCESS_TOKEN_ENV = "IGDB_ACCESS_TOKEN"


@dataclass(frozen=True)
class Credentials:
    """
    Credentials sent with every request.

    Attributes:
        client_id: Identifying key, sent as the ``Client-ID`` header
        access_token: Optional access token, sent as ``Authorization: Bearer ...``
    """

    client_id: str
    access_token: Optional[str] = None

    def __post_init__(self):
        if not self.client_id or not self.client_id.strip():
            raise MissingCredentials("A client id is required.")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Credentials":
        """
        Read credentials from the environment.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Credentials: Credentials from IGDB_CLIENT_ID and IGDB_ACCESS_TOKEN

        Raises:
            MissingCredentials: If IGDB_CLIENT_ID is not set
        """
        environ = os.environ if environ is None else environ
        client_id = environ.get(CLIENT_ID_ENV, "")
        if not client_id.strip():
            raise MissingCredentials(f"Environment variable {CLIENT_ID_ENV} is not set.")
        return cls(client_id=client_id, access_token=environ.get(ACCESS_TOKEN_ENV) or None)

    def headers(self) -> Dict[str, str]:
        """Authentication headers for a request."""
        headers = {"Client-ID": self.client_id}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers


@dataclass
class ClientConfig:
    """
    Configuration for Client behavior.

    Attributes:
        base_url: Root URL of the API; a trailing slash is added if missing
        image_base_url: Root URL that sized image URLs are built on
        max_limit: Largest accepted result limit (default: 50, the API maximum)
        max_offset: Largest accepted result offset (default: 10000, the API maximum)
        timeout: Timeout in seconds for the default transport (default: 10)
        user_agent: Optional User-Agent header

    Example:
        config = ClientConfig(base_url="https://proxy.example.com/igdb/", timeout=5)
        client = Client(Credentials("my-id", "my-token"), config=config)
    """

    base_url: str = DEFAULT_BASE_URL
    image_base_url: str = DEFAULT_IMAGE_BASE_URL
    max_limit: int = DEFAULT_MAX_LIMIT
    max_offset: int = DEFAULT_MAX_OFFSET
    timeout: float = 10.0
    user_agent: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values."""
        if not self.base_url.strip():
            raise ValueError("base_url must not be empty")
        if not self.image_base_url.strip():
            raise ValueError("image_base_url must not be empty")
        if self.max_limit < 1:
            raise ValueError("max_limit must be >= 1")
        if self.max_limit > DEFAULT_MAX_LIMIT:
            raise ValueError(f"max_limit cannot exceed {DEFAULT_MAX_LIMIT}")
        if not 0 <= self.max_offset <= DEFAULT_MAX_OFFSET:
            raise ValueError(f"max_offset must be between 0 and {DEFAULT_MAX_OFFSET}")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        if not self.image_base_url.endswith("/"):
            self.image_base_url += "/"

    def url_for(self, path: str) -> str:
        """
        Join a resource path onto base_url.

        Args:
            path: Path relative to the API root, e.g. ``games/count``

        Returns:
            str: Absolute URL
        """
        return self.base_url + path.lstrip("/")


# Pre-defined configurations for common use cases
class ClientPresets:
    """Pre-defined ClientConfig presets for common use cases."""

    @staticmethod
    def default() -> ClientConfig:
        """Default configuration against the public API."""
        return ClientConfig()

    @staticmethod
    def testing(base_url: str = "http://testserver/") -> ClientConfig:
        """
        Configuration for a local or in-process test server.

        Args:
            base_url: Root URL of the test server
        """
        return ClientConfig(base_url=base_url, timeout=1.0)
