"""Process-wide configuration for the Contrast connection, read once from the environment."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

HTTP_PROTOCOL = "http://"
HTTPS_PROTOCOL = "https://"

_REQUIRED_VARIABLES = {
    "host_name": "CONTRAST_HOST_NAME",
    "api_key": "CONTRAST_API_KEY",
    "service_key": "CONTRAST_SERVICE_KEY",
    "user_name": "CONTRAST_USERNAME",
    "org_id": "CONTRAST_ORG_ID",
}


class ContrastSettings(BaseSettings):
    """
    Immutable connection settings for the Contrast API, sourced from the environment or a .env file.

    Required values may be blank at construction time so tests can build partial settings;
    call `validate_required` before serving.

    Attributes:
        host_name: Contrast host, with or without a scheme (e.g. 'app.contrastsecurity.com').
        api_key: Organization API key.
        service_key: Service key of the API user.
        user_name: Username of the API user.
        org_id: Organization ID every request is scoped to.
        protocol: Scheme prepended when host_name carries none.
        http_proxy_host: Optional HTTP proxy host.
        http_proxy_port: Proxy port, defaults to 80 when a proxy host is set.
        timeout: Request timeout in seconds.
        log_level: Log level name for the server process.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    host_name: Optional[str] = Field(default=None, validation_alias="CONTRAST_HOST_NAME")
    api_key: Optional[str] = Field(default=None, validation_alias="CONTRAST_API_KEY")
    service_key: Optional[str] = Field(default=None, validation_alias="CONTRAST_SERVICE_KEY")
    user_name: Optional[str] = Field(default=None, validation_alias="CONTRAST_USERNAME")
    org_id: Optional[str] = Field(default=None, validation_alias="CONTRAST_ORG_ID")
    protocol: str = Field(default="https", validation_alias="CONTRAST_API_PROTOCOL")
    http_proxy_host: Optional[str] = Field(default=None, validation_alias="HTTP_PROXY_HOST")
    http_proxy_port: Optional[int] = Field(default=None, validation_alias="HTTP_PROXY_PORT")
    timeout: float = Field(default=60.0, gt=0, validation_alias="CONTRAST_TIMEOUT")
    log_level: str = Field(default="INFO", validation_alias="CONTRAST_MCP_LOG_LEVEL")

    def validate_required(self) -> None:
        """Fail fast when any required credential is missing.

        Raises:
            ConfigurationError: Naming every missing environment variable.
        """
        missing = [env for field, env in _REQUIRED_VARIABLES.items() if not getattr(self, field)]
        if missing:
            msg = "Missing required Contrast configuration. Set the following environment variables: " + ", ".join(
                missing
            )
            logger.error(msg)
            raise ConfigurationError(msg)

    @property
    def base_url(self) -> Optional[str]:
        """Scheme and host without a trailing slash."""
        return get_protocol_and_server(self.host_name, self.protocol)

    @property
    def api_url(self) -> str:
        """Root of the REST API all client paths are relative to."""
        base = self.base_url
        if base is None:
            raise ConfigurationError("CONTRAST_HOST_NAME is not configured.")
        return f"{base}/Contrast/api"

    @property
    def proxy_url(self) -> Optional[str]:
        """HTTP proxy URL, or None when no proxy host is configured."""
        if not self.http_proxy_host:
            return None
        return f"http://{self.http_proxy_host}:{self.http_proxy_port or 80}"


def get_protocol_and_server(host_name: Optional[str], protocol: Optional[str] = "https") -> Optional[str]:
    """Normalize a configured host into 'scheme://host' form.

    A host that already carries http:// or https:// is kept as is; otherwise the given
    protocol (https when blank) is prepended. Trailing slashes are removed.

    Args:
        host_name: Hostname, with or without a scheme.
        protocol: Scheme to prepend when host_name has none.

    Returns:
        The normalized URL, or None for a missing or blank host.

    Raises:
        ConfigurationError: If host_name carries an unsupported scheme.
    """
    if host_name is None:
        return None

    host_name = host_name.strip()
    if not host_name:
        return None

    if "://" in host_name:
        if not (host_name.startswith(HTTP_PROTOCOL) or host_name.startswith(HTTPS_PROTOCOL)):
            raise ConfigurationError(
                f"Invalid protocol in hostname: {host_name}. Only http:// and https:// are supported."
            )
        result = host_name
    else:
        effective_protocol = protocol.strip() if protocol and protocol.strip() else "https"
        result = f"{effective_protocol}://{host_name}"

    return result.rstrip("/")
