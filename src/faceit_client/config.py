"""Client configuration."""

import logging
import ssl
from dataclasses import dataclass, field

import httpx

from faceit_client.auth.credentials import CredentialResolver

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://open.faceit.com"
DEFAULT_TIMEOUT = 30.0

BASE_URL_ENV_VAR = "FACEIT_BASE_URL"
TIMEOUT_ENV_VAR = "FACEIT_TIMEOUT"


@dataclass(frozen=True)
class ClientConfig:
    """Read-only settings shared by every call a client makes.

    Attributes:
        base_url: API host; endpoint paths (``/data/v4/...``) are appended to it.
        api_key: Bearer credential (API key or OAuth2 access token). None means
            unauthenticated requests.
        timeout: Per-request deadline in seconds.
        verify: TLS verification: True, False, or an ``ssl.SSLContext``.
        transport: Custom httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT
    verify: ssl.SSLContext | bool = True
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        # Normalize once so URL joining never doubles the slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.api_key is not None and not self.api_key.strip():
            object.__setattr__(self, "api_key", None)

    @property
    def authenticated(self) -> bool:
        return self.api_key is not None

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        verify: ssl.SSLContext | bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
        resolver: CredentialResolver | None = None,
    ) -> "ClientConfig":
        """Build a configuration from explicit values, the environment and .env.

        Explicit arguments win over ``FACEIT_API_KEY`` / ``FACEIT_API_KEY_FILE``,
        ``FACEIT_BASE_URL`` and ``FACEIT_TIMEOUT``, which win over defaults.

        Raises:
            ValueError: FACEIT_TIMEOUT is not a number.
        """
        resolver = resolver or CredentialResolver()

        resolved_key = resolver.resolve_api_key(api_key)
        resolved_url = resolver.resolve(
            value=base_url,
            env_var_name=BASE_URL_ENV_VAR,
            default=DEFAULT_BASE_URL,
            secret=False,
        )

        if timeout is None:
            raw_timeout = resolver.resolve(env_var_name=TIMEOUT_ENV_VAR, secret=False)
            try:
                timeout = float(raw_timeout) if raw_timeout is not None else DEFAULT_TIMEOUT
            except ValueError:
                raise ValueError(f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}") from None

        return cls(
            base_url=resolved_url or DEFAULT_BASE_URL,
            api_key=resolved_key,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )
