"""Client configuration for printfleet."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from printfleet._constants import DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from printfleet.exceptions import FleetConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class FleetConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the fleet server (e.g. ``"http://fleet.local:4000"``).
        A trailing slash is stripped.
    access_token : str or None
        Bearer token sent as ``Authorization`` header. ``None`` sends no
        header, for servers running without login.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.  The
        transport applies it; the state layer imposes no timeouts.
    verify_ssl : bool
        Verify TLS certificates for ``https`` base URLs.
    user_agent : str
        ``User-Agent`` header value.
    api_trace_enabled : bool
        Log redacted request and response bodies at DEBUG level.
    """

    base_url: str
    access_token: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    verify_ssl: bool = True
    user_agent: str = USER_AGENT
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip().rstrip("/")
        if not base_url:
            raise FleetConfigError("base_url must be non-empty")
        if self.request_timeout <= 0:
            raise FleetConfigError("request_timeout must be positive")
        object.__setattr__(self, "base_url", base_url)

    @classmethod
    def from_env(cls, **overrides: Any) -> FleetConfig:
        """Create configuration from environment variables.

        Reads ``PRINTFLEET_BASE_URL`` and the optional ``PRINTFLEET_*``
        variables. Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        FleetConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PRINTFLEET_BASE_URL": "base_url",
            "PRINTFLEET_ACCESS_TOKEN": "access_token",
            "PRINTFLEET_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("PRINTFLEET_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise FleetConfigError(f"PRINTFLEET_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "verify_ssl" not in overrides:
            config_kwargs["verify_ssl"] = _env_bool(env.get("PRINTFLEET_VERIFY_SSL"), True)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("PRINTFLEET_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)
        if "base_url" not in config_kwargs:
            raise FleetConfigError("PRINTFLEET_BASE_URL is not set")

        return cls(**config_kwargs)
