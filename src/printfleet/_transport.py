"""JSON-over-HTTP transport for the fleet server."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from printfleet._redact import redact_for_log
from printfleet.config import FleetConfig
from printfleet.exceptions import FleetTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        ...


class HttpTransport:
    """aiohttp transport returning decoded JSON bodies."""

    def __init__(self, config: FleetConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if self._config.access_token:
            headers["authorization"] = f"Bearer {self._config.access_token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Empty bodies (e.g. ``204 No Content``) decode to ``None``.
        No retries are attempted; any failure raises
        :class:`FleetTransportError`.
        """
        url = f"{self._config.base_url}{endpoint}"
        _logger.debug("%s %s", method, url)
        if self._config.api_trace_enabled and json_body is not None:
            _logger.debug("Request body %s: %s", endpoint, redact_for_log(json_body))

        try:
            async with self._http.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=self._headers(),
                timeout=self._timeout,
                ssl=self._config.verify_ssl,
            ) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise FleetTransportError(
                        f"HTTP {resp.status} from {method} {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except FleetTransportError:
            raise
        except TimeoutError as exc:
            raise FleetTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise FleetTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        if not text.strip():
            return None

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FleetTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=resp.status,
                endpoint=endpoint,
            ) from exc

        if self._config.api_trace_enabled:
            _logger.debug("Response body %s: %s", endpoint, redact_for_log(body))
        return body
