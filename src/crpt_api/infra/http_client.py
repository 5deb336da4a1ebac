from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from ..core.errors import TransportError
from ..core.ports.http_port import HttpPort, HttpResponse

logger = logging.getLogger(__name__)


class HttpClient(HttpPort):
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            # A 3xx on a POST is a failed submission, not something to re-send
            follow_redirects=False,
        )

    def post_json(self, url: str, payload: dict, headers: Optional[Mapping[str, str]] = None) -> HttpResponse:
        try:
            resp = self._client.post(url, json=payload, headers=dict(headers or {}))
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out: %s", url, e)
            raise TransportError(f"Request to {url} timed out") from e
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, type(e).__name__)
            raise TransportError(f"Failed to reach {url}: {e}") from e
        return HttpResponse(status_code=resp.status_code, body=resp.text)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
