from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str


class HttpPort(Protocol):
    def post_json(self, url: str, payload: dict, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """POST ``payload`` as JSON and return the raw status and body.

        Non-2xx statuses are returned, not raised. Network failures and
        timeouts raise TransportError.
        """
        ...
