from __future__ import annotations

import logging
from typing import Optional

from ..config.tokens import token_fingerprint
from ..core.errors import ConfigurationError
from ..core.ports.token_port import TokenProviderPort

logger = logging.getLogger(__name__)


class StaticTokenProvider(TokenProviderPort):
    """Serve a token obtained out of band (environment, secret store, CLI flag)."""

    def __init__(self, token: Optional[str]) -> None:
        self._token = token
        if token:
            logger.debug("Using static registry token %s", token_fingerprint(token))

    def get_token(self) -> str:
        if not self._token:
            logger.error("No registry token configured")
            raise ConfigurationError("No registry token configured (set CRPT_API_TOKEN or pass token=...)")
        return self._token
