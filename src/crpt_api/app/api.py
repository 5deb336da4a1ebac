from __future__ import annotations

from dependency_injector import providers
from pydantic import ValidationError

from .container import Container
from ..config.settings import AppConfig
from ..core.cancellation import CancellationToken
from ..core.domain.enums import ProductGroup, TimeUnit
from ..core.domain.models import Document
from ..core.errors import ConfigurationError
from ..core.ports.token_port import TokenProviderPort
from ..infra.rate_limiter import SlidingWindowRateLimiter


class CrptClient:
    """Rate-limited client for the registry document API.

    One client owns one rate limiter. It is safe to share a client between threads:
    every call to :meth:`create_document` waits on the same sliding window.

    Example:
        # No more than 5 documents per second
        with CrptClient(time_unit=TimeUnit.SECONDS, request_limit=5, token="...") as client:
            doc_id = client.create_document(document, signature)

        # Token from a custom auth flow
        client = CrptClient(request_limit=100, time_unit="minute", token_provider=my_auth)

        # Bounded wait, cancellable from a shutdown handler
        stop = CancellationToken()
        client.create_document(document, signature, cancel_token=stop, timeout=10.0)
    """

    def __init__(
        self,
        *,
        time_unit: TimeUnit | str | None = None,
        request_limit: int | None = None,
        base_url: str | None = None,
        window_seconds: float | None = None,
        token: str | None = None,
        token_provider: TokenProviderPort | None = None,
        timeout_seconds: float | None = None,
        product_group: ProductGroup | str | None = None,
    ):
        """Initialize the registry client.

        Args:
            time_unit: Window length as one unit of time (e.g., TimeUnit.MINUTES or "minute").
                      If None, uses CRPT_API_WINDOW_SECONDS or default (1 second).
            request_limit: Maximum number of requests per window. Must be positive.
                          If None, uses CRPT_API_REQUEST_LIMIT or default (10).
            base_url: Registry API base URL. If None, uses CRPT_API_BASE_URL or the
                     production endpoint.
            window_seconds: Window length in seconds; takes precedence over time_unit.
            token: Static bearer token. If None, uses CRPT_API_TOKEN.
            token_provider: Object with get_token(); replaces the static token entirely.
            timeout_seconds: HTTP timeout. If None, uses CRPT_API_TIMEOUT_SECONDS or 30.
            product_group: Product group sent with every document (default: clothes).

        Raises:
            ConfigurationError: If request_limit or the window is not positive, or
                time_unit is not a known unit.
        """
        self._container = Container()

        # Build config dict with only provided values
        config_dict: dict[str, object] = {}
        if time_unit is not None:
            unit = time_unit if isinstance(time_unit, TimeUnit) else TimeUnit.from_str(time_unit)
            if unit is None:
                raise ConfigurationError(f"Unknown time unit: {time_unit!r}")
            config_dict["window_seconds"] = unit.seconds
        if window_seconds is not None:
            config_dict["window_seconds"] = window_seconds
        if request_limit is not None:
            config_dict["request_limit"] = request_limit
        if base_url is not None:
            config_dict["base_url"] = base_url
        if token is not None:
            config_dict["token"] = token
        if timeout_seconds is not None:
            config_dict["timeout_seconds"] = timeout_seconds
        if product_group is not None:
            config_dict["product_group"] = product_group

        # Environment and .env are read here, per client, under the explicit overrides
        try:
            config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
        self._container.config.from_pydantic(config)

        if token_provider is not None:
            self._container.token_provider.override(providers.Object(token_provider))

        # Build the limiter first so a bad limit fails before any connection pool exists
        self._rate_limiter: SlidingWindowRateLimiter = self._container.rate_limiter()
        self._container.init_resources()

    @property
    def rate_limiter(self) -> SlidingWindowRateLimiter:
        return self._rate_limiter

    def create_document(
        self,
        document: Document,
        signature: str,
        *,
        cancel_token: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> str:
        """Submit a signed introduce-goods document and return its registry id.

        Blocks until the rate limiter admits the call, then performs exactly one
        POST. The admission is spent even if the call fails.

        Args:
            document: Document to submit.
            signature: Detached signature of the document, as issued by the signing tool.
            cancel_token: Optional token that aborts the wait for admission.
            timeout: Optional maximum wait for admission, in seconds.

        Returns:
            Document id from the registry response.

        Raises:
            InterruptedWaitError: If cancelled or timed out before admission.
            TransportError: If the registry could not be reached.
            ApiError: If the registry answered with a non-200 status.
            ProtocolError: If a 200 response lacks the document id.
        """
        uc = self._container.create_document_uc()
        return uc.execute(document, signature, cancel_token=cancel_token, timeout=timeout)

    def render_request(self, document: Document, signature: str) -> dict:
        """Return the request body create_document would send, without sending it."""
        registry = self._container.registry()
        group = ProductGroup(self._container.config.product_group())
        return registry.build_payload(document, signature, group)

    def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        self._container.shutdown_resources()

    def __enter__(self) -> CrptClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "CrptClient",
    "AppConfig",
]
