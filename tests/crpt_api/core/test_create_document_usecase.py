from __future__ import annotations

import pytest

from crpt_api.core.cancellation import CancellationToken
from crpt_api.core.domain.enums import ProductGroup
from crpt_api.core.domain.models import Document
from crpt_api.core.errors import ApiError, InterruptedWaitError
from crpt_api.core.ports.rate_limiter_port import RateLimiterPort
from crpt_api.core.ports.registry_port import DocumentRegistryPort
from crpt_api.core.usecases.create_document import CreateDocumentUseCase
from crpt_api.infra.rate_limiter import SlidingWindowRateLimiter


class FakeLimiter(RateLimiterPort):
    def __init__(self) -> None:
        self.calls: list[tuple[object, object]] = []

    def acquire(self, cancel_token=None, timeout=None) -> None:
        self.calls.append((cancel_token, timeout))


class FakeRegistry(DocumentRegistryPort):
    def __init__(self, result: str = "id-1", error: Exception | None = None) -> None:
        self._result = result
        self._error = error
        self.calls: list[tuple[Document, str, ProductGroup]] = []

    def create_document(self, document: Document, signature: str, product_group: ProductGroup) -> str:
        self.calls.append((document, signature, product_group))
        if self._error is not None:
            raise self._error
        return self._result


def test_execute_acquires_then_submits(sample_document):
    limiter = FakeLimiter()
    registry = FakeRegistry(result="abc123")
    token = CancellationToken()

    uc = CreateDocumentUseCase(rate_limiter=limiter, registry=registry)
    assert uc.execute(sample_document, "sig", cancel_token=token, timeout=2.0) == "abc123"

    assert limiter.calls == [(token, 2.0)]
    assert registry.calls == [(sample_document, "sig", ProductGroup.CLOTHES)]


def test_execute_uses_configured_product_group(sample_document):
    registry = FakeRegistry()
    uc = CreateDocumentUseCase(rate_limiter=FakeLimiter(), registry=registry, product_group="shoes")
    uc.execute(sample_document, "sig")
    assert registry.calls[0][2] is ProductGroup.SHOES


def test_failed_call_still_consumes_admission(sample_document, fake_clock):
    limiter = SlidingWindowRateLimiter(max_requests=5, window_seconds=60.0, clock=fake_clock)
    uc = CreateDocumentUseCase(rate_limiter=limiter, registry=FakeRegistry(error=ApiError(503, "down")))

    with pytest.raises(ApiError):
        uc.execute(sample_document, "sig")

    assert len(limiter.admissions()) == 1


def test_interrupted_wait_never_reaches_registry(sample_document):
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60.0)
    registry = FakeRegistry()
    uc = CreateDocumentUseCase(rate_limiter=limiter, registry=registry)
    uc.execute(sample_document, "sig")

    token = CancellationToken()
    token.cancel()
    with pytest.raises(InterruptedWaitError):
        uc.execute(sample_document, "sig", cancel_token=token)

    assert len(registry.calls) == 1
    assert len(limiter.admissions()) == 1
