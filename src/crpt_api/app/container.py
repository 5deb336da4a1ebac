from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..core.usecases.create_document import CreateDocumentUseCase
from ..infra.http_client import HttpClient
from ..infra.rate_limiter import SlidingWindowRateLimiter
from ..infra.registry_adapter import RegistryAdapter
from ..infra.token_provider import StaticTokenProvider

logger = logging.getLogger(__name__)


def http_client_resource(timeout_seconds):
	"""Create the registry HTTP client as a resource with proper cleanup."""
	logger.info(f"Initializing HTTP client (timeout: {timeout_seconds}s)")
	with HttpClient(timeout_seconds=timeout_seconds) as client:
		yield client
	logger.debug("HTTP client closed")


class Container(containers.DeclarativeContainer):
	# Filled from a fresh AppConfig by CrptClient, so the environment is read per client
	config = providers.Configuration()

	# One limiter per container: every submission shares the same budget
	rate_limiter = providers.Singleton(
		SlidingWindowRateLimiter,
		max_requests=config.request_limit,
		window_seconds=config.window_seconds,
	)

	http_client = providers.Resource(
		http_client_resource,
		timeout_seconds=config.timeout_seconds,
	)

	# Overridden when the caller injects its own provider
	token_provider = providers.Singleton(StaticTokenProvider, token=config.token)

	registry = providers.Factory(
		RegistryAdapter,
		http_client=http_client,
		token_provider=token_provider,
		base_url=config.base_url,
	)

	create_document_uc = providers.Factory(
		CreateDocumentUseCase,
		rate_limiter=rate_limiter,
		registry=registry,
		product_group=config.product_group,
	)
