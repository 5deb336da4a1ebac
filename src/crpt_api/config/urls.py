from __future__ import annotations


DEFAULT_BASE_URL = "https://ismp.crpt.ru/api/v3"


def get_create_document_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/lk/documents/create"
