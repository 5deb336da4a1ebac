from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class Description:
    participant_inn: Optional[str] = None


@dataclass(frozen=True)
class Product:
    certificate_document: Optional[str] = None
    certificate_document_date: Optional[str] = None
    certificate_document_number: Optional[str] = None
    owner_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[str] = None  # e.g., "2020-01-23"
    tnved_code: Optional[str] = None
    uit_code: Optional[str] = None
    uitu_code: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """A goods-introduction document as submitted to the registry.

    Instances are immutable and safe to share between threads. ``products`` is
    normalized to a tuple so a caller's list cannot be mutated afterwards.
    """

    description: Optional[Description] = None
    doc_id: Optional[str] = None
    doc_status: Optional[str] = None
    doc_type: Optional[str] = None
    import_request: bool = False
    owner_inn: Optional[str] = None
    participant_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[str] = None
    production_type: Optional[str] = None
    products: tuple[Product, ...] = field(default_factory=tuple)
    reg_date: Optional[str] = None
    reg_number: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.products, tuple):
            object.__setattr__(self, "products", tuple(self.products or ()))

    def with_updates(self, **kwargs) -> "Document":
        return replace(self, **kwargs)
