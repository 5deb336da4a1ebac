from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictStr

from ..core.domain.enums import DocumentFormat, DocumentType, ProductGroup
from ..core.domain.models import Description, Document, Product


def _none_to_empty(value: Any) -> Any:
	return "" if value is None else value


def _none_to_list(value: Any) -> Any:
	return [] if value is None else value


# Missing strings go on the wire as "" rather than null
WireStr = Annotated[str, BeforeValidator(_none_to_empty)]


class _WireModel(BaseModel):
	model_config = ConfigDict(populate_by_name=True, frozen=True)


class DescriptionSchema(_WireModel):
	"""Document description block (owner tax id)"""
	participant_inn: WireStr = Field("", alias="participantInn")


class ProductSchema(_WireModel):
	"""Single product entry of an introduce-goods document"""
	certificate_document: WireStr = ""
	certificate_document_date: WireStr = ""
	certificate_document_number: WireStr = ""
	owner_inn: WireStr = ""
	producer_inn: WireStr = ""
	production_date: WireStr = ""
	tnved_code: WireStr = ""
	uit_code: WireStr = ""
	uitu_code: WireStr = ""

	@classmethod
	def from_domain(cls, p: Product) -> "ProductSchema":
		return cls(
			certificate_document=p.certificate_document,
			certificate_document_date=p.certificate_document_date,
			certificate_document_number=p.certificate_document_number,
			owner_inn=p.owner_inn,
			producer_inn=p.producer_inn,
			production_date=p.production_date,
			tnved_code=p.tnved_code,
			uit_code=p.uit_code,
			uitu_code=p.uitu_code,
		)

	def to_domain(self) -> Product:
		return Product(**self.model_dump())


class DocumentSchema(_WireModel):
	"""Document embedded (as a JSON string) in the create request.

	Field order is the wire key order and must not change.
	"""
	description: Optional[DescriptionSchema] = None
	doc_id: WireStr = ""
	doc_status: WireStr = ""
	doc_type: WireStr = ""
	import_request: bool = Field(False, alias="importRequest")
	owner_inn: WireStr = ""
	participant_inn: WireStr = ""
	producer_inn: WireStr = ""
	production_date: WireStr = ""
	production_type: WireStr = ""
	products: Annotated[list[ProductSchema], BeforeValidator(_none_to_list)] = Field(default_factory=list)
	reg_date: WireStr = ""
	reg_number: WireStr = ""

	@classmethod
	def from_domain(cls, d: Document) -> "DocumentSchema":
		description = None
		if d.description is not None:
			description = DescriptionSchema(participant_inn=d.description.participant_inn)
		return cls(
			description=description,
			doc_id=d.doc_id,
			doc_status=d.doc_status,
			doc_type=d.doc_type,
			import_request=d.import_request,
			owner_inn=d.owner_inn,
			participant_inn=d.participant_inn,
			producer_inn=d.producer_inn,
			production_date=d.production_date,
			production_type=d.production_type,
			products=[ProductSchema.from_domain(p) for p in d.products],
			reg_date=d.reg_date,
			reg_number=d.reg_number,
		)

	def to_domain(self) -> Document:
		description = None
		if self.description is not None:
			description = Description(participant_inn=self.description.participant_inn)
		return Document(
			description=description,
			doc_id=self.doc_id,
			doc_status=self.doc_status,
			doc_type=self.doc_type,
			import_request=self.import_request,
			owner_inn=self.owner_inn,
			participant_inn=self.participant_inn,
			producer_inn=self.producer_inn,
			production_date=self.production_date,
			production_type=self.production_type,
			products=tuple(p.to_domain() for p in self.products),
			reg_date=self.reg_date,
			reg_number=self.reg_number,
		)

	def to_json(self) -> str:
		return self.model_dump_json(by_alias=True)


class CreateDocumentRequest(BaseModel):
	"""Body of POST /lk/documents/create"""
	document_format: DocumentFormat = DocumentFormat.MANUAL
	product_document: str
	product_group: ProductGroup
	signature: str
	type: DocumentType = DocumentType.LP_INTRODUCE_GOODS

	@classmethod
	def build(cls, document: Document, signature: str, product_group: ProductGroup) -> "CreateDocumentRequest":
		return cls(
			product_document=DocumentSchema.from_domain(document).to_json(),
			product_group=product_group,
			signature=signature,
		)


class CreateDocumentResponse(BaseModel):
	"""Successful create response; extra keys are ignored"""
	value: StrictStr
