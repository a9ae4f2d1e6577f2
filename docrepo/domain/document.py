"""
Document Domain Model

Defines the capability a model type must offer to be stored through a repository,
and a pydantic base class that provides it.
"""

from typing import Any, Mapping, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

DocumentT = TypeVar("DocumentT", bound="Document")


@runtime_checkable
class DocumentModel(Protocol):
    """
    Store Serialization Capability

    to_document() produces the raw mapping written to the collection;
    from_document() builds a model from a raw mapping read back.
    """

    def to_document(self) -> dict[str, Any]:
        ...

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "DocumentModel":
        ...


class Document(BaseModel):
    """
    Document Base Model

    The store's primary key "_id" binds to the optional `id` field.
    Keys without a matching field are ignored on decode.
    """

    id: Optional[Any] = Field(None, alias="_id", description="Store Identifier")

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    def to_document(self) -> dict[str, Any]:
        """Dump to a raw document, leaving "_id" out until the store assigns one"""
        document = self.model_dump(by_alias=True)
        if document.get("_id") is None:
            document.pop("_id", None)
        return document

    @classmethod
    def from_document(cls: type[DocumentT], document: Mapping[str, Any]) -> DocumentT:
        """Validate a raw document into a model instance"""
        return cls.model_validate(document)
