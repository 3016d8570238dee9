from esmodel.doctype import ElasticType, TypeDescriptor
from esmodel.document import Document, DocumentNotStored, FieldNotFound
from esmodel.mapping import Mapping
from esmodel.transfer import ElasticTransport, Response

__all__ = [
    "Document",
    "DocumentNotStored",
    "ElasticTransport",
    "ElasticType",
    "FieldNotFound",
    "Mapping",
    "Response",
    "TypeDescriptor",
]
