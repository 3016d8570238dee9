"""
Document types: an index name and a type name, used to build the REST paths of documents and mappings

Documents and mappings only need the TypeDescriptor protocol, so anything providing a name,
an index name and a request method can be used (e.g. a stub in tests).
ElasticType is the implementation that talks to an actual server through an ElasticTransport.
"""

import logging
from typing import TYPE_CHECKING, Any, Mapping, Protocol

from elasticsearch import NotFoundError

from esmodel.transfer import ElasticTransport, Response

if TYPE_CHECKING:
    from esmodel.document import Document


class TypeDescriptor(Protocol):
    name: str
    index_name: str

    def request(
        self, method: str, path: str | None = None, arguments: Mapping[str, Any] | None = None, body: str | None = None
    ) -> Response: ...


class ElasticType:
    def __init__(self, index_name: str, name: str, transport: ElasticTransport):
        self.index_name = index_name
        self.name = name
        self.transport = transport

    @property
    def base_path(self) -> str:
        return f"/{self.index_name}/{self.name}"

    def request(
        self, method: str, path: str | None = None, arguments: Mapping[str, Any] | None = None, body: str | None = None
    ) -> Response:
        """
        Send a request relative to the base path of this type

        :param method: The HTTP method
        :param path: The path below /<index>/<type>, e.g. "/<id>" or "/_mapping" (or None for the base path)
        :param arguments: Query parameters
        :param body: The json encoded request body
        """
        return self.transport.request(method, self.base_path + (path or ""), arguments, body)

    def find_document_by_id(self, doc_id: str, settings: Mapping[str, Any] | None = None) -> "Document | None":
        """
        Retrieve a stored document, or None if it does not exist

        :param doc_id: The document id
        :param settings: The type settings to give to the document (see config.load_type_settings)
        :return: a Document that is not dirty, as it reflects the stored state
        """
        from esmodel.document import Document

        try:
            content = self.request("GET", f"/{doc_id}").treated_content
        except NotFoundError:
            logging.debug(f"Document {doc_id} not found in {self.index_name}/{self.name}")
            return None
        if not content.get("found", True):
            return None
        return Document(
            self, content.get("_source", {}), content["_id"], content.get("_version"), settings=settings, dirty=False
        )

    def delete_document_by_id(self, doc_id: str) -> bool:
        """
        Delete a stored document. Returns True if the server reported it as deleted
        """
        content = self.request("DELETE", f"/{doc_id}").treated_content
        return content.get("result") == "deleted"

    def count(self) -> int:
        return self.request("GET", "/_count").treated_content["count"]

    def __repr__(self):
        return f"<ElasticType {self.index_name}/{self.name}>"
