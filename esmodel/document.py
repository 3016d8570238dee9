"""
A document of a type, holding its own data

A document is dirty if its data may differ from the stored state: a fresh document,
or one whose data was changed, is dirty. A document that was successfully stored,
or that was retrieved from the server, is not.
"""

import copy
import json
import logging
from typing import Any, Mapping
from urllib.parse import quote

from esmodel.doctype import TypeDescriptor
from esmodel.models import TypeMappingSettings, WriteResult


class FieldNotFound(KeyError):
    def __init__(self, field: str, index_name: str, type_name: str):
        self.field = field
        self.index_name = index_name
        self.type_name = type_name
        super().__init__(f"The field {field} was not present in data of document in {index_name}/{type_name}.")

    def __str__(self):
        return self.args[0]


class DocumentNotStored(ValueError):
    pass


class Document:
    def __init__(
        self,
        type: TypeDescriptor,
        data: Mapping[str, Any] | None = None,
        id: str | None = None,
        version: int | None = None,
        settings: Mapping[str, Any] | None = None,
        dirty: bool = True,
    ):
        """
        :param type: The type this document belongs to
        :param data: The fields of this document
        :param id: The id of the stored document, if any
        :param version: The version of the stored document, if any
        :param settings: The type settings, holding static mappings under mapping.<index>.<type>
        :param dirty: Whether this document may differ from the stored state
        """
        self._type = type
        self._data = dict(data or {})
        self._id = id
        self._version = version
        self._dirty = dirty
        self.settings = settings or {}

    @property
    def type(self) -> TypeDescriptor:
        return self._type

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @data.setter
    def data(self, data: Mapping[str, Any]):
        self.set_data(data)

    def set_data(self, data: Mapping[str, Any]) -> None:
        """Replace the data of this document, which makes it dirty"""
        self._data = dict(data)
        self._dirty = True

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def version(self) -> int | None:
        return self._version

    def is_dirty(self) -> bool:
        return self._dirty

    def get_field(self, name: str, silent: bool = False) -> Any:
        """
        Get the value of a field

        :param name: The field name
        :param silent: If True, return None for a missing field instead of raising FieldNotFound
        """
        if name not in self._data:
            if silent:
                return None
            raise FieldNotFound(name, self._type.index_name, self._type.name)
        return self._data[name]

    def _query_value(self, field: str) -> str:
        # a null value counts as missing
        value = self.get_field(field)
        if value is None:
            raise FieldNotFound(field, self._type.index_name, self._type.name)
        return quote(str(value), safe="")

    def _query_string(self) -> str:
        mapping = TypeMappingSettings.from_settings(self.settings, self._type.index_name, self._type.name)
        arguments = []
        if mapping.parent_field is not None:
            arguments.append("parent=" + self._query_value(mapping.parent_field))
        if mapping.routing_field is not None:
            arguments.append("routing=" + self._query_value(mapping.routing_field))
        return "?" + "&".join(arguments) if arguments else ""

    def store(self) -> None:
        """
        Store this document: replace it (PUT) if it has an id, otherwise create it (POST)
        and let the server assign an id
        """
        if self._id is not None:
            method, path = "PUT", f"/{self._id}"
        else:
            method, path = "POST", ""
        path += self._query_string()
        response = self._type.request(method, path, {}, json.dumps(self._data))
        self._set_stored(response.treated_content)

    def update(self) -> None:
        """
        Partially update the stored document with the data of this document
        """
        if self._id is None:
            raise DocumentNotStored(
                f"Cannot update a document in {self._type.index_name}/{self._type.name} that has no id, use store()"
            )
        response = self._type.request("POST", f"/{self._id}/_update", {}, json.dumps(self._data))
        self._set_stored(response.treated_content)

    def _set_stored(self, content: dict) -> None:
        result = WriteResult.model_validate(content)
        self._id = result.id
        self._version = result.version
        self._dirty = False
        logging.debug(f"Stored document {self._id} (version {self._version}) in {self._type.index_name}/{self._type.name}")

    def clone(self) -> "Document":
        """
        A copy of this document with the same data, which does not represent the stored document
        """
        return Document(self._type, dict(self._data), settings=self.settings)

    __copy__ = clone

    def __deepcopy__(self, memo) -> "Document":
        return Document(self._type, copy.deepcopy(self._data, memo), settings=self.settings)

    def __repr__(self):
        return f"<Document {self._type.index_name}/{self._type.name}/{self._id} v{self._version}{' dirty' if self._dirty else ''}>"
