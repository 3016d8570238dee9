"""
The mapping (field schema) of a type

The mapping sent to the server combines the static mapping configured for the type in the type
settings (mapping.<index>.<type>) with the properties and dynamic templates set on this object.
See https://www.elastic.co/guide/en/elasticsearch/reference/current/dynamic-templates.html
"""

import copy
import json
import logging
from typing import Any, Mapping as MappingType

from esmodel.doctype import TypeDescriptor
from esmodel.models import type_mapping
from esmodel.transfer import Response
from esmodel.util import PathLike, get_value_by_path, set_value_by_path


class Mapping:
    def __init__(self, type: TypeDescriptor, settings: MappingType[str, Any] | None = None):
        self._type = type
        self.settings = settings or {}
        self._properties: dict[str, Any] = {}
        self._dynamic_templates: list[dict[str, Any]] = []

    @property
    def type(self) -> TypeDescriptor:
        return self._type

    @property
    def properties(self) -> dict[str, Any]:
        return self._properties

    @property
    def dynamic_templates(self) -> list[dict[str, Any]]:
        return self._dynamic_templates

    def get_property_by_path(self, path: PathLike) -> Any:
        return get_value_by_path(self._properties, path)

    def set_property_by_path(self, path: PathLike, value: Any) -> None:
        self._properties = set_value_by_path(self._properties, path, value)

    def add_dynamic_template(self, name: str, config: MappingType[str, Any]) -> None:
        """Append a dynamic template, e.g. add_dynamic_template("dates", {"match": "*_at", "mapping": {"type": "date"}})"""
        self._dynamic_templates.append({name: dict(config)})

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """
        The mapping as it is sent to the server, i.e. {type: {..., dynamic_templates: [...], properties: {...}}}
        """
        mapping = copy.deepcopy(type_mapping(self.settings, self._type.index_name, self._type.name))
        mapping["dynamic_templates"] = copy.deepcopy(self._dynamic_templates)
        mapping["properties"] = copy.deepcopy(self._properties)
        return {self._type.name: mapping}

    def apply(self) -> Response:
        """
        Put this mapping to the server, returning the server response
        """
        logging.debug(f"Applying mapping for {self._type.index_name}/{self._type.name}")
        return self._type.request("PUT", "/_mapping", {}, json.dumps(self.as_dict()))
