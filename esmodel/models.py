from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from esmodel.util import get_value_by_path


class WriteResult(BaseModel):
    """The outcome of a document write, as reported by the server"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    version: int = Field(alias="_version")


class TypeMappingSettings(BaseModel):
    """The special fields in the static mapping of a type that affect how documents are stored"""

    # A _parent without type or a _routing without path (e.g. {"required": true}) adds no query parameter
    parent_field: str | None = None  # field in the document data holding the parent id
    routing_field: str | None = None  # field in the document data holding the routing value

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None, index_name: str, type_name: str) -> "TypeMappingSettings":
        mapping = type_mapping(settings, index_name, type_name)
        parent = mapping.get("_parent")
        routing = mapping.get("_routing")
        return cls(
            parent_field=parent.get("type") if parent else None,
            routing_field=routing.get("path") if routing else None,
        )


def type_mapping(settings: Mapping[str, Any] | None, index_name: str, type_name: str) -> dict:
    """
    Get the static mapping configured for this index and type, or an empty dict
    """
    mapping = get_value_by_path(settings, ["mapping", index_name, type_name])
    return dict(mapping) if mapping else {}
