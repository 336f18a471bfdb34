# richerror/catalog/models.py
"""
Catalog models

An error catalog is a list of ErrorData entries. Each entry becomes one
generated module with a constructor and a predicate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


# dataType sentinel: the item is wired to add_error instead of add_metadata
ERROR_DATA_TYPE = "error"


@dataclass(frozen=True)
class DataItem:
    """One constructor parameter, stored in the error's metadata under `name`"""
    name: str
    data_type: str = "Any"     # Python annotation expression, or ERROR_DATA_TYPE
    import_path: str = ""      # module to import for the annotation, if any

    @property
    def is_error(self) -> bool:
        return self.data_type.strip() == ERROR_DATA_TYPE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataItem":
        return cls(
            name=str(data.get("name", "")),
            data_type=str(data.get("dataType") or "Any"),
            import_path=str(data.get("importPath") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name, "dataType": self.data_type}
        if self.import_path:
            result["importPath"] = self.import_path
        return result


@dataclass(frozen=True)
class ErrorData:
    """
    One catalog entry.

    code is expected to be PascalCase and unique within a catalog.
    tags group errors for generation filters and log aggregation.
    include_map adds a free-form `fields` mapping parameter to the constructor.
    """
    code: str
    message: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    include_map: bool = False
    metadata: Tuple[DataItem, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ErrorData":
        return cls(
            code=str(data.get("code", "")),
            message=str(data.get("message") or ""),
            tags=tuple(str(tag) for tag in data.get("tags") or ()),
            include_map=bool(data.get("includeMap", False)),
            metadata=tuple(DataItem.from_dict(item) for item in data.get("metaData") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "tags": list(self.tags),
            "message": self.message,
            "includeMap": self.include_map,
            "metaData": [item.to_dict() for item in self.metadata],
        }
