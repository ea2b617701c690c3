"""
Data records for the Pivotal Network API.

Each record mirrors one JSON shape returned by the API. Keys missing from a
response leave the field at its default, unknown keys are ignored, and
fields still at their default are left out when a record is serialized into
a request body.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


def _link(json_key: str = "_links") -> Any:
    return field(default_factory=dict, metadata={"json": json_key})


def _nested(record: type) -> Any:
    return field(default=None, metadata={"record": record})


def _is_empty(value: Any) -> bool:
    if isinstance(value, Record):
        return not value.to_dict()
    return value is None or value is False or value in ("", 0, [], {})


@dataclass(frozen=True)
class Record:
    """Base class for API records."""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        """Build a record from a decoded JSON object."""
        if not data:
            return cls()

        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            if key not in data or data[key] is None:
                continue
            value = data[key]
            nested = f.metadata.get("record")
            if nested is not None:
                value = nested.from_dict(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    @classmethod
    def from_list(cls, items: Optional[List[Dict[str, Any]]]) -> list:
        return [cls.from_dict(item) for item in items or []]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting empty fields."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if _is_empty(value):
                continue
            if isinstance(value, Record):
                value = value.to_dict()
            result[f.metadata.get("json", f.name)] = value
        return result


@dataclass(frozen=True)
class Product(Record):
    id: int = 0
    slug: str = ""
    name: str = ""


@dataclass(frozen=True)
class EULA(Record):
    id: int = 0
    slug: str = ""
    name: str = ""
    content: str = ""
    links: Dict[str, Any] = _link()


@dataclass(frozen=True)
class EULAAcceptanceResponse(Record):
    accepted_at: str = ""
    links: Dict[str, Any] = _link()


@dataclass(frozen=True)
class Release(Record):
    id: int = 0
    availability: str = ""
    eula: Optional[EULA] = _nested(EULA)
    release_date: str = ""
    release_type: str = ""
    version: str = ""
    description: str = ""
    release_notes_url: str = ""
    controlled: bool = False
    ecc: str = ""
    license_exception: str = ""
    end_of_support_date: str = ""
    end_of_guidance_date: str = ""
    end_of_availability_date: str = ""
    updated_at: str = ""
    links: Dict[str, Any] = _link()


@dataclass(frozen=True)
class ProductFile(Record):
    id: int = 0
    aws_object_key: str = ""
    description: str = ""
    docs_url: str = ""
    file_transfer_status: str = ""
    file_type: str = ""
    file_version: str = ""
    included_files: List[str] = field(default_factory=list)
    md5: str = ""
    sha256: str = ""
    name: str = ""
    platforms: List[str] = field(default_factory=list)
    released_at: str = ""
    size: int = 0
    system_requirements: List[str] = field(default_factory=list)
    links: Dict[str, Any] = _link()

    def download_link(self) -> str:
        """
        Return the download URL advertised in the record's links.

        Raises:
            ValidationError: If the record carries no download link
        """
        href = (self.links.get("download") or {}).get("href")
        if not href:
            raise ValidationError(
                f"Product file {self.id} has no download link"
            )
        return href


@dataclass(frozen=True)
class UserGroup(Record):
    id: int = 0
    name: str = ""
    description: str = ""
    members: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DependentRelease(Record):
    id: int = 0
    version: str = ""
    product: Optional[Product] = _nested(Product)


@dataclass(frozen=True)
class ReleaseDependency(Record):
    release: Optional[DependentRelease] = _nested(DependentRelease)


@dataclass(frozen=True)
class UpgradePathRelease(Record):
    id: int = 0
    version: str = ""


@dataclass(frozen=True)
class ReleaseUpgradePath(Record):
    release: Optional[UpgradePathRelease] = _nested(UpgradePathRelease)
