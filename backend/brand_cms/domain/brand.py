from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import InvariantViolation


@dataclass(frozen=True)
class Brand:
    """The brand a page is authored for: routing id plus display name."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Brand":
        if not isinstance(data, Mapping):
            raise InvariantViolation("brand must be an object with id and name")

        brand_id = data.get("brandId") or data.get("id")
        name = data.get("name")
        if not brand_id or not name:
            raise InvariantViolation("brand id and name are required")

        return cls(id=str(brand_id).strip(), name=str(name).strip())
