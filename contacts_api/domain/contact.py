"""The Contact record and its JSON mapping."""
from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Mapping

FIELDS = ("id", "first_name", "last_name")


@dataclass(frozen=True)
class Contact:
    id: str
    first_name: str
    last_name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "first_name": self.first_name, "last_name": self.last_name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Contact":
        """
        Build a Contact from a decoded JSON object.

        Raises ValueError when the value is not an object or a field is missing.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        missing = [name for name in FIELDS if name not in data]
        if missing:
            raise ValueError(f"missing fields: {', '.join(missing)}")
        return cls(
            id=str(data["id"]),
            first_name=str(data["first_name"]),
            last_name=str(data["last_name"]),
        )

    def content_key(self) -> str:
        """Short digest of every field; equal records share a key."""
        canonical = json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=False)
        return hashlib.sha1(canonical.encode("utf-8", "surrogatepass")).hexdigest()[:16]
