"""
Raw Map Items
=============
The flat, hierarchical item list the skill map is built from.

Each entry of the input document is either a *topic* (laid out in the top
row, owning an ordered list of subsections) or a *subsection* (stacked below
its topic). Items are taken as they come; nothing here validates or repairs
the document.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Dict, List


class ItemType(StrEnum):
    TOPIC = "topic"
    SUBSECTION = "subsection"


@dataclass(frozen=True)
class RawItem:
    """One entry of the input document."""
    id: str
    type: ItemType
    name: str
    is_active: bool = False
    related_to: List[str] = field(default_factory=list)
    sections: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RawItem:
        """
        Create an item from a document object.

        Args:
            data: Mapping with the document keys ``id``, ``type``, ``name`` and
                the optional ``isActive``, ``relatedTo`` and ``sections``.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If ``type`` is neither topic nor subsection.
        """
        related = data.get("relatedTo")
        return cls(
            id=data["id"],
            type=ItemType(data["type"]),
            name=data["name"],
            is_active=bool(data.get("isActive", False)),
            related_to=list(related) if isinstance(related, list) else [],
            sections=list(data.get("sections") or []),
        )


def parse_items(documents: List[Dict[str, Any]]) -> List[RawItem]:
    """Convert a decoded document array into RawItems, keeping input order."""
    return [RawItem.from_dict(doc) for doc in documents]
