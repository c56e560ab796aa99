from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Direction:
    """A single preparation step."""

    text: str

    def to_schema_object(self) -> str:
        return self.text


@dataclass
class DirectionGroup:
    """A group of directions under a single heading."""

    heading: str
    directions: list[Direction] = field(default_factory=list)

    def to_schema_object(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "directions": [d.to_schema_object() for d in self.directions],
        }


DirectionEntry = Union[Direction, DirectionGroup]


def parse_direction_or_group(obj: Union[str, dict[str, Any]]) -> DirectionEntry:
    if isinstance(obj, str):
        return Direction(obj.strip())
    return DirectionGroup(
        heading=obj["heading"],
        directions=[Direction(text.strip()) for text in obj.get("directions", [])],
    )
