import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from jsonrecipe.lib.direction import (
    DirectionEntry,
    DirectionGroup,
    parse_direction_or_group,
)
from jsonrecipe.lib.errors import InvalidRecipe
from jsonrecipe.lib.ingredient import (
    DEFAULT_UNIT,
    IngredientEntry,
    IngredientGroup,
    parse_ingredient_or_group,
)
from jsonrecipe.lib.schema import JsonRecipe
from jsonrecipe.lib.source import Source

logger = logging.getLogger(__name__)


@dataclass
class Recipe:
    title: str
    source: Optional[Source] = None
    ingredients: list[IngredientEntry] = field(default_factory=list)
    directions: list[DirectionEntry] = field(default_factory=list)

    @staticmethod
    def validate(data: Any) -> dict[str, Any]:
        """Validate a JSON recipe document.

        Returns the document with absent optional fields dropped. Raises
        InvalidRecipe carrying the validator's errors if it does not
        validate.
        """
        try:
            document = JsonRecipe.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            raise InvalidRecipe(
                f"Given data does not validate according to the schema: "
                f"{exc.error_count()} error(s)",
                errors,
            ) from exc
        return document.model_dump(mode="json", exclude_none=True)

    @staticmethod
    def is_valid(data: Any) -> bool:
        try:
            Recipe.validate(data)
        except InvalidRecipe:
            return False
        return True

    @classmethod
    def parse(cls, data: Any, default_unit: str = DEFAULT_UNIT) -> "Recipe":
        document = cls.validate(data)
        logger.debug("Parsing recipe %r", document["title"])

        source = None
        if "source" in document:
            source = Source.parse_schema_object(document["source"])

        return cls(
            title=document["title"],
            source=source,
            ingredients=[
                parse_ingredient_or_group(obj, default_unit)
                for obj in document["ingredients"]
            ],
            directions=[
                parse_direction_or_group(obj) for obj in document["directions"]
            ],
        )

    def iter_ingredients(self):
        """Yield every ingredient, flattening groups."""
        for entry in self.ingredients:
            if isinstance(entry, IngredientGroup):
                yield from entry.ingredients
            else:
                yield entry

    def iter_directions(self):
        """Yield every direction, flattening groups."""
        for entry in self.directions:
            if isinstance(entry, DirectionGroup):
                yield from entry.directions
            else:
                yield entry

    def to_schema_object(self) -> dict[str, Any]:
        obj: dict[str, Any] = {"title": self.title}
        if self.source:
            obj["source"] = self.source.to_schema_object()
        obj["ingredients"] = [i.to_schema_object() for i in self.ingredients]
        obj["directions"] = [d.to_schema_object() for d in self.directions]
        return obj
