import logging
import re
from dataclasses import dataclass, field
from typing import Any, Union

from jsonrecipe.lib.errors import InvalidArgument, ParseError
from jsonrecipe.lib.fraction import Fraction, match_quantity

logger = logging.getLogger(__name__)

DEFAULT_UNIT = "each"

UNIT_RE = re.compile(r"\s*(\S+)")
ITEM_RE = re.compile(r"\s*([^,]+)")
PREPARATION_RE = re.compile(r"\s*,\s*([^,]+)")


@dataclass
class Ingredient:
    """A single ingredient in a recipe.

    ``quantity`` may be given as a plain int, which is coerced to a Fraction.
    """

    quantity: Fraction
    unit: str
    item: str
    preparation: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.quantity, int) and not isinstance(self.quantity, bool):
            self.quantity = Fraction(self.quantity)
        if self.preparation is None:
            self.preparation = []

    @classmethod
    def parse(cls, description: str) -> "Ingredient":
        """Parse an ingredient from a human-readable description.

        The description has four parts, the last one optional:

        1. The quantity: a whole number, a fraction or both ("1 1/2").
        2. The unit. Use "each" for things counted individually.
        3. The item (e.g. flour). It cannot contain a comma.
        4. Preparation instructions, each introduced by a comma
           ("potatoes, diced, peeled").

        Blank preparation instructions are dropped. Anything after the last
        preparation instruction that does not fit the grammar is ignored.
        """
        whole, fractional, pos = match_quantity(description)
        if whole is None and fractional is None:
            raise ParseError("Quantity not specified.", description)
        quantity = Fraction.from_mixed_number(
            whole or 0, fractional if fractional is not None else Fraction(0, 1)
        )

        m = UNIT_RE.match(description, pos)
        if not m:
            raise ParseError("Unit not specified.", description)
        unit = m.group(1)
        pos = m.end()

        m = ITEM_RE.match(description, pos)
        item = m.group(1).strip() if m else ""
        if not item:
            raise ParseError("Item not specified.", description)
        pos = m.end()

        preparation = []
        while m := PREPARATION_RE.match(description, pos):
            if step := m.group(1).strip():
                preparation.append(step)
            pos = m.end()

        if rest := description[pos:].strip():
            logger.debug("Ignoring trailing text %r in %r", rest, description)

        return cls(quantity, unit, item, preparation)

    @classmethod
    def parse_schema_object(
        cls, obj: Union[str, dict[str, Any]], default_unit: str = DEFAULT_UNIT
    ) -> "Ingredient":
        """Parse an ingredient from its JSON form.

        The JSON form is either a description string (see ``parse``) or an
        object with ``quantity`` and ``item`` and optionally ``unit`` and
        ``preparation``.
        """
        if isinstance(obj, str):
            return cls.parse(obj)

        quantity = obj["quantity"]
        if isinstance(quantity, str):
            quantity = Fraction.parse(quantity)
        elif isinstance(quantity, float):
            if not quantity.is_integer():
                raise InvalidArgument(f"Quantity must be an integer: {quantity}")
            quantity = Fraction(int(quantity))
        else:
            quantity = Fraction(quantity)

        unit = obj.get("unit")
        if not unit:
            logger.debug("No unit for %r, using %r", obj["item"], default_unit)
            unit = default_unit

        preparation = obj.get("preparation") or []
        if isinstance(preparation, str):
            preparation = [preparation]

        return cls(quantity, unit, obj["item"], list(preparation))

    def to_schema_object(self) -> dict[str, Any]:
        obj: dict[str, Any] = {
            "quantity": (
                self.quantity.numerator
                if self.quantity.is_whole
                else str(self.quantity)
            ),
            "unit": self.unit,
            "item": self.item,
        }
        if self.preparation:
            obj["preparation"] = list(self.preparation)
        return obj

    def __str__(self) -> str:
        return ", ".join(
            [f"{self.quantity} {self.unit} {self.item}", *self.preparation]
        )


@dataclass
class IngredientGroup:
    """A group of ingredients under a single heading."""

    heading: str
    ingredients: list[Ingredient] = field(default_factory=list)

    def to_schema_object(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "ingredients": [i.to_schema_object() for i in self.ingredients],
        }


IngredientEntry = Union[Ingredient, IngredientGroup]


def parse_ingredient_or_group(
    obj: Union[str, dict[str, Any]], default_unit: str = DEFAULT_UNIT
) -> IngredientEntry:
    if isinstance(obj, dict) and "heading" in obj:
        return IngredientGroup(
            heading=obj["heading"],
            ingredients=[
                Ingredient.parse_schema_object(i, default_unit)
                for i in obj.get("ingredients", [])
            ],
        )
    return Ingredient.parse_schema_object(obj, default_unit)
