from typing import Any, Optional, Union

from pydantic import BaseModel

from jsonrecipe.lib.fraction import Fraction
from jsonrecipe.lib.ingredient import Ingredient


class FractionModel(BaseModel):
    numerator: int
    denominator: int
    text: str

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> "FractionModel":
        return cls(
            numerator=fraction.numerator,
            denominator=fraction.denominator,
            text=str(fraction),
        )


class IngredientModel(BaseModel):
    quantity: FractionModel
    unit: str
    item: str
    preparation: list[str]
    text: str

    @classmethod
    def from_ingredient(cls, ingredient: Ingredient) -> "IngredientModel":
        return cls(
            quantity=FractionModel.from_fraction(ingredient.quantity),
            unit=ingredient.unit,
            item=ingredient.item,
            preparation=ingredient.preparation,
            text=str(ingredient),
        )


class IngredientResponse(BaseModel):
    ingredient: IngredientModel


class RecipeResponse(BaseModel):
    recipe: Optional[dict[str, Any]]


class ErrorResponse(BaseModel):
    detail: Union[str, list[dict[str, Any]]]
