"""
Pydantic models describing a JSON recipe document.

Field names follow the document format (camelCase where the format uses it),
so the models validate raw JSON without aliases.
"""
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SchemaIngredient(_SchemaModel):
    quantity: Union[int, float, str]
    unit: Optional[str] = None
    item: str = Field(min_length=1)
    preparation: Union[str, list[str], None] = None


class SchemaIngredientGroup(_SchemaModel):
    heading: str
    ingredients: list[Union[str, SchemaIngredient]]


class SchemaDirectionGroup(_SchemaModel):
    heading: str
    directions: list[str]


class SchemaLocation(_SchemaModel):
    url: str
    retrievalDate: Optional[date] = None


class SchemaSource(_SchemaModel):
    author: str
    location: Optional[SchemaLocation] = None


class JsonRecipe(_SchemaModel):
    title: str
    source: Optional[SchemaSource] = None
    ingredients: list[Union[str, SchemaIngredient, SchemaIngredientGroup]] = Field(
        min_length=1
    )
    directions: list[Union[str, SchemaDirectionGroup]]
