import logging
from typing import Any, Union

from fastapi import APIRouter, Body, HTTPException

from jsonrecipe.lib.errors import InvalidArgument, InvalidRecipe, ParseError
from jsonrecipe.lib.fraction import Fraction
from jsonrecipe.lib.ingredient import Ingredient
from jsonrecipe.lib.recipe import Recipe
from jsonrecipe.settings import settings
from jsonrecipe.web.models import (
    ErrorResponse,
    FractionModel,
    IngredientModel,
    IngredientResponse,
    RecipeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[Union[int, str], dict[str, Any]] = {
    422: {"model": ErrorResponse}
}


@router.get("/fraction", response_model=FractionModel, responses=ERROR_RESPONSES)
async def get_fraction(text: str):
    try:
        fraction = Fraction.parse(text)
    except (ParseError, InvalidArgument) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return FractionModel.from_fraction(fraction)


@router.get(
    "/ingredient", response_model=IngredientResponse, responses=ERROR_RESPONSES
)
async def get_ingredient(description: str):
    try:
        ingredient = Ingredient.parse(description)
    except (ParseError, InvalidArgument) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return IngredientResponse(ingredient=IngredientModel.from_ingredient(ingredient))


@router.post("/recipe", response_model=RecipeResponse, responses=ERROR_RESPONSES)
async def post_recipe(data: Any = Body(...)):
    try:
        recipe = Recipe.parse(data, default_unit=settings.default_unit)
    except InvalidRecipe as exc:
        logger.info("Rejected recipe document: %s", exc)
        raise HTTPException(status_code=422, detail=exc.errors) from exc
    except (ParseError, InvalidArgument) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return RecipeResponse(recipe=recipe.to_schema_object())
