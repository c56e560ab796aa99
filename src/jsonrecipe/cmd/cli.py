import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from jsonrecipe.lib.errors import JsonRecipeError
from jsonrecipe.lib.ingredient import Ingredient
from jsonrecipe.lib.recipe import Recipe
from jsonrecipe.settings import settings

logger = logging.getLogger(__name__)


def normalize_recipe(path: Path) -> dict:
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    return Recipe.parse(data, default_unit=settings.default_unit).to_schema_object()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonrecipe",
        description="Normalize JSON recipes and ingredient descriptions",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    recipe_parser = subparsers.add_parser(
        "recipe", help="Validate a JSON recipe file and print it normalized"
    )
    recipe_parser.add_argument("path", type=Path, help="Path to the recipe file")

    ingredient_parser = subparsers.add_parser(
        "ingredient", help="Parse an ingredient description, e.g. '1 cup flour'"
    )
    ingredient_parser.add_argument("description", help="Ingredient description")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "recipe":
            output = normalize_recipe(args.path)
        else:
            output = Ingredient.parse(args.description).to_schema_object()
    except JsonRecipeError as exc:
        logger.error("%s", exc)
        return 1
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read %s: %s", args.path, exc)
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
