from typing import Optional


class JsonRecipeError(Exception):
    """Base class for every error raised by jsonrecipe."""


class InvalidArgument(JsonRecipeError, ValueError):
    """Raised when a value is constructed from malformed inputs."""


class ParseError(JsonRecipeError, ValueError):
    """Raised when text does not match the expected grammar."""

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text


class InvalidRecipe(JsonRecipeError, ValueError):
    """Raised when a recipe document does not validate against the schema."""

    def __init__(self, message: str, errors: Optional[list[dict]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []
