import math
import re
from dataclasses import dataclass
from typing import Optional

from jsonrecipe.lib.errors import InvalidArgument, ParseError

# The whole-number run must not be followed by more digits, so "12/3" is
# read as a fraction rather than 1 and 2/3.
WHOLE_NUMBER_RE = re.compile(r"\s*([0-9]+)(?![0-9]|\s*/)")
FRACTIONAL_RE = re.compile(r"\s*([0-9]+)\s*/\s*([0-9]+)")


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_int(digits: str, text: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise ParseError(f"Number too long: {len(digits)} digits", text) from exc


def match_quantity(
    text: str, pos: int = 0
) -> tuple[Optional[int], Optional["Fraction"], int]:
    """Match an optional whole number and an optional fraction at ``pos``.

    Returns the whole number (or None), the fractional part (or None) and
    the position just past whatever was consumed.
    """
    whole = None
    fractional = None

    if m := WHOLE_NUMBER_RE.match(text, pos):
        whole = _to_int(m.group(1), text)
        pos = m.end()

    if m := FRACTIONAL_RE.match(text, pos):
        denominator = _to_int(m.group(2), text)
        if denominator == 0:
            raise ParseError("Denominator must not be zero.", text)
        fractional = Fraction(_to_int(m.group(1), text), denominator)
        pos = m.end()

    return whole, fractional, pos


@dataclass(frozen=True)
class Fraction:
    """An exact rational number, always held in lowest terms.

    The denominator is always positive; the sign lives on the numerator.
    Instances are immutable, every operation returns a new Fraction.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if not _is_integer(self.numerator) or not _is_integer(self.denominator):
            raise InvalidArgument("Numerator and denominator must be integers.")
        if self.denominator == 0:
            raise InvalidArgument(
                "Cannot create a fraction with a denominator of zero."
            )

        d = math.gcd(self.numerator, self.denominator)
        if self.denominator < 0:
            d = -d
        object.__setattr__(self, "numerator", self.numerator // d)
        object.__setattr__(self, "denominator", self.denominator // d)

    @classmethod
    def from_mixed_number(cls, whole: int, fractional: "Fraction") -> "Fraction":
        """Convert a mixed number to an improper fraction."""
        if not _is_integer(whole):
            raise InvalidArgument("Whole number part must be an integer.")
        return cls(
            whole * fractional.denominator + fractional.numerator,
            fractional.denominator,
        )

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """Parse a fraction such as ``"3"``, ``"3/4"`` or ``"1 1/2"``.

        Surrounding whitespace is allowed, anything else left over is an
        error.
        """
        whole, fractional, pos = match_quantity(text)

        if whole is None and fractional is None:
            raise ParseError("No fractional number specified.", text)
        rest = text[pos:]
        if rest.strip():
            raise ParseError(f"Unexpected trailing data: '{rest}'", text)

        return cls.from_mixed_number(
            whole or 0, fractional if fractional is not None else cls(0, 1)
        )

    def to_mixed_number(self) -> tuple[int, "Fraction"]:
        """Split into a whole number and a proper, non-negative remainder."""
        return (
            self.numerator // self.denominator,
            Fraction(self.numerator % self.denominator, self.denominator),
        )

    @property
    def is_whole(self) -> bool:
        return self.denominator == 1

    def __str__(self) -> str:
        if self.numerator < 0:
            return f"-{Fraction(-self.numerator, self.denominator)}"

        whole, remainder = self.to_mixed_number()
        if remainder.numerator == 0:
            return str(whole)
        fractional = f"{remainder.numerator}/{remainder.denominator}"
        if whole == 0:
            return fractional
        return f"{whole} {fractional}"
