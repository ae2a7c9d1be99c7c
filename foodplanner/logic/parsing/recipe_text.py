"""Free-text recipe parser.

Turns a pasted block like::

    Soup
    Ingredients
    500g Potato
    1 Onion
    Instructions
    Boil
    4

into a Recipe. Layout: first line is the name, an optional "Ingredients"
section, an optional "Instructions" section, and a trailing number for the
servings. Markers are matched case-insensitively at the start of a line.

Quantities are only split from units when they share a token ("500g");
"500 g" reads 500 as the quantity and keeps "g" in the ingredient name.
Parsing never fails; missing parts fall back to empty values and serves=1.
"""
import re
import unicodedata
from typing import List, Optional, Tuple
from foodplanner.domain.Ingredient import Ingredient
from foodplanner.domain.MealType import MealType
from foodplanner.domain.Recipe import Recipe

INGREDIENTS_MARKER = "ingredients"
INSTRUCTIONS_MARKER = "instructions"
_NUMERIC_CHARS = "0123456789."
_PLAIN_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_PLAIN_INTEGER = re.compile(r"[+-]?\d+")


def _is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def _strip_punctuation(token: str) -> str:
    start, end = 0, len(token)
    while start < end and _is_punctuation(token[start]):
        start += 1
    while end > start and _is_punctuation(token[end - 1]):
        end -= 1
    return token[start:end]


def _split_quantity(token: str) -> Optional[Tuple[float, Optional[str]]]:
    """Return (quantity, unit) when the token starts with a number, else None."""
    stripped = _strip_punctuation(token)
    digits = ""
    for ch in stripped:
        if ch not in _NUMERIC_CHARS:
            break
        digits += ch
    if not digits:
        return None
    try:
        quantity = float(digits)
    except ValueError:  # "1.2.3", "."
        return None
    suffix = stripped[len(digits):]
    return quantity, (suffix or None)


def parse_ingredient_line(line: str) -> Ingredient:
    quantity: Optional[float] = None
    unit: Optional[str] = None
    name_tokens: List[str] = []
    for token in line.split():
        parsed = _split_quantity(token)
        if parsed is None:
            name_tokens.append(token)
        else:
            # the last numeric token on the line wins
            quantity, unit = parsed
    return Ingredient(name=" ".join(name_tokens), quantity=quantity, unit=unit)


def _starts_with(line: Optional[str], marker: str) -> bool:
    return line is not None and line.lower().startswith(marker)


def _parse_serves(line: Optional[str]) -> int:
    if line is None or not _PLAIN_INTEGER.fullmatch(line):
        return 1
    serves = int(line)
    return serves if serves >= 1 else 1


def parse_recipe_text(text: str) -> Recipe:
    """Parse a pasted recipe. The result is a breakfast recipe with a fresh id."""
    if not isinstance(text, str):
        text = ""
    lines = [line for line in text.splitlines() if line]

    def at(i: int) -> Optional[str]:
        return lines[i] if i < len(lines) else None

    idx = 0
    name = at(idx) or ""
    idx += 1

    ingredients: List[Ingredient] = []
    if _starts_with(at(idx), INGREDIENTS_MARKER):
        idx += 1
        while idx < len(lines) and not _starts_with(lines[idx], INSTRUCTIONS_MARKER):
            ingredients.append(parse_ingredient_line(lines[idx]))
            idx += 1

    instructions: List[str] = []
    if _starts_with(at(idx), INSTRUCTIONS_MARKER):
        idx += 1
        while idx < len(lines) and not _PLAIN_NUMBER.fullmatch(lines[idx]):
            instructions.append(lines[idx])
            idx += 1

    return Recipe(
        name=name,
        meal_type=MealType.BREAKFAST,
        serves=_parse_serves(lines[-1] if lines else None),
        ingredients=ingredients,
        instructions=instructions,
    )


__all__ = ['parse_recipe_text', 'parse_ingredient_line']
