"""Parsing and scaling of free-text ingredient quantities."""

import math
import re

# =============================================================================
# Patterns
# =============================================================================

_NUMBER = r"\d+(?:\.\d+)?"

RANGE_PATTERN = re.compile(rf"^({_NUMBER})\s*(?:-|–|to)\s*({_NUMBER})$")
FRACTION_PATTERN = re.compile(r"^(?:(\d+)\s+)?(\d+)/(\d+)$")
NUMBER_PATTERN = re.compile(rf"^({_NUMBER})$")

# Fractional parts (rounded to two places) shown as vulgar fractions
COMMON_FRACTIONS: dict[float, str] = {
    0.25: "¼",
    0.33: "⅓",
    0.5: "½",
    0.67: "⅔",
    0.75: "¾",
}


def parse_quantity_string(quantity_str: str | None) -> float | None:
    """
    Parse a single quantity into a float.

    Handles formats like:
    - "2"
    - "1.5"
    - "1/2"
    - "1 1/2" (one and a half)

    Returns None for empty, ranged or free-text quantities ("to taste").
    """
    if not quantity_str:
        return None

    quantity_str = quantity_str.strip()

    frac_match = FRACTION_PATTERN.match(quantity_str)
    if frac_match:
        whole = int(frac_match.group(1) or 0)
        denom = int(frac_match.group(3))
        if denom == 0:
            return None
        return whole + int(frac_match.group(2)) / denom

    num_match = NUMBER_PATTERN.match(quantity_str)
    if num_match:
        return float(num_match.group(1))

    return None


def format_number(value: float) -> str:
    """
    Format a scaled amount for display.

    Whole numbers print without decimals, common fractions print as vulgar
    fractions ("1 ½"), tiny remainders are dropped and anything else keeps
    one decimal.
    """
    if value == int(value):
        return str(int(value))

    whole = math.floor(value)
    remainder = round(value - whole, 2)
    if round(remainder, 1) >= 1:
        return str(whole + 1)

    fraction = COMMON_FRACTIONS.get(remainder)
    if remainder == 0.66:
        fraction = COMMON_FRACTIONS[0.67]
    if fraction:
        return fraction if whole == 0 else f"{whole} {fraction}"

    if remainder < 0.1:
        return str(whole)
    return f"{value:.1f}"


def scale_quantity(quantity: str | None, multiplier: float) -> str:
    """
    Scale a free-text quantity by a multiplier.

    Ranges ("1-2", "2 to 3") scale both ends. Quantities that cannot be
    parsed ("a handful") are returned unchanged.

    Args:
        quantity: Quantity as authored in the recipe.
        multiplier: Servings multiplier, e.g. 2 to double a recipe.

    Returns:
        The scaled quantity as display text.
    """
    if not quantity:
        return ""

    text = quantity.strip()

    range_match = RANGE_PATTERN.match(text)
    if range_match:
        low = float(range_match.group(1)) * multiplier
        high = float(range_match.group(2)) * multiplier
        return f"{format_number(low)}-{format_number(high)}"

    value = parse_quantity_string(text)
    if value is None:
        return quantity

    return format_number(value * multiplier)
