"""Normalize free-text recipe data."""

from recipebasket.normalize.quantities import (
    format_number,
    parse_quantity_string,
    scale_quantity,
)

__all__ = [
    "format_number",
    "parse_quantity_string",
    "scale_quantity",
]
