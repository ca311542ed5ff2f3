"""Plain-text rendering of a consolidated shopping list for printing."""

from recipebasket.shopping.models import ConsolidatedIngredient, QuantityEntry

EMPTY_LIST_TEXT = "Your shopping list is empty"


def _quantity_line(entry: QuantityEntry) -> str:
    amount = " ".join(part for part in (entry.quantity, entry.unit) if part)
    source = f"({entry.from_recipe})"
    return f"    {amount} {source}" if amount else f"    {source}"


def render_text(consolidated: list[ConsolidatedIngredient], title: str = "Shopping List") -> str:
    """
    Render consolidated ingredients as a printable checklist.

    Each ingredient gets a checkbox line, one indented line per contributing
    recipe and, when present, a line of notes.
    """
    if not consolidated:
        return f"{title}\n\n{EMPTY_LIST_TEXT}\n"

    lines = [title, ""]
    for item in consolidated:
        lines.append(f"[ ] {item.name}")
        lines.extend(_quantity_line(q) for q in item.quantities)
        if item.notes:
            lines.append(f"    {' - '.join(item.notes)}")

    return "\n".join(lines) + "\n"
