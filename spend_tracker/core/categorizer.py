# spend_tracker/core/categorizer.py
from spend_tracker.core.models import Category, CATEGORY_DISPLAY_NAMES

_BY_LABEL = {}
for _cat, _label in CATEGORY_DISPLAY_NAMES.items():
    _BY_LABEL[_cat.name.lower()] = _cat
    _BY_LABEL[_label.lower()] = _cat


def parse_category(value):
    """Resolve an enum name ("DINING_OUT") or display name ("Dining Out")."""
    if isinstance(value, Category):
        return value
    key = str(value or "").strip().lower()
    try:
        return _BY_LABEL[key]
    except KeyError:
        raise ValueError(f"Unknown category '{value}'") from None


def format_category_name(category):
    if isinstance(category, Category):
        return category.display_name
    try:
        return Category(category).display_name
    except ValueError:
        return category
