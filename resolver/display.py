# resolver/display.py
"""
Category display attributes: an icon and a color for any category.

Stored icons are trusted only when they are in the allowed set; stored colors
are trusted whenever non-empty. Anything else is derived from the category
name, and unmatched names fall back to "tag.fill" and a palette color picked
by a stable hash of the name. Nothing here raises or returns an empty value.
"""
from __future__ import annotations

from typing import Optional

from resolver.rules import DEFAULT_TABLES, DisplayTables, first_match
from ww_core.models import Category, DisplayAttributes
from ww_utils.display_tables import MISSING_CATEGORY_COLOR
from ww_utils.fingerprint import stable_name_hash


# Stored values are trimmed of spaces and tabs only, not line breaks.
_TRIM = " \t"


def _normalize(raw: Optional[str]) -> str:
    return (raw or "").strip(_TRIM).lower()


def icon_for_name(name: str, tables: DisplayTables = DEFAULT_TABLES) -> str:
    """E.g. "Salary" -> "dollarsign.circle.fill"; no keyword hit -> "tag.fill"."""
    rule = first_match(tables.icon_rules, name)
    return rule.value if rule else tables.fallback_icon


def color_for_name(name: str, tables: DisplayTables = DEFAULT_TABLES) -> str:
    """E.g. "Food" -> "orange"; no keyword hit -> palette entry by name hash."""
    rule = first_match(tables.color_rules, name)
    if rule:
        return rule.value
    return tables.palette[stable_name_hash(name or "") % len(tables.palette)]


def display_icon(category: Category, tables: DisplayTables = DEFAULT_TABLES) -> str:
    raw = _normalize(category.icon)
    if raw and raw in tables.allowed_icons:
        return raw
    return icon_for_name(category.name, tables)


def display_color(category: Category, tables: DisplayTables = DEFAULT_TABLES) -> str:
    raw = _normalize(category.color)
    if raw:
        return raw
    return color_for_name(category.name, tables)


def resolve(category: Category, tables: DisplayTables = DEFAULT_TABLES) -> DisplayAttributes:
    return DisplayAttributes(
        icon=display_icon(category, tables),
        color=display_color(category, tables),
    )


def display_for(
    category: Optional[Category],
    fallback_name: str,
    tables: DisplayTables = DEFAULT_TABLES,
) -> DisplayAttributes:
    """
    Attributes for a transaction row. When its category record is missing,
    the icon comes from the transaction title and the color is gray.
    """
    if category is None:
        return DisplayAttributes(
            icon=icon_for_name(fallback_name, tables),
            color=MISSING_CATEGORY_COLOR,
        )
    return resolve(category, tables)
