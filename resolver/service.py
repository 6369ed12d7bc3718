# resolver/service.py
"""
Display service: resolves category icons/colors against built-in or
YAML-overridden tables.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import yaml

from resolver import display
from resolver.rules import (
    DEFAULT_TABLES,
    DisplayTables,
    DisplayTablesError,
    build_tables,
    first_match,
)
from ww_core.models import Category, DisplayAttributes

LOGGER = logging.getLogger(__name__)


def load_tables(tables_path: Optional[str] = None) -> DisplayTables:
    """
    Load display tables from YAML. A missing path or file means built-ins;
    a file that exists but is malformed raises DisplayTablesError.
    """
    if not tables_path:
        return DEFAULT_TABLES
    p = Path(tables_path)
    if not p.exists():
        LOGGER.info("Display tables not found at %s; using built-in tables.", p)
        return DEFAULT_TABLES
    try:
        with open(p, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DisplayTablesError(f"{p}: invalid YAML ({exc})") from exc
    tables = build_tables(cfg or {})
    LOGGER.debug(
        "Loaded display tables from %s: %d icon rules, %d color rules, %d palette colors",
        p,
        len(tables.icon_rules),
        len(tables.color_rules),
        len(tables.palette),
    )
    return tables


class DisplayService:
    """Service for resolving category display attributes."""

    def __init__(self, tables_path: Optional[str] = None, tables: Optional[DisplayTables] = None):
        self.tables = tables if tables is not None else load_tables(tables_path)

    def display_icon(self, category: Category) -> str:
        return display.display_icon(category, self.tables)

    def display_color(self, category: Category) -> str:
        return display.display_color(category, self.tables)

    def icon_for_name(self, name: str) -> str:
        return display.icon_for_name(name, self.tables)

    def color_for_name(self, name: str) -> str:
        return display.color_for_name(name, self.tables)

    def resolve(self, category: Category) -> DisplayAttributes:
        return display.resolve(category, self.tables)

    def resolve_all(self, categories: Iterable[Category]) -> List[DisplayAttributes]:
        return [self.resolve(c) for c in categories]

    def display_for(self, category: Optional[Category], fallback_name: str) -> DisplayAttributes:
        return display.display_for(category, fallback_name, self.tables)

    def matched_rule_for_icon(self, name: str) -> Optional[str]:
        """Name of the icon rule that wins for `name`, or None if the fallback applies."""
        rule = first_match(self.tables.icon_rules, name)
        return rule.name if rule else None

    def matched_rule_for_color(self, name: str) -> Optional[str]:
        """Name of the color rule that wins for `name`, or None if the palette applies."""
        rule = first_match(self.tables.color_rules, name)
        return rule.name if rule else None

    def get_rule_count(self) -> int:
        """Return number of icon plus color rules configured."""
        return len(self.tables.icon_rules) + len(self.tables.color_rules)
