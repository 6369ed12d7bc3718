# resolver/rules.py
"""
Keyword rules for deriving category display attributes.

Features:
- Declared-order evaluation (first matching rule wins; never re-sorted)
- Case-insensitive substring matching of keywords against the category name
- Rule name tracking for audit
- Table overrides compiled from a YAML config dict
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from ww_utils.display_tables import (
    ALLOWED_ICONS,
    COLOR_PALETTE,
    FALLBACK_ICON,
    NAME_TO_COLOR,
    NAME_TO_ICON,
    KeywordTable,
)


class DisplayTablesError(ValueError):
    """Raised when icon/color tables from config are unusable."""


@dataclass(frozen=True)
class KeywordRule:
    """Maps any of `keywords` found in a name to `value` (an icon or a color)."""

    name: str
    keywords: Tuple[str, ...]
    value: str

    def applies(self, name_lower: str) -> bool:
        """True if any keyword is a substring of the already-lowercased name."""
        return any(k in name_lower for k in self.keywords)


@dataclass(frozen=True)
class DisplayTables:
    allowed_icons: FrozenSet[str]
    icon_rules: Tuple[KeywordRule, ...]
    color_rules: Tuple[KeywordRule, ...]
    palette: Tuple[str, ...]
    fallback_icon: str = FALLBACK_ICON


def _as_list(value: Any, where: str) -> List[Any]:
    """YAML lists only; a bare string would otherwise be iterated per character."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise DisplayTablesError(f"{where}: expected a list, got {type(value).__name__}")
    return list(value)


def _clean_keywords(raw: Any, where: str) -> Tuple[str, ...]:
    keywords = tuple(
        str(k).strip().lower() for k in _as_list(raw, f"{where} keywords") if k is not None
    )
    # An empty keyword is a substring of every name and would shadow
    # everything listed after it.
    keywords = tuple(k for k in keywords if k)
    if not keywords:
        raise DisplayTablesError(f"{where}: rule has no keywords")
    return keywords


def parse_rule(r: Dict[str, Any], value_key: str, index: int = 0) -> KeywordRule:
    """Parse one `{keywords: [...], <value_key>: ...}` entry from YAML config."""
    if not isinstance(r, dict):
        raise DisplayTablesError(f"{value_key} rule #{index}: expected a mapping")
    where = f"{value_key} rule #{index}"
    keywords = _clean_keywords(r.get("keywords"), where)
    value = str(r.get(value_key) or "").strip().lower()
    if not value:
        raise DisplayTablesError(f"{where}: missing '{value_key}'")
    return KeywordRule(name=str(r.get("name") or keywords[0]), keywords=keywords, value=value)


def rules_from_table(table: KeywordTable) -> Tuple[KeywordRule, ...]:
    """Built-in (keywords, value) pairs as rules named after their first keyword."""
    return tuple(
        KeywordRule(name=keywords[0], keywords=tuple(keywords), value=value)
        for keywords, value in table
    )


def compile_rules(entries: Any, value_key: str) -> Tuple[KeywordRule, ...]:
    """Compile rules in the order given. Order is the priority; no sorting."""
    rules = _as_list(entries, f"name_to_{value_key}")
    return tuple(parse_rule(r, value_key, i) for i, r in enumerate(rules))


def first_match(
    rules: Iterable[KeywordRule], name: str
) -> Optional[KeywordRule]:
    """Return the first rule whose keywords hit the lowercased name, else None."""
    name_lower = (name or "").lower()
    for rule in rules:
        if rule.applies(name_lower):
            return rule
    return None


def validate_tables(tables: DisplayTables) -> DisplayTables:
    if not tables.palette:
        raise DisplayTablesError("color_palette must not be empty")
    if any(not c for c in tables.palette):
        raise DisplayTablesError("color_palette contains an empty color")
    for rule in tables.icon_rules:
        if rule.value != tables.fallback_icon and rule.value not in tables.allowed_icons:
            raise DisplayTablesError(
                f"icon rule '{rule.name}' maps to '{rule.value}', "
                "which is not an allowed icon"
            )
    return tables


def default_tables() -> DisplayTables:
    return DisplayTables(
        allowed_icons=ALLOWED_ICONS,
        icon_rules=rules_from_table(NAME_TO_ICON),
        color_rules=rules_from_table(NAME_TO_COLOR),
        palette=COLOR_PALETTE,
    )


def build_tables(cfg: Optional[Dict[str, Any]]) -> DisplayTables:
    """
    Build display tables from a config dict, falling back per key to the
    built-in tables. Recognised keys: allowed_icons, name_to_icon,
    name_to_color, color_palette.
    """
    base = default_tables()
    if cfg is None:
        return base
    if not isinstance(cfg, dict):
        raise DisplayTablesError("tables config must be a mapping")

    allowed = base.allowed_icons
    if "allowed_icons" in cfg:
        allowed = frozenset(
            str(i).strip().lower()
            for i in _as_list(cfg["allowed_icons"], "allowed_icons")
            if i
        )

    icon_rules = base.icon_rules
    if "name_to_icon" in cfg:
        icon_rules = compile_rules(cfg["name_to_icon"], "icon")

    color_rules = base.color_rules
    if "name_to_color" in cfg:
        color_rules = compile_rules(cfg["name_to_color"], "color")

    palette = base.palette
    if "color_palette" in cfg:
        raw_palette = _as_list(cfg["color_palette"], "color_palette")
        if any(c is None for c in raw_palette):
            raise DisplayTablesError("color_palette contains a null color")
        palette = tuple(str(c).strip().lower() for c in raw_palette)

    return validate_tables(
        DisplayTables(
            allowed_icons=allowed,
            icon_rules=icon_rules,
            color_rules=color_rules,
            palette=palette,
        )
    )


DEFAULT_TABLES: DisplayTables = validate_tables(default_tables())
