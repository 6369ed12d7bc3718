# ww_utils/display_tables.py
# Built-in icon/color vocabularies for category display.
# Table order is a priority ranking: the first entry with a matching keyword
# wins, so e.g. the food entry must stay ahead of the drink entry.

from __future__ import annotations

from typing import FrozenSet, Tuple

KeywordTable = Tuple[Tuple[Tuple[str, ...], str], ...]

FALLBACK_ICON = "tag.fill"

# SF Symbol names accepted from FileMaker as stored icons.
ALLOWED_ICONS: FrozenSet[str] = frozenset(
    {
        "fork.knife",
        "car.fill",
        "bag.fill",
        "doc.text.fill",
        "tv.fill",
        "heart.fill",
        "book.fill",
        "dollarsign.circle.fill",
        "ellipsis.circle.fill",
        "tag.fill",
        "house.fill",
        "cart.fill",
        "creditcard.fill",
        "gift.fill",
        "airplane",
        "bus.fill",
        "bicycle",
        "fuelpump.fill",
        "figure.walk",
        "cup.and.saucer.fill",
        "takeoutbag.and.cup.and.straw.fill",
        "wineglass.fill",
        "creditcard",
        "banknote.fill",
        "chart.pie.fill",
        "briefcase.fill",
        "graduationcap.fill",
        "stethoscope",
        "pills.fill",
        "sportscourt.fill",
        "gamecontroller.fill",
        "film.fill",
        "music.note",
        "paintbrush.fill",
        "wrench.and.screwdriver.fill",
        "hammer.fill",
        "lightbulb.fill",
        "pawprint.fill",
        "sparkles",
        "person.2.fill",
    }
)

NAME_TO_ICON: KeywordTable = (
    (
        (
            "food",
            "groceries",
            "eating",
            "restaurant",
            "dining",
            "meal",
            "lunch",
            "dinner",
            "breakfast",
            "cafe",
            "coffee",
        ),
        "fork.knife",
    ),
    (
        ("drink", "drinks", "beverage", "bar", "wine", "beer", "coffee", "tea"),
        "cup.and.saucer.fill",
    ),
    (
        ("transport", "car", "travel", "uber", "taxi", "fuel", "gas", "petrol", "commute"),
        "car.fill",
    ),
    (("bus", "transit"), "bus.fill"),
    (("flight", "airline", "plane"), "airplane"),
    (("shopping", "store", "retail", "market", "mall"), "bag.fill"),
    (
        ("bills", "utilities", "electric", "water", "rent", "mortgage", "insurance"),
        "doc.text.fill",
    ),
    (
        ("entertainment", "movie", "cinema", "netflix", "streaming", "game", "gaming"),
        "tv.fill",
    ),
    (("health", "medical", "pharmacy", "doctor", "fitness", "gym"), "heart.fill"),
    (("education", "school", "course", "training", "book"), "book.fill"),
    (
        ("salary", "income", "pay", "wage", "freelance", "work"),
        "dollarsign.circle.fill",
    ),
    (("gift", "donation", "charity"), "gift.fill"),
    (("home", "housing", "house"), "house.fill"),
    (("subscription", "membership"), "creditcard.fill"),
    (("pet", "animal", "vet"), "pawprint.fill"),
    (("personal", "care", "beauty"), "sparkles"),
    (("kids", "child", "baby"), "person.2.fill"),
    (("tax",), "doc.text.fill"),
    (("other", "misc", "miscellaneous", "general", "uncategorized"), "tag.fill"),
)

# Same categories as NAME_TO_ICON, but "coffee"/"cafe" live only in the drink
# entry here.
NAME_TO_COLOR: KeywordTable = (
    (
        (
            "food",
            "groceries",
            "eating",
            "restaurant",
            "dining",
            "meal",
            "lunch",
            "dinner",
            "breakfast",
        ),
        "orange",
    ),
    (
        ("drink", "drinks", "beverage", "bar", "wine", "beer", "coffee", "tea", "cafe"),
        "brown",
    ),
    (
        ("transport", "car", "travel", "uber", "taxi", "fuel", "gas", "petrol", "commute"),
        "blue",
    ),
    (("bus", "transit"), "indigo"),
    (("flight", "airline", "plane"), "cyan"),
    (("shopping", "store", "retail", "market", "mall"), "pink"),
    (
        ("bills", "utilities", "electric", "water", "rent", "mortgage", "insurance"),
        "purple",
    ),
    (
        ("entertainment", "movie", "cinema", "netflix", "streaming", "game", "gaming"),
        "red",
    ),
    (("health", "medical", "pharmacy", "doctor", "fitness", "gym"), "green"),
    (("education", "school", "course", "training", "book"), "teal"),
    (("salary", "income", "pay", "wage", "freelance", "work"), "mint"),
    (("gift", "donation", "charity"), "yellow"),
    (("home", "housing", "house"), "indigo"),
    (("subscription", "membership"), "purple"),
    (("pet", "animal", "vet"), "orange"),
    (("personal", "care", "beauty"), "pink"),
    (("kids", "child", "baby"), "cyan"),
    (("tax",), "red"),
    (("other", "misc", "miscellaneous", "general", "uncategorized"), "gray"),
)

# Fallback for names no keyword entry claims; indexed by stable name hash.
COLOR_PALETTE: Tuple[str, ...] = (
    "blue",
    "green",
    "orange",
    "purple",
    "pink",
    "red",
    "teal",
    "indigo",
    "cyan",
    "mint",
    "yellow",
    "brown",
)

# Color shown for a transaction whose category record is missing.
MISSING_CATEGORY_COLOR = "gray"
