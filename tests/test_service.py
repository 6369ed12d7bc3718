import logging

import pytest

from resolver.rules import DisplayTablesError
from resolver.service import DisplayService, load_tables
from ww_core.models import Category, DisplayAttributes


def test_defaults_without_tables_file():
    svc = DisplayService()
    assert svc.icon_for_name("Coffee") == "fork.knife"
    assert svc.color_for_name("Coffee") == "brown"
    assert svc.get_rule_count() == 38


def test_missing_tables_file_falls_back(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="resolver.service"):
        svc = DisplayService(tables_path=str(tmp_path / "nope.yaml"))
    assert svc.icon_for_name("Gym") == "heart.fill"
    assert "using built-in tables" in caplog.text


def test_yaml_override_preserves_order(write_tables):
    path = write_tables(
        {
            "name_to_icon": [
                {"name": "drinks", "keywords": ["coffee", "tea"], "icon": "cup.and.saucer.fill"},
                {"name": "food", "keywords": ["food", "coffee"], "icon": "fork.knife"},
            ],
            "name_to_color": [{"keywords": ["coffee"], "color": "Brown"}],
            "color_palette": ["only"],
        }
    )
    svc = DisplayService(tables_path=path)
    assert svc.icon_for_name("Coffee") == "cup.and.saucer.fill"
    assert svc.matched_rule_for_icon("Coffee") == "drinks"
    assert svc.color_for_name("coffee beans") == "brown"
    # everything unmatched lands on the single palette entry
    assert svc.color_for_name("Food") == "only"
    assert svc.icon_for_name("Zzyx") == "tag.fill"
    assert svc.get_rule_count() == 3


def test_invalid_yaml_raises(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("name_to_icon: [\n", encoding="utf-8")
    with pytest.raises(DisplayTablesError):
        load_tables(str(p))


def test_unknown_icon_in_yaml_raises(write_tables):
    path = write_tables({"name_to_icon": [{"keywords": ["gym"], "icon": "dumbbell"}]})
    with pytest.raises(DisplayTablesError):
        DisplayService(tables_path=path)


def test_empty_yaml_means_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    svc = DisplayService(tables_path=str(p))
    assert svc.icon_for_name("Lunch") == "fork.knife"


def test_matched_rule_audit():
    svc = DisplayService()
    assert svc.matched_rule_for_icon("Grocery Shopping") == "shopping"
    assert svc.matched_rule_for_color("Coffee") == "drink"
    assert svc.matched_rule_for_icon("Zzyx") is None
    assert svc.matched_rule_for_color("Zzyx") is None


def test_resolve_all_and_display_for():
    svc = DisplayService()
    cats = [
        Category(id="1", name="Food"),
        Category(id="2", name="Zzyx", icon="invalid_icon"),
        Category(id="3", name="Kids", icon="Sparkles", color="Pink"),
    ]
    assert svc.resolve_all(cats) == [
        DisplayAttributes(icon="fork.knife", color="orange"),
        DisplayAttributes(icon="tag.fill", color="blue"),
        DisplayAttributes(icon="sparkles", color="pink"),
    ]
    assert svc.display_for(None, "Netflix") == DisplayAttributes(icon="tv.fill", color="gray")
