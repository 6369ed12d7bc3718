import pytest

from config.loader import DEFAULT_CONFIG, REPO, load_config, log_level_from, tables_path_from


def test_repo_config_loads():
    cfg = load_config()
    assert DEFAULT_CONFIG.exists()
    assert tables_path_from(cfg) == str(REPO / "config" / "display_tables.example.yaml")
    assert log_level_from(cfg) == "INFO"


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "config.toml")


def test_custom_config(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text('[display]\ntables_path = "/abs/tables.yaml"\n[logging]\nlevel = "debug"\n', encoding="utf-8")
    cfg = load_config(p)
    assert tables_path_from(cfg) == "/abs/tables.yaml"
    assert log_level_from(cfg) == "DEBUG"
    assert tables_path_from({}) is None
