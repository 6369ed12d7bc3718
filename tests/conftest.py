import json
from pathlib import Path

import pytest
import yaml

REPO = Path(__file__).resolve().parents[1]


def _record(record_id, **field_data):
    return {"fieldData": field_data, "recordId": record_id, "modId": "1"}


@pytest.fixture
def find_response():
    """A Data API _find response in the shape the Category layout returns."""
    return {
        "response": {
            "dataInfo": {
                "database": "WalletWatch",
                "layout": "Category",
                "table": "Category",
                "totalRecordCount": 4,
                "foundCount": 4,
                "returnedCount": 4,
            },
            "data": [
                _record("11", CategoryName="Food", Icon="fork.knife", Color="Orange", UserID="U-1"),
                _record("12", category_name="Salary", icon="dollarsign.circle.fill", color="", user_id="U-1"),
                _record("13", CategoryName="Zzyx", Icon="invalid_icon", User_ID="U-1"),
                _record("14", CategoryName="", Icon="car.fill"),
            ],
        },
        "messages": [{"code": "0", "message": "OK"}],
    }


@pytest.fixture
def records_file(tmp_path, find_response):
    p = tmp_path / "categories.json"
    p.write_text(json.dumps(find_response), encoding="utf-8")
    return p


@pytest.fixture
def write_tables(tmp_path):
    """Write a display-tables dict to YAML and return its path as str."""

    def _write(cfg, name="tables.yaml"):
        p = tmp_path / name
        with open(p, "w", encoding="utf-8") as f:
            yaml.safe_dump(cfg, f, sort_keys=False)
        return str(p)

    return _write
