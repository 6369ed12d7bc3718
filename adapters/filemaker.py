# adapters/filemaker.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from adapters.base import BaseAdapter
from ww_core.models import Category

LOGGER = logging.getLogger(__name__)

# FileMaker layouts spell the same field several ways; earlier aliases win.
NAME_ALIASES = ("CategoryName", "category_name")
ICON_ALIASES = ("Icon", "icon")
COLOR_ALIASES = ("Color", "color")
OWNER_ALIASES = ("UserID", "user_id", "User_ID")

# Data API message codes
CODE_OK = "0"
CODE_NO_RECORDS = "401"


class FileMakerResponseError(RuntimeError):
    """Data API returned an error envelope instead of records."""

    def __init__(self, code: str, message: str):
        super().__init__(f"FileMaker error {code}: {message}")
        self.code = code
        self.message = message


def resolve_field(field_data: Dict[str, Any], aliases: Sequence[str]) -> Optional[str]:
    """First non-null value across `aliases`, in order. Empty strings count as present."""
    for key in aliases:
        value = field_data.get(key)
        if value is not None:
            return str(value)
    return None


class FileMakerCategoryAdapter(BaseAdapter):
    """Decode one `{fieldData, recordId, modId}` record from the Category layout."""

    def build(
        self,
        record: Dict[str, Any],
        *,
        owner_id: Optional[str] = None,
    ) -> Optional[Category]:
        field_data = record.get("fieldData")
        if not isinstance(field_data, dict):
            field_data = {}
        record_id = record.get("recordId")
        if record_id is None:
            LOGGER.warning("Skipping category record: missing recordId")
            return None

        name = resolve_field(field_data, NAME_ALIASES)
        if not name:
            LOGGER.warning("Skipping category record %s: missing category name", record_id)
            return None

        if owner_id is None:
            owner_id = resolve_field(field_data, OWNER_ALIASES)

        return Category(
            id=str(record_id),
            name=name,
            icon=resolve_field(field_data, ICON_ALIASES),
            color=resolve_field(field_data, COLOR_ALIASES),
            owner_id=owner_id or "",
        )


def _first_message(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    messages = payload.get("messages") or []
    if messages and isinstance(messages[0], dict):
        return messages[0]
    return None


def categories_from_response(
    payload: Dict[str, Any],
    owner_id: Optional[str] = None,
    adapter: Optional[BaseAdapter] = None,
) -> List[Category]:
    """
    Decode a Data API `_find` response into categories.

    - code "401" (no records match) -> []
    - any other non-zero code without data -> FileMakerResponseError
    - response without dataInfo/data -> []
    - records that are not objects, or lack a usable name, are skipped
    - data that is not a list -> ValueError
    """
    adapter = adapter or FileMakerCategoryAdapter()
    response = payload.get("response")
    if not isinstance(response, dict):
        response = {}
    data = response.get("data")

    msg = _first_message(payload)
    if msg is not None:
        code = str(msg.get("code", CODE_OK))
        if code == CODE_NO_RECORDS:
            LOGGER.info("No categories found (no matching records)")
            return []
        if code != CODE_OK and not data:
            raise FileMakerResponseError(code, str(msg.get("message", "")))

    if response.get("dataInfo") is None or data is None:
        LOGGER.warning("No categories in response")
        return []

    if not isinstance(data, list):
        raise ValueError(f"response.data must be a list, got {type(data).__name__}")

    out: List[Category] = []
    for record in data:
        if not isinstance(record, dict):
            LOGGER.warning("Skipping category record: expected an object, got %r", record)
            continue
        cat = adapter.build(record, owner_id=owner_id)
        if cat is not None:
            out.append(cat)
    LOGGER.debug("Decoded %d of %d category records", len(out), len(data))
    return out
