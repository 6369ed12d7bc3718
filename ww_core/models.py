from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Category:
    id: str  # FileMaker recordId, or a local id for built-in defaults
    name: str
    icon: Optional[str] = None
    color: Optional[str] = None
    owner_id: str = ""


@dataclass(frozen=True)
class DisplayAttributes:
    icon: str
    color: str
