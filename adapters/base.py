from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ww_core.models import Category


class BaseAdapter(ABC):
    """Turn a raw backend record into a canonical Category."""

    @abstractmethod
    def build(
        self,
        record: Dict[str, Any],
        *,
        owner_id: Optional[str] = None,
    ) -> Optional[Category]: ...
