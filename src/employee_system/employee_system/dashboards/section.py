from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Section(Generic[T]):
    """One list on a dashboard with its own error and open form.

    Errors are scoped: a failure in one section never touches another.
    """

    items: List[T] = field(default_factory=list)
    error: str = ""
    editing: Optional[Any] = None

    @property
    def is_empty(self) -> bool:
        return not self.items
