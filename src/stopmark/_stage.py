"""Capability-based stage contract hosted by Pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import Document


class Stage(ABC):
    """A pipeline step that adds one kind of annotation to a document."""

    __slots__ = ()

    name: str = ""

    @abstractmethod
    def annotate(self, document: Document) -> None:
        """Add this stage's annotations to the document in place."""

    @abstractmethod
    def requires(self) -> frozenset[str]:
        """Capabilities that must be produced before this stage runs."""

    @abstractmethod
    def requirements_satisfied(self) -> frozenset[str]:
        """Capabilities this stage produces."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
