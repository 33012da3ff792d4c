"""
Core todo.txt data models.

A TaskItem holds everything needed to rebuild its line through
utils.formatting; the parser never keeps the raw text around.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .priority import priority_to_letter

# Reserved tag keys for the @context and +project shorthands
TAG_CONTEXT = "@context"
TAG_PROJECT = "+project"


@dataclass(frozen=True)
class Tag:
    """A key/value annotation. Context and project tags use the reserved keys."""

    key: str
    value: str

    @property
    def is_context(self) -> bool:
        return self.key == TAG_CONTEXT

    @property
    def is_project(self) -> bool:
        return self.key == TAG_PROJECT


@dataclass(frozen=True)
class TaskItem:
    """
    A single todo.txt line.

    completion_date is only set by the parser when two leading dates are
    present; a lone date is always the creation date.
    """

    complete: bool = False
    priority: Optional[int] = None
    creation_date: Optional[date] = None
    completion_date: Optional[date] = None
    description: str = ""
    tags: Tuple[Tag, ...] = ()

    @property
    def priority_letter(self) -> Optional[str]:
        """Priority as its letter ("A".."Z"), or None."""
        if self.priority is None:
            return None
        return priority_to_letter(self.priority)

    @property
    def projects(self) -> Tuple[str, ...]:
        """Values of +project tags, in line order."""
        return tuple(t.value for t in self.tags if t.is_project)

    @property
    def contexts(self) -> Tuple[str, ...]:
        """Values of @context tags, in line order."""
        return tuple(t.value for t in self.tags if t.is_context)

    @property
    def custom_tags(self) -> Tuple[Tag, ...]:
        return tuple(t for t in self.tags if not (t.is_project or t.is_context))

    def __str__(self) -> str:
        from todotxt.utils.formatting import format_item

        return format_item(self)
