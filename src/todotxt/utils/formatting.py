"""
Canonical todo.txt rendering.

This module is the single source of truth for how a TaskItem is written back
to text. Segment order:

    [x ] [(P) ] [completion-date creation-date | creation-date ] description tags

A completion date is never written without a second date; when the item has
no creation date, the clock's today is used in its place.
"""

from datetime import date
from typing import Callable, Iterable

from todotxt.models.priority import priority_to_letter
from todotxt.models.task import TAG_CONTEXT, TAG_PROJECT, Tag, TaskItem
from todotxt.utils.dates import format_date

Clock = Callable[[], date]


def render_tag(tag: Tag) -> str:
    """
    Render a single tag.

    Returns:
        "+value" for projects, "@value" for contexts, "key:value" otherwise
    """
    if tag.key == TAG_PROJECT:
        return f"+{tag.value}"
    if tag.key == TAG_CONTEXT:
        return f"@{tag.value}"
    return f"{tag.key}:{tag.value}"


def format_item(item: TaskItem, clock: Clock = date.today) -> str:
    """
    Render a TaskItem as a todo.txt line.

    Args:
        item: The item to render (not modified)
        clock: Source of today's date, only called when the item has a
            completion date but no creation date

    Returns:
        The line, with trailing spaces and newlines stripped
    """
    result = ""
    if item.complete:
        result += "x "
    if item.priority is not None:
        result += f"({priority_to_letter(item.priority)}) "

    if item.completion_date is not None:
        result += format_date(item.completion_date) + " "
        creation_date = item.creation_date if item.creation_date is not None else clock()
        result += format_date(creation_date) + " "
    elif item.creation_date is not None:
        result += format_date(item.creation_date) + " "

    result += item.description + " "
    for tag in item.tags:
        result += render_tag(tag) + " "
    return result.rstrip(" \n")


def format_document(items: Iterable[TaskItem], clock: Clock = date.today) -> str:
    """Render items one per line, the inverse of parse_document."""
    return "\n".join(format_item(item, clock) for item in items)
