"""
Parser for todo.txt lines.

Main API:
    parse_line(line)      → TaskItem
    parse_document(text)  → List[TaskItem]

A line is split on single spaces and walked once, left to right. The prefix
(completion marker, priority, up to two dates) is recognised by a
forward-only stage machine; whatever is left is classified as a tag or
appended to the description. utils.formatting is the inverse.
"""

import logging
from datetime import date
from enum import IntEnum
from typing import List, Optional

from todotxt.errors import DocumentParseError, InvalidPriority
from todotxt.models.priority import priority_from_letter
from todotxt.models.task import TAG_CONTEXT, TAG_PROJECT, Tag, TaskItem
from todotxt.utils.dates import parse_date_token

log = logging.getLogger(__name__)

COMPLETE_MARKER = "x"


class _Stage(IntEnum):
    START = 0
    COMPLETED = 1
    PRIORITIZED = 2
    CREATED = 3
    BODY = 4


# ---------------------------------------------------------------------------
# Low-level parsers
# ---------------------------------------------------------------------------

def _is_priority_token(token: str) -> bool:
    # Byte length: a non-ASCII "(é)" is body text, not a bad priority
    return len(token.encode("utf-8")) == 3 and token[0] == "(" and token[2] == ")"


def split_body_token(token: str) -> Optional[Tag]:
    """
    Classify a body token as a tag.

    Returns:
        Tag for "+project", "@context" or "key:value" (exactly one colon),
        None if the token belongs to the description.
    """
    if token.startswith("+"):
        return Tag(TAG_PROJECT, token[1:])
    if token.startswith("@"):
        return Tag(TAG_CONTEXT, token[1:])
    parts = token.split(":")
    if len(parts) == 2:
        return Tag(parts[0], parts[1])
    return None


# ---------------------------------------------------------------------------
# Main parse API
# ---------------------------------------------------------------------------

def parse_line(line: str) -> TaskItem:
    """
    Parse a single todo.txt line into a TaskItem.

    Raises:
        InvalidPriority: if a "(?)" token in priority position holds
            anything but a letter A-Z. The whole line fails.
    """
    complete = False
    priority: Optional[int] = None
    creation_date: Optional[date] = None
    completion_date: Optional[date] = None
    words: List[str] = []
    tags: List[Tag] = []

    stage = _Stage.START
    for token in line.split(" "):
        if stage == _Stage.START and token == COMPLETE_MARKER:
            complete = True
            stage = _Stage.COMPLETED
            continue

        if stage <= _Stage.COMPLETED and _is_priority_token(token):
            priority = priority_from_letter(token[1])
            stage = _Stage.PRIORITIZED
            continue

        if stage <= _Stage.PRIORITIZED:
            parsed = parse_date_token(token)
            if parsed is not None:
                creation_date = parsed
                stage = _Stage.CREATED
                continue
            stage = _Stage.BODY

        if stage <= _Stage.CREATED:
            stage = _Stage.BODY
            parsed = parse_date_token(token)
            if parsed is not None:
                # Two leading dates: the first one was the completion date
                completion_date, creation_date = creation_date, parsed
                continue

        tag = split_body_token(token)
        if tag is not None:
            tags.append(tag)
        else:
            words.append(token)

    return TaskItem(
        complete=complete,
        priority=priority,
        creation_date=creation_date,
        completion_date=completion_date,
        description=_join_description(words),
        tags=tuple(tags),
    )


def _join_description(words: List[str]) -> str:
    """Join description words with single spaces, skipping leading empties."""
    description = ""
    for word in words:
        if description == "":
            description = word
        else:
            description += " " + word
    return description


def parse_document(text: str) -> List[TaskItem]:
    """
    Parse a multi-line todo.txt document, one TaskItem per line.

    Empty lines become empty TaskItems so indexes line up with the input.

    Raises:
        DocumentParseError: for the first line that fails, with its 0-based
            index. Later lines are not parsed.
    """
    items: List[TaskItem] = []
    for line_index, line in enumerate(text.split("\n")):
        try:
            items.append(parse_line(line))
        except InvalidPriority as e:
            log.debug("Line %d failed to parse: %s", line_index, e)
            raise DocumentParseError(line_index, e) from e
    log.debug("Parsed %d lines", len(items))
    return items
