"""
todo.txt tool handlers.

Core logic lives in handle_* functions (return dicts).
MCP wrappers in register_todo_tools() serialize to JSON strings.
"""

import json
import logging
from datetime import date
from typing import Optional

from mcp.server.fastmcp import FastMCP

from todotxt.errors import TodoTxtError
from todotxt.models.priority import priority_from_letter
from todotxt.models.task import Tag, TaskItem
from todotxt.parsers.line_parser import parse_document, parse_line
from todotxt.utils.dates import format_date, parse_date_token
from todotxt.utils.formatting import format_document

log = logging.getLogger(__name__)


def item_to_dict(item: TaskItem) -> dict:
    """Serialize a TaskItem to a JSON-serializable dict."""
    return {
        "complete": item.complete,
        "priority": item.priority_letter,
        "creation_date": format_date(item.creation_date) if item.creation_date else None,
        "completion_date": format_date(item.completion_date) if item.completion_date else None,
        "description": item.description,
        "tags": [{"key": t.key, "value": t.value} for t in item.tags],
    }


def _parse_date_field(value: Optional[str], name: str) -> Optional[date]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a YYYY-MM-DD string, got {value!r}")
    parsed = parse_date_token(value)
    if parsed is None:
        raise ValueError(f"{name} must be YYYY-MM-DD, got {value!r}")
    return parsed


def item_from_dict(data: dict) -> TaskItem:
    """
    Build a TaskItem from the dict shape produced by item_to_dict.

    Raises:
        InvalidPriority: for a bad priority letter
        ValueError: for a record, date, description or tag entry of the
            wrong shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"records must be objects, got {data!r}")
    priority = data.get("priority")
    description = data.get("description") or ""
    if not isinstance(description, str):
        raise ValueError(f"description must be a string, got {description!r}")
    entries = data.get("tags") or []
    if not isinstance(entries, list):
        raise ValueError(f"tags must be a list, got {entries!r}")
    tags = []
    for entry in entries:
        if not isinstance(entry, dict) or "key" not in entry or "value" not in entry:
            raise ValueError(f"tag entries need 'key' and 'value': {entry!r}")
        tags.append(Tag(str(entry["key"]), str(entry["value"])))
    return TaskItem(
        complete=bool(data.get("complete", False)),
        priority=priority_from_letter(str(priority)) if priority is not None else None,
        creation_date=_parse_date_field(data.get("creation_date"), "creation_date"),
        completion_date=_parse_date_field(data.get("completion_date"), "completion_date"),
        description=description,
        tags=tuple(tags),
    )


# ---------------------------------------------------------------------------
# Handler functions (return dicts, shared by MCP tools and the CLI)
# ---------------------------------------------------------------------------


def handle_parse_line(*, line: str) -> dict:
    try:
        return item_to_dict(parse_line(line))
    except TodoTxtError as e:
        return {"error": str(e)}


def handle_parse_document(*, text: str) -> dict:
    try:
        items = parse_document(text)
    except TodoTxtError as e:
        log.info("Document rejected: %s", e)
        return {"error": str(e), "line": getattr(e, "line_index", None)}
    return {"items": [item_to_dict(i) for i in items]}


def handle_format(*, items: list) -> dict:
    try:
        parsed = [item_from_dict(d) for d in items]
    except ValueError as e:
        return {"error": str(e)}
    return {"text": format_document(parsed)}


def handle_normalize(*, text: str) -> dict:
    """Parse a document and render it back in canonical form."""
    try:
        items = parse_document(text)
    except TodoTxtError as e:
        return {"error": str(e), "line": getattr(e, "line_index", None)}
    return {"text": format_document(items)}


def register_todo_tools(mcp: FastMCP) -> None:
    """Register all todo.txt MCP tools onto the FastMCP instance."""

    @mcp.tool()
    def todo_parse_line(line: str) -> str:
        """
        Parse one todo.txt line into its fields.

        Args:
            line: A single line, e.g. "(A) 2024-01-05 Call Mom @Phone +Family"
        """
        return json.dumps(handle_parse_line(line=line), indent=2)

    @mcp.tool()
    def todo_parse_document(text: str) -> str:
        """
        Parse a multi-line todo.txt document. Stops at the first bad line.

        Args:
            text: Document text, lines separated by newlines
        """
        return json.dumps(handle_parse_document(text=text), indent=2)

    @mcp.tool()
    def todo_format(items: list[dict]) -> str:
        """
        Render task records back to todo.txt lines.

        Args:
            items: Records shaped like todo_parse_line output
        """
        return json.dumps(handle_format(items=items), indent=2)

    @mcp.tool()
    def todo_normalize(text: str) -> str:
        """
        Rewrite a todo.txt document in canonical form (tags moved after the
        description, single spaces).

        Args:
            text: Document text, lines separated by newlines
        """
        return json.dumps(handle_normalize(text=text), indent=2)
