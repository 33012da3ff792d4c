"""
todo.txt line parser and formatter.

Main API:
    from todotxt import parse_line, format_item

    item = parse_line("(A) Call Mom @Phone +Family")
    item.priority        # 0
    item.contexts        # ("Phone",)
    format_item(item)    # "(A) Call Mom @Phone +Family"
"""

from .errors import DocumentParseError, InvalidPriority, TodoTxtError
from .models import (
    MAX_PRIORITY,
    TAG_CONTEXT,
    TAG_PROJECT,
    Tag,
    TaskItem,
    priority_from_letter,
    priority_to_letter,
)
from .parsers import parse_document, parse_line
from .utils.formatting import format_document, format_item, render_tag

__all__ = [
    # Models
    'Tag',
    'TaskItem',
    'TAG_CONTEXT',
    'TAG_PROJECT',
    # Main API
    'parse_line',
    'parse_document',
    'format_item',
    'format_document',
    'render_tag',
    # Priority
    'MAX_PRIORITY',
    'priority_from_letter',
    'priority_to_letter',
    # Errors
    'TodoTxtError',
    'InvalidPriority',
    'DocumentParseError',
]
