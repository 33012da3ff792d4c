from .task import Tag, TaskItem, TAG_CONTEXT, TAG_PROJECT
from .priority import MAX_PRIORITY, priority_from_letter, priority_to_letter

__all__ = [
    "Tag",
    "TaskItem",
    "TAG_CONTEXT",
    "TAG_PROJECT",
    "MAX_PRIORITY",
    "priority_from_letter",
    "priority_to_letter",
]
