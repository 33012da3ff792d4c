from .line_parser import parse_document, parse_line, split_body_token

__all__ = [
    "parse_document",
    "parse_line",
    "split_body_token",
]
