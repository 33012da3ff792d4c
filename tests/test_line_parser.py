"""
Tests for parsers/line_parser.py.

Covers:
- parse_line: completion marker, priority, dates, description, tags
- Prefix ordering edge cases (x / priority / date positions)
- parse_document: per-line items, fail-fast errors with line index
"""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import dataclasses

import pytest

from todotxt.errors import DocumentParseError, InvalidPriority
from todotxt.models.task import TAG_CONTEXT, TAG_PROJECT, Tag, TaskItem
from todotxt.parsers.line_parser import parse_document, parse_line, split_body_token


# ---------------------------------------------------------------------------
# Example lines
# ---------------------------------------------------------------------------

class TestExampleLines:
    def test_simple(self):
        assert parse_line("simple") == TaskItem(description="simple")

    def test_complete(self):
        item = parse_line("x complete")
        assert item.complete is True
        assert item.description == "complete"

    def test_priority_with_tags(self):
        item = parse_line("(A) Call Mom @Phone +Family")
        assert item.priority == 0
        assert item.description == "Call Mom"
        assert item.tags == (Tag(TAG_CONTEXT, "Phone"), Tag(TAG_PROJECT, "Family"))

    def test_two_dates(self):
        item = parse_line("2019-05-27 2019-04-27 Pick up milk @GroceryStore")
        assert item.creation_date == date(2019, 4, 27)
        assert item.completion_date == date(2019, 5, 27)
        assert item.description == "Pick up milk"
        assert item.tags == (Tag(TAG_CONTEXT, "GroceryStore"),)

    def test_complete_with_custom_tag(self):
        item = parse_line("x Download Todo.txt mobile app @Phone custom:tag")
        assert item.complete is True
        assert item.description == "Download Todo.txt mobile app"
        assert item.tags == (Tag(TAG_CONTEXT, "Phone"), Tag("custom", "tag"))

    def test_full_prefix(self):
        item = parse_line("x (C) 2020-01-02 2019-12-30 Ship it +release")
        assert item.complete is True
        assert item.priority == 2
        assert item.completion_date == date(2020, 1, 2)
        assert item.creation_date == date(2019, 12, 30)
        assert item.description == "Ship it"
        assert item.projects == ("release",)


# ---------------------------------------------------------------------------
# Prefix edge cases
# ---------------------------------------------------------------------------

class TestCompletionMarker:
    def test_only_first_token(self):
        item = parse_line("buy x ray")
        assert item.complete is False
        assert item.description == "buy x ray"

    def test_second_x_is_description(self):
        item = parse_line("x x")
        assert item.complete is True
        assert item.description == "x"

    def test_uppercase_is_not_marker(self):
        item = parse_line("X marks the spot")
        assert item.complete is False
        assert item.description == "X marks the spot"


class TestPriority:
    def test_after_completion_marker(self):
        item = parse_line("x (B) task")
        assert item.complete is True
        assert item.priority == 1

    def test_after_date_is_description(self):
        item = parse_line("2019-04-27 (B) task")
        assert item.priority is None
        assert item.creation_date == date(2019, 4, 27)
        assert item.description == "(B) task"

    def test_second_priority_is_description(self):
        item = parse_line("(A) (B) task")
        assert item.priority == 0
        assert item.description == "(B) task"

    def test_in_body_is_description(self):
        item = parse_line("task (1)")
        assert item.priority is None
        assert item.description == "task (1)"

    @pytest.mark.parametrize("line", ["(1) task", "(a) task", "x (!) task"])
    def test_invalid_priority_fails_line(self, line):
        with pytest.raises(InvalidPriority):
            parse_line(line)

    @pytest.mark.parametrize("line,description", [
        ("(é) tâche", "(é) tâche"),
        ("x (中) 任务", "(中) 任务"),
    ])
    def test_non_ascii_priority_shape_is_description(self, line, description):
        item = parse_line(line)
        assert item.priority is None
        assert item.description == description

    def test_non_ascii_priority_shape_does_not_fail_document(self):
        items = parse_document("(中) 任务\nok")
        assert [i.description for i in items] == ["(中) 任务", "ok"]

    def test_no_priority_is_none(self):
        assert parse_line("task").priority is None


class TestDates:
    def test_single_date_is_creation_date(self):
        item = parse_line("2019-04-27 Plan backyard herb garden @Home")
        assert item.creation_date == date(2019, 4, 27)
        assert item.completion_date is None

    def test_completed_with_single_date(self):
        item = parse_line("x 2019-04-27 complete")
        assert item.complete is True
        assert item.creation_date == date(2019, 4, 27)
        assert item.completion_date is None

    def test_swap_ignores_chronology(self):
        item = parse_line("2019-01-01 2019-06-01 task")
        assert item.completion_date == date(2019, 1, 1)
        assert item.creation_date == date(2019, 6, 1)

    def test_third_date_is_description(self):
        item = parse_line("2019-01-01 2019-01-02 2019-01-03 task")
        assert item.completion_date == date(2019, 1, 1)
        assert item.creation_date == date(2019, 1, 2)
        assert item.description == "2019-01-03 task"

    @pytest.mark.parametrize("token", ["2019-02-30", "2019-4-27", "19-04-27", "2019/04/27"])
    def test_invalid_date_is_description(self, token):
        item = parse_line(f"{token} task")
        assert item.creation_date is None
        assert item.description == f"{token} task"

    def test_year_zero_is_description(self):
        # datetime.date has no year 0
        item = parse_line("0000-01-01 task")
        assert item.creation_date is None
        assert item.description == "0000-01-01 task"

    def test_date_after_description_is_description(self):
        item = parse_line("task 2019-04-27")
        assert item.creation_date is None
        assert item.description == "task 2019-04-27"


# ---------------------------------------------------------------------------
# Body tokens
# ---------------------------------------------------------------------------

class TestBodyTokens:
    def test_split_body_token(self):
        assert split_body_token("+proj") == Tag(TAG_PROJECT, "proj")
        assert split_body_token("@ctx") == Tag(TAG_CONTEXT, "ctx")
        assert split_body_token("due:2020-01-01") == Tag("due", "2020-01-01")
        assert split_body_token("word") is None

    def test_more_than_one_colon_is_description(self):
        item = parse_line("time 10:30:00")
        assert item.tags == ()
        assert item.description == "time 10:30:00"

    def test_url_splits_on_single_colon(self):
        item = parse_line("read http//example.com https://example.com")
        assert item.tags == (Tag("https", "//example.com"),)

    def test_bare_markers_are_empty_tags(self):
        item = parse_line("task + @")
        assert item.tags == (Tag(TAG_PROJECT, ""), Tag(TAG_CONTEXT, ""))

    def test_tags_keep_line_order(self):
        item = parse_line("a +p1 b @c1 k:v c +p2")
        assert item.description == "a b c"
        assert [t.key for t in item.tags] == [TAG_PROJECT, TAG_CONTEXT, "k", TAG_PROJECT]
        assert item.projects == ("p1", "p2")
        assert item.contexts == ("c1",)
        assert item.custom_tags == (Tag("k", "v"),)

    def test_consecutive_spaces_kept_in_description(self):
        assert parse_line("a  b").description == "a  b"

    def test_leading_spaces_dropped(self):
        item = parse_line("  (A) task")
        assert item.priority is None
        assert item.description == "(A) task"

    def test_empty_line(self):
        assert parse_line("") == TaskItem()


class TestTaskItem:
    def test_is_frozen(self):
        item = parse_line("task")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.description = "other"

    def test_priority_letter(self):
        assert parse_line("(C) task").priority_letter == "C"
        assert parse_line("task").priority_letter is None

    def test_str_is_canonical_text(self):
        assert str(parse_line("(A) Call Mom @Phone +Family")) == "(A) Call Mom @Phone +Family"


# ---------------------------------------------------------------------------
# parse_document
# ---------------------------------------------------------------------------

DOCUMENT = """(A) Call Mom @Phone +Family
(A) Schedule annual checkup +Health
(B) Outline chapter 5 +Novel @Computer
(C) Add cover sheets @Office +TPSReports
2019-04-27 Plan backyard herb garden @Home
2019-05-27 2019-04-27 Pick up milk @GroceryStore
Research self-publishing services +Novel @Computer
x Download Todo.txt mobile app @Phone custom:tag"""


class TestParseDocument:
    def test_one_item_per_line(self):
        items = parse_document(DOCUMENT)
        assert len(items) == 8
        assert items[0].priority == 0
        assert items[4].creation_date == date(2019, 4, 27)
        assert items[7].complete is True

    def test_empty_lines_are_empty_items(self):
        items = parse_document("a\n\nb")
        assert items == [TaskItem(description="a"), TaskItem(), TaskItem(description="b")]

    def test_trailing_newline_yields_empty_item(self):
        assert parse_document("a\n")[-1] == TaskItem()

    def test_fails_fast_with_line_index(self):
        with pytest.raises(DocumentParseError) as exc_info:
            parse_document("ok\n(1) bad\n(2) also bad")
        err = exc_info.value
        assert err.line_index == 1
        assert isinstance(err.error, InvalidPriority)
        assert err.__cause__ is err.error
        assert str(err) == "error at line 1: priority must be between A and Z"
