import pytest

from markedit.yaml_header import YamlHeaderChecker

BODY = "first line.\nsecond line.\n"


def test_multiple_occurrence():
    header = "---\na: *b*\n---\n"
    body = "first line.\n" + header + "second line.\n" + header
    checker = YamlHeaderChecker(header + body)
    assert checker.has_header() is True
    assert checker.header == header
    assert checker.body == body
    assert checker.body_offset() == len(header)


def test_header_only_document():
    header = "---\na: *b*\n---\n"
    checker = YamlHeaderChecker(header)
    assert checker.has_header() is True
    assert checker.header == header
    assert checker.body == ""
    assert checker.body_offset() == len(header)


def test_empty_header():
    header = "---\n---\n"
    checker = YamlHeaderChecker(header + BODY)
    assert checker.has_header() is True
    assert checker.header == header
    assert checker.body == BODY
    assert checker.body_offset() == len(header)


@pytest.mark.parametrize(
    "header",
    [
        "---\na: *b*\n--\n",
        "---\na: *b*\nsome thing---\n",
        "---\na: *b*\n---abc\n",
    ],
    ids=["partial_header", "end_mark_not_at_line_begin", "marks_with_other_characters"],
)
def test_no_header_detected(header):
    doc = header + BODY
    checker = YamlHeaderChecker(doc)
    assert checker.has_header() is False
    assert checker.header == ""
    assert checker.body == doc
    assert checker.body_offset() == 0


def test_trailing_spaces():
    header = "---  \na: *b*\n---  \t\n"
    checker = YamlHeaderChecker(header + BODY)
    assert checker.has_header() is True
    assert checker.header == header
    assert checker.body == BODY


def test_dot_mark():
    header = "---\na: *b*\n...\n"
    checker = YamlHeaderChecker(header + BODY)
    assert checker.has_header() is True
    assert checker.header == header
    assert checker.body == BODY
    assert checker.body_offset() == len(header)


def test_header_not_at_document_start():
    doc = "intro\n---\na: 1\n---\n"
    checker = YamlHeaderChecker(doc)
    assert checker.has_header() is False
    assert checker.body == doc