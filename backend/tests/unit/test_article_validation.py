"""Unit tests for the article form validator."""

import pytest

from blog.domain.validation import (
    MESSAGES,
    ValidationCode,
    check_article_fields,
    validate_article,
)

VALID_BODY = "This body is long enough."


@pytest.mark.parametrize("length", [3, 4, 20, 39, 40])
def test_title_within_bounds_is_accepted(length: int):
    assert validate_article("t" * length, VALID_BODY) == {}


@pytest.mark.parametrize("length", [1, 2, 41, 100])
def test_title_outside_bounds_is_rejected(length: int):
    errors = validate_article("t" * length, VALID_BODY)
    assert errors == {"title": MESSAGES[("title", ValidationCode.LENGTH)]}


def test_empty_title_and_short_body_report_both_fields():
    assert check_article_fields("", "short") == {
        "title": ValidationCode.EMPTY,
        "body": ValidationCode.LENGTH,
    }
    errors = validate_article("", "short")
    assert errors["title"] == "Title is required"
    assert errors["body"] == "Body must be at least 10 characters"


def test_empty_body_is_reported_as_empty_not_length():
    assert check_article_fields("Fine title", "") == {"body": ValidationCode.EMPTY}


def test_body_boundary():
    assert validate_article("Title", "x" * 10) == {}
    assert "body" in validate_article("Title", "x" * 9)


def test_multibyte_title_is_measured_in_characters():
    title = "博客文章" * 10  # 40 characters, 120 bytes in UTF-8
    assert len(title.encode("utf-8")) > 40
    assert validate_article(title, VALID_BODY) == {}


def test_multibyte_title_below_minimum_is_rejected():
    title = "博客"  # 6 bytes, 2 characters
    assert check_article_fields(title, VALID_BODY) == {"title": ValidationCode.LENGTH}


def test_multibyte_body_is_measured_in_characters():
    body = "内容" * 5
    assert validate_article("Title", body) == {}


def test_validation_is_deterministic():
    first = validate_article("ab", "tiny")
    second = validate_article("ab", "tiny")
    assert first == second
    assert set(first) == {"title", "body"}
