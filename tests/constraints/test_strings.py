from __future__ import annotations

import pytest

from kova import Failure, Success, string


@pytest.mark.parametrize(
    ("validator", "value", "constraint_id", "text"),
    [
        (string().min_length(3), "ab", "kova.charSequence.min", "must be at least 3 characters"),
        (string().max_length(3), "abcd", "kova.charSequence.max", "must be at most 3 characters"),
        (string().length(3), "ab", "kova.charSequence.length", "must be exactly 3 characters"),
        (string().not_blank(), "  ", "kova.charSequence.notBlank", "must not be blank"),
        (string().blank(), "x", "kova.charSequence.blank", "must be blank"),
        (string().not_empty(), "", "kova.charSequence.notEmpty", "must not be empty"),
        (string().empty(), "x", "kova.charSequence.empty", "must be empty"),
        (string().starts_with("ab"), "x", "kova.charSequence.startsWith", 'must start with "ab"'),
        (string().ends_with("yz"), "x", "kova.charSequence.endsWith", 'must end with "yz"'),
        (string().contains("mid"), "x", "kova.charSequence.contains", 'must contain "mid"'),
        (string().matches(r"\d+"), "12a", "kova.charSequence.matches", r"must match pattern: \d+"),
    ],
)
def test_violation_id_and_text(validator, value, constraint_id, text):
    # --- Act ---
    result = validator.try_validate(value)

    # --- Assert ---
    assert isinstance(result, Failure)
    assert result.messages[0].constraint_id == constraint_id
    assert result.messages[0].text == text


def test_chained_constraints_accumulate():
    """
    @brief
    A chained string validator reports every violated rule.
    """
    # --- Arrange ---
    validator = string().not_blank().min_length(3).starts_with("a")

    # --- Act ---
    result = validator.try_validate(" ")

    # --- Assert ---
    assert isinstance(result, Failure)
    assert [m.constraint_id for m in result.messages] == [
        "kova.charSequence.notBlank",
        "kova.charSequence.min",
        "kova.charSequence.startsWith",
    ]


def test_matches_requires_full_match():
    # --- Arrange ---
    validator = string().matches(r"[a-z]+")

    # --- Act / Assert ---
    assert validator.try_validate("abc") == Success("abc")
    assert isinstance(validator.try_validate("abc1"), Failure)


def test_to_int_converts_after_chain():
    # --- Arrange ---
    validator = string().not_blank().to_int()

    # --- Act / Assert ---
    assert validator.try_validate(" 12 ") == Success(12)
    assert isinstance(validator.try_validate("1.5"), Failure)
