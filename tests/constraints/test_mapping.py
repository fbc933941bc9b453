from __future__ import annotations

from kova import Failure, Success, mapping, number, string


def test_size_and_key_constraints():
    # --- Act ---
    small = mapping().min_size(2).try_validate({"a": 1})
    big = mapping().max_size(0).try_validate({"a": 1})
    missing = mapping().contains_key("b").try_validate({"a": 1})
    empty = mapping().not_empty().try_validate({})

    # --- Assert ---
    assert isinstance(small, Failure)
    assert small.messages[0].text == "Map (size 1) must have at least 2 entries"
    assert isinstance(big, Failure)
    assert big.messages[0].text == "Map (size 1) must have at most 0 entries"
    assert isinstance(missing, Failure)
    assert missing.messages[0].text == "must contain key b"
    assert isinstance(empty, Failure)
    assert empty.messages[0].constraint_id == "kova.map.notEmpty"


def test_on_each_key_and_value_composites():
    # --- Arrange ---
    validator = (
        mapping().on_each_key(string().min_length(2)).on_each_value(number().positive())
    )

    # --- Act ---
    result = validator.try_validate({"a": 1, "bb": -1})

    # --- Assert ---
    assert isinstance(result, Failure)
    assert [m.constraint_id for m in result.messages] == [
        "kova.map.onEachKey",
        "kova.map.onEachValue",
    ]
    assert result.messages[0].text == (
        "Some keys do not satisfy the constraint: [must be at least 2 characters]"
    )
    assert result.messages[1].text == (
        "Some values do not satisfy the constraint: [must be positive]"
    )
    assert result.messages[0].descendants[0].path.full_name == "<map key>"
    assert result.messages[1].descendants[0].path.full_name == "[bb]<map value>"


def test_ensure_each_value_paths():
    # --- Arrange ---
    validator = mapping().ensure_each_value(number().positive()).named("stock")

    # --- Act ---
    result = validator.try_validate({"apple": -1, "pear": 2})

    # --- Assert ---
    assert isinstance(result, Failure)
    assert [m.path.full_name for m in result.messages] == ["stock[apple]<map value>"]


def test_entry_validator_receives_key_value_pairs():
    # --- Arrange ---
    entry = number().constrain(
        "entry.match", lambda c: c.satisfies(c.input[0] == c.input[1], "key must equal value")
    )
    validator = mapping().ensure_each(entry)

    # --- Act ---
    result = validator.try_validate({1: 1, 2: 3})

    # --- Assert ---
    assert isinstance(result, Failure)
    assert result.messages[0].path.full_name == "<map entry>"
    assert result.messages[0].input == (2, 3)


def test_ensure_each_key():
    # --- Act ---
    ok = mapping().ensure_each_key(string().not_blank()).try_validate({"a": 1})
    ng = mapping().ensure_each_key(string().not_blank()).try_validate({" ": 1})

    # --- Assert ---
    assert ok == Success({"a": 1})
    assert isinstance(ng, Failure)
    assert ng.messages[0].constraint_id == "kova.charSequence.notBlank"
