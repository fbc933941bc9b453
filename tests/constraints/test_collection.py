from __future__ import annotations

from kova import Failure, Success, collection, number


def test_size_constraints_report_size_and_bound():
    # --- Act ---
    too_small = collection().min_size(3).try_validate([1])
    too_big = collection().max_size(1).try_validate([1, 2])
    exact = collection().size(2).try_validate([1])

    # --- Assert ---
    assert isinstance(too_small, Failure)
    assert too_small.messages[0].text == "Collection (size 1) must have at least 3 elements"
    assert isinstance(too_big, Failure)
    assert too_big.messages[0].text == "Collection (size 2) must have at most 1 elements"
    assert isinstance(exact, Failure)
    assert exact.messages[0].constraint_id == "kova.collection.length"


def test_membership_constraints():
    # --- Act ---
    missing = collection().contains("a").try_validate(["b"])
    present = collection().not_contains("a").try_validate(["a"])
    empty = collection().not_empty().try_validate([])

    # --- Assert ---
    assert isinstance(missing, Failure)
    assert missing.messages[0].text == "must contain a"
    assert isinstance(present, Failure)
    assert present.messages[0].text == "must not contain a"
    assert isinstance(empty, Failure)
    assert empty.messages[0].text == "must not be empty"


def test_on_each_reports_one_composite_message(traced, recorder):
    """
    @brief
    on_each fails with a single kova.collection.onEach message whose
    argument lists the element messages.
    """
    # --- Arrange ---
    validator = collection().on_each(number().positive())

    # --- Act ---
    result = validator.try_validate([1, -2, 3], traced)

    # --- Assert ---
    assert isinstance(result, Failure)
    assert len(result.messages) == 1
    message = result.messages[0]
    assert message.constraint_id == "kova.collection.onEach"
    assert message.text == "Some elements do not satisfy the constraint: [must be positive]"
    assert [d.path.full_name for d in message.descendants] == ["[1]<collection element>"]
    assert [e.constraint_id for e in recorder.entries] == [
        "kova.number.positive",
        "kova.number.positive",
        "kova.number.positive",
        "kova.collection.onEach",
    ]


def test_ensure_each_reports_element_messages_in_order():
    # --- Arrange ---
    validator = collection().ensure_each(number().positive()).named("scores")

    # --- Act ---
    result = validator.try_validate([-1, 2, -3])

    # --- Assert ---
    assert isinstance(result, Failure)
    assert [m.path.full_name for m in result.messages] == [
        "scores[0]<collection element>",
        "scores[2]<collection element>",
    ]
    assert [m.input for m in result.messages] == [-1, -3]


def test_each_stops_at_first_failing_element_in_fail_fast(fail_fast):
    # --- Act ---
    result = collection().ensure_each(number().positive()).try_validate([-1, -2], fail_fast)

    # --- Assert ---
    assert isinstance(result, Failure)
    assert len(result.messages) == 1


def test_all_elements_valid():
    # --- Act / Assert ---
    assert collection().on_each(number().positive()).try_validate((1, 2)) == Success((1, 2))
