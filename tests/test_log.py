from __future__ import annotations

import logging

from kova import ValidationConfig, number, stdlib_hook
from kova.log import SatisfiedEntry, ViolatedEntry


def test_stdlib_hook_forwards_every_check(caplog):
    """
    @brief
    The stdlib hook emits one record per constraint evaluation.
    """
    # --- Arrange ---
    config = ValidationConfig(logger=stdlib_hook(logging.getLogger("kova.test")))

    # --- Act ---
    with caplog.at_level(logging.DEBUG, logger="kova.test"):
        number().min(1).max(3).try_validate(5, config)

    # --- Assert ---
    messages = [r.getMessage() for r in caplog.records if r.name == "kova.test"]
    assert messages == [
        "kova.comparable.min satisfied root= path= input=5",
        "kova.comparable.max violated root= path= input=5",
    ]


def test_stdlib_hook_is_silent_below_level(caplog):
    # --- Arrange ---
    hook = stdlib_hook(logging.getLogger("kova.quiet"), level=logging.DEBUG)

    # --- Act ---
    with caplog.at_level(logging.WARNING, logger="kova.quiet"):
        hook(SatisfiedEntry("x", "", "", 1))

    # --- Assert ---
    assert [r for r in caplog.records if r.name == "kova.quiet"] == []


def test_violated_entry_carries_message_args(traced, recorder):
    # --- Act ---
    number().min(10).named("qty").try_validate(1, traced)

    # --- Assert ---
    assert recorder.entries == [ViolatedEntry("kova.comparable.min", "", "qty", 1, (10,))]
