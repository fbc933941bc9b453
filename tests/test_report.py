from __future__ import annotations

import json
from pathlib import Path

import pytest

from kova import KovaError, build_report, save_report, string


def test_build_report_for_failure():
    """
    @brief
    Failure results list every message with location and text.
    """
    # --- Arrange ---
    result = string().not_blank().named("title").try_validate("")

    # --- Act ---
    report = build_report(result)

    # --- Assert ---
    assert report["valid"] is False
    assert report["messages"] == [
        {
            "constraint_id": "kova.charSequence.notBlank",
            "root": "",
            "path": "title",
            "text": "must not be blank",
            "args": [],
        }
    ]
    assert report["timestamp"].endswith("+00:00")


def test_build_report_for_success():
    # --- Act ---
    report = build_report(string().try_validate("ok"))

    # --- Assert ---
    assert report["valid"] is True
    assert report["messages"] == []


def test_save_report_writes_json_and_overwrites(tmp_path: Path):
    # --- Arrange ---
    out_dir = tmp_path / "out"

    # --- Act ---
    p1 = save_report({"valid": True, "messages": []}, out_dir)
    p2 = save_report({"valid": False, "messages": ["x"]}, out_dir)

    # --- Assert ---
    assert p1 == p2 == out_dir / "validation_report.json"
    assert json.loads(p2.read_text(encoding="utf-8")) == {"valid": False, "messages": ["x"]}
    assert [p.name for p in out_dir.iterdir()] == ["validation_report.json"]


def test_save_report_wraps_os_errors(tmp_path: Path):
    # --- Arrange ---
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")

    # --- Act / Assert ---
    with pytest.raises(KovaError) as e:
        save_report({"valid": True}, blocker / "sub")

    assert "Failed to write validation report" in str(e.value)
