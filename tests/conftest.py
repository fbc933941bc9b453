import sys
from pathlib import Path

import pytest

# (1) Add repository root and src/ to sys.path to enable absolute imports
#     without an editable install. The root directory contains scripts/ and src/.
ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from kova.config.models import ValidationConfig  # noqa: E402
from kova.log import LogRecorder  # noqa: E402


@pytest.fixture()
def recorder() -> LogRecorder:
    """Fresh logging hook collecting entries in order."""
    return LogRecorder()


@pytest.fixture()
def traced(recorder: LogRecorder) -> ValidationConfig:
    """Accumulate-mode English config wired to `recorder`."""
    return ValidationConfig(logger=recorder)


@pytest.fixture()
def fail_fast() -> ValidationConfig:
    return ValidationConfig(fail_fast=True)
