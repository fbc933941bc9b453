# scripts/local_check.py
"""
@brief
Local quality gate: configuration, message bundles, formatting, lint, types, tests.

@details
Usage:
    python scripts/local_check.py            # full run, formatters rewrite files
    python scripts/local_check.py --check    # formatters only report
    python scripts/local_check.py --skip mypy --skip pytest

Every step runs even if an earlier one failed; the exit code is 1 when any
step failed.
"""

from __future__ import annotations

import argparse
import subprocess
import sys
import tomllib
from pathlib import Path

import yaml

ROOT = Path(__file__).resolve().parents[1]
BUNDLE_DIR = ROOT / "src" / "kova" / "messages" / "bundles"
BASE_BUNDLE = BUNDLE_DIR / "kova-default.yaml"


def check_pyproject() -> bool:
    try:
        with (ROOT / "pyproject.toml").open("rb") as f:
            tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"❌ pyproject.toml: {e}")
        return False
    print("✅ pyproject.toml parses")
    return True


def check_bundles() -> bool:
    """Every bundle is a flat YAML mapping and only overrides keys of the base bundle."""
    ok = True
    base_keys: set[str] = set()
    for path in sorted(BUNDLE_DIR.glob("*.yaml")):
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            print(f"❌ {path.name}: {e}")
            ok = False
            continue
        if not isinstance(data, dict):
            print(f"❌ {path.name}: root is not a mapping")
            ok = False
            continue
        if path == BASE_BUNDLE:
            base_keys = set(data)
        else:
            unknown = sorted(set(data) - base_keys) if base_keys else []
            for key in unknown:
                print(f"❌ {path.name}: '{key}' has no entry in {BASE_BUNDLE.name}")
                ok = False
    if ok:
        print("✅ message bundles OK")
    return ok


def run(cmd: list[str], desc: str) -> bool:
    print(f"\n🧪 {desc} ...")
    completed = subprocess.run(cmd, cwd=ROOT)
    if completed.returncode != 0:
        print(f"⚠️  {desc} failed ({completed.returncode})")
        return False
    return True


def tool_steps(check_only: bool) -> dict[str, tuple[list[str], str]]:
    py = sys.executable
    if check_only:
        toml_sort = ["toml-sort", "pyproject.toml", "--check", "--all"]
        black = [py, "-m", "black", "--check", "src", "tests", "scripts"]
    else:
        toml_sort = ["toml-sort", "pyproject.toml", "--in-place", "--all"]
        black = [py, "-m", "black", "src", "tests", "scripts"]
    return {
        "toml-sort": (toml_sort, "Sorting TOML"),
        "black": (black, "Black formatting"),
        "ruff": (["ruff", "check", "src", "tests", "scripts"], "Ruff lint"),
        "mypy": (["mypy", "src/kova"], "Mypy type check"),
        "pytest": ([py, "-m", "pytest"], "Pytest"),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run local checks for kova.")
    parser.add_argument("--check", action="store_true", help="Do not rewrite files.")
    parser.add_argument(
        "--skip", action="append", default=[], help="Tool step to skip (repeatable)."
    )
    args = parser.parse_args(argv)

    results = [check_pyproject(), check_bundles()]
    for name, (cmd, desc) in tool_steps(args.check).items():
        if name in args.skip:
            print(f"\n⏭️  {desc} skipped")
            continue
        results.append(run(cmd, desc))

    failed = results.count(False)
    print(f"\n🏁 Local check completed: {failed} step(s) failed.")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
