from __future__ import annotations

import os
from pathlib import Path

import pytest

from kova import Failure, MissingResourceError, ValidationConfig, number, string
from kova.errors import ConfigError
from kova.messages.resolver import MessageResolver, normalize_locale


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def default_dir(tmp_path: Path) -> Path:
    """Stand-in for the built-in bundles: English base plus a French bundle."""
    d = tmp_path / "defaults"
    d.mkdir()
    _write(
        d / "kova-default.yaml",
        "kova.format.groupSeparator: ','\n"
        "kova.format.decimalSeparator: '.'\n"
        "x.key: 'english {0}'\n"
        "y.key: 'english only'\n",
    )
    _write(
        d / "kova-default_fr.yaml",
        "kova.format.groupSeparator: ' '\n"
        "kova.format.decimalSeparator: ','\n"
        "x.key: 'français {0}'\n",
    )
    return d


def test_country_locale_falls_back_to_language_default(default_dir: Path):
    """
    @brief
    fr_FR with no user bundles and no fr_FR default uses the fr default,
    not the base bundle.
    """
    # --- Arrange ---
    resolver = MessageResolver(user_dirs=(), default_dirs=(default_dir,))

    # --- Act ---
    text = resolver.resolve("x.key", "fr_FR", [1])

    # --- Assert ---
    assert text == "français 1"


def test_missing_language_key_falls_back_to_base(default_dir: Path):
    # --- Arrange ---
    resolver = MessageResolver(default_dirs=(default_dir,))

    # --- Act / Assert ---
    assert resolver.resolve("y.key", "fr_FR") == "english only"


def test_user_bundle_overrides_key_by_key(default_dir: Path, tmp_path: Path):
    """
    @brief
    A user bundle replaces only the keys it defines.
    """
    # --- Arrange ---
    user = tmp_path / "user"
    user.mkdir()
    _write(user / "kova_fr_FR.yaml", "x.key: 'utilisateur {0}'\n")
    resolver = MessageResolver(user_dirs=(user,), default_dirs=(default_dir,))

    # --- Act / Assert ---
    assert resolver.resolve("x.key", "fr_FR", ["a"]) == "utilisateur a"
    assert resolver.resolve("x.key", "fr", ["a"]) == "français a"
    assert resolver.resolve("y.key", "fr_FR") == "english only"


def test_missing_key_raises(default_dir: Path):
    # --- Arrange ---
    resolver = MessageResolver(default_dirs=(default_dir,))

    # --- Act / Assert ---
    with pytest.raises(MissingResourceError) as e:
        resolver.resolve("no.such.key", "ja")

    assert e.value.key == "no.such.key"
    assert e.value.locale == "ja"


def test_resolution_is_deterministic_and_locale_formatted(default_dir: Path):
    # --- Arrange ---
    resolver = MessageResolver(default_dirs=(default_dir,))

    # --- Act ---
    first = resolver.resolve("x.key", "fr", [1234.5])
    second = resolver.resolve("x.key", "fr", [1234.5])
    english = resolver.resolve("x.key", "en", [1234.5])

    # --- Assert ---
    assert first == second == "français 1 234,5"
    assert english == "english 1,234.5"


def test_malformed_bundle_raises_config_error(tmp_path: Path):
    # --- Arrange ---
    _write(tmp_path / "kova-default.yaml", "- just\n- a list\n")
    resolver = MessageResolver(default_dirs=(tmp_path,))

    # --- Act / Assert ---
    with pytest.raises(ConfigError):
        resolver.resolve("x.key", "en")


def test_user_override_through_config(tmp_path: Path):
    """
    @brief
    Overrides from message_dirs apply to built-in constraints; other keys
    keep the English defaults.
    """
    # --- Arrange ---
    _write(
        tmp_path / "kova_fr.yaml",
        "kova.charSequence.notBlank: 'Ce champ est requis'\n"
        "kova.number.positive: 'Veuillez entrer un nombre positif'\n",
    )
    config = ValidationConfig(locale="fr", message_dirs=[tmp_path])

    # --- Act ---
    blank = string().not_blank().try_validate(" ", config)
    positive = number().positive().try_validate(-1, config)
    negative = number().negative().try_validate(1, config)
    minimum = number().min(10).try_validate(1, config)

    # --- Assert ---
    assert isinstance(blank, Failure) and isinstance(positive, Failure)
    assert isinstance(negative, Failure) and isinstance(minimum, Failure)
    assert blank.messages[0].text == "Ce champ est requis"
    assert positive.messages[0].text == "Veuillez entrer un nombre positif"
    assert negative.messages[0].text == "must be negative"
    assert minimum.messages[0].text == "must be greater than or equal to 10"


def test_builtin_japanese_bundle():
    # --- Arrange ---
    config = ValidationConfig(locale="ja")

    # --- Act ---
    blank = string().not_blank().try_validate("", config)
    positive = number().positive().try_validate(0, config)

    # --- Assert ---
    assert isinstance(blank, Failure) and isinstance(positive, Failure)
    assert blank.messages[0].text == "空白であってはいけません"
    assert positive.messages[0].text == "正の数である必要があります"


@pytest.mark.parametrize(
    ("tag", "expected"),
    [("fr-FR", "fr_FR"), ("EN", "en"), ("ja_jp", "ja_JP"), ("", "")],
)
def test_normalize_locale(tag: str, expected: str):
    assert normalize_locale(tag) == expected


def test_bundle_created_after_first_lookup_is_used(default_dir: Path, tmp_path: Path):
    # --- Arrange ---
    user = tmp_path / "late"
    user.mkdir()
    resolver = MessageResolver(user_dirs=(user,), default_dirs=(default_dir,))
    before = resolver.resolve("y.key", "en")

    # --- Act ---
    _write(user / "kova.yaml", "y.key: 'user text'\n")
    after = resolver.resolve("y.key", "en")

    # --- Assert ---
    assert before == "english only"
    assert after == "user text"


def test_edited_bundle_is_reread(default_dir: Path, tmp_path: Path):
    # --- Arrange ---
    user = tmp_path / "edited"
    user.mkdir()
    bundle = _write(user / "kova.yaml", "y.key: 'first'\n")
    resolver = MessageResolver(user_dirs=(user,), default_dirs=(default_dir,))
    first = resolver.resolve("y.key", "en")

    # --- Act: rewrite and move the modification time forward ---
    _write(bundle, "y.key: 'second'\n")
    mtime = bundle.stat().st_mtime_ns + 1_000_000_000
    os.utime(bundle, ns=(mtime, mtime))
    second = resolver.resolve("y.key", "en")

    # --- Assert ---
    assert first == "first"
    assert second == "second"
