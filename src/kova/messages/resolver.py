# src/kova/messages/resolver.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from kova.errors import ConfigError, MissingResourceError
from kova.messages.formatting import NumberSymbols, format_template

logger = logging.getLogger(__name__)

BUILTIN_BUNDLE_DIR = Path(__file__).resolve().parent / "bundles"

USER_BUNDLE_NAME = "kova"
DEFAULT_BUNDLE_NAME = "kova-default"

GROUP_SEPARATOR_KEY = "kova.format.groupSeparator"
DECIMAL_SEPARATOR_KEY = "kova.format.decimalSeparator"


def normalize_locale(locale: str) -> str:
    """
    @brief
    Normalize a locale tag to the `language[_COUNTRY]` form used in bundle names.

    @details
    Accepts both "fr-FR" and "fr_FR"; language is lower-cased and the country
    part upper-cased. An empty tag maps to the root locale ("").
    """
    parts = [p for p in locale.replace("-", "_").split("_") if p]
    if not parts:
        return ""
    language = parts[0].lower()
    if len(parts) == 1:
        return language
    return "_".join([language, parts[1].upper(), *parts[2:]])


def _locale_suffixes(locale: str) -> list[str]:
    # "fr_FR" -> ["_fr_FR", "_fr"], "fr" -> ["_fr"], "" -> []
    tag = normalize_locale(locale)
    if not tag:
        return []
    parts = tag.split("_")
    return ["_" + "_".join(parts[:n]) for n in range(len(parts), 0, -1)]


def _load_bundle(path: Path) -> Mapping[str, str]:
    """
    @brief
    Read one YAML message bundle into a flat key/template mapping.

    @details
    A missing file is an empty bundle and is looked up again on the next
    call, so bundles created later are picked up. Existing files are cached
    per absolute path and modification time; an edited bundle is re-read.
    Unreadable or malformed files raise `ConfigError`.
    """
    if not path.is_file():
        return {}
    return _read_bundle(path.resolve(), path.stat().st_mtime_ns)


@lru_cache(maxsize=256)
def _read_bundle(path: Path, mtime_ns: int) -> Mapping[str, str]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            message=f"Message bundle parsing failed: {e}",
            source=str(path),
            suggested_action="Fix YAML syntax of the bundle file.",
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Unable to read message bundle: {e}",
            source=str(path),
            suggested_action="Check file permissions and path accessibility.",
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(
            message="Message bundle root must be a mapping (key: template pairs).",
            source=str(path),
            suggested_action="Use flat `kova.category.rule: template` entries.",
        )

    logger.debug("Loaded message bundle %s (%d keys)", path, len(data))
    return {str(k): str(v) for k, v in data.items()}


def clear_bundle_cache() -> None:
    _read_bundle.cache_clear()


class MessageResolver:
    """
    @brief
    Resolve constraint identifiers to localized, formatted message text.

    @details
    Bundles are consulted in this order, and the first one holding the key wins:
        (1) user bundle for the exact locale      kova_fr_FR.yaml
        (2) user bundle for the language          kova_fr.yaml
        (3) default bundle for the exact locale   kova-default_fr_FR.yaml
        (4) default bundle for the language       kova-default_fr.yaml
        (5) user base bundle                      kova.yaml
        (6) default base bundle                   kova-default.yaml
    User bundles override defaults key by key. A key found nowhere raises
    `MissingResourceError`. The resolver holds no per-call state, so one
    instance may be shared across threads.

    @params
        user_dirs : Iterable[Path]
            Directories searched for user override bundles, in priority order.
        default_dirs : Iterable[Path]
            Directories holding the built-in `kova-default*.yaml` bundles.
    """

    def __init__(
        self,
        user_dirs: Iterable[Path] = (),
        default_dirs: Iterable[Path] = (BUILTIN_BUNDLE_DIR,),
    ):
        self.user_dirs = tuple(Path(d) for d in user_dirs)
        self.default_dirs = tuple(Path(d) for d in default_dirs)

    def candidates(self, locale: str) -> list[Path]:
        """Bundle files in lookup order for `locale`."""
        suffixes = _locale_suffixes(locale)
        user = [d / f"{USER_BUNDLE_NAME}{s}.yaml" for s in suffixes for d in self.user_dirs]
        default = [
            d / f"{DEFAULT_BUNDLE_NAME}{s}.yaml" for s in suffixes for d in self.default_dirs
        ]
        user_base = [d / f"{USER_BUNDLE_NAME}.yaml" for d in self.user_dirs]
        default_base = [d / f"{DEFAULT_BUNDLE_NAME}.yaml" for d in self.default_dirs]
        return [*user, *default, *user_base, *default_base]

    def template(self, key: str, locale: str) -> str:
        """
        @brief
        Return the raw template for `key` following the fallback chain.

        @raises
            MissingResourceError
                Raised if no bundle at any level contains the key.
        """
        for path in self.candidates(locale):
            bundle = _load_bundle(path)
            if key in bundle:
                return bundle[key]
        raise MissingResourceError(key, locale, source="MessageResolver.template")

    def symbols(self, locale: str) -> NumberSymbols:
        return NumberSymbols(
            group=self.template(GROUP_SEPARATOR_KEY, locale),
            decimal=self.template(DECIMAL_SEPARATOR_KEY, locale),
        )

    def resolve(self, key: str, locale: str, args: Sequence[Any] = ()) -> str:
        """
        @brief
        Render the message for `key` under `locale` with positional `args`.

        @details
        Pure with respect to its inputs: the same key, locale and arguments
        always give the same text.
        """
        return format_template(self.template(key, locale), args, self.symbols(locale))

    def __repr__(self) -> str:
        return f"MessageResolver(user_dirs={list(self.user_dirs)})"


_DEFAULT_RESOLVER = MessageResolver()


def default_resolver() -> MessageResolver:
    """Shared resolver over the built-in bundles only."""
    return _DEFAULT_RESOLVER


__all__ = [
    "MessageResolver",
    "default_resolver",
    "normalize_locale",
    "clear_bundle_cache",
    "BUILTIN_BUNDLE_DIR",
]
