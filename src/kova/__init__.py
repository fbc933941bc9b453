"""
@brief
Kova: composable validators with accumulated, path-annotated, localized
violation messages.

@details
Typical use:
    validator = string().not_blank().max_length(10)
    result = validator.try_validate("", ValidationConfig(locale="ja"))
"""

from kova.builders import collection, comparable, generic, mapping, nullable, number, string
from kova.config import ConfigLoader, ValidationConfig
from kova.core.context import Constraint, ConstraintContext, ValidationContext
from kova.core.path import Path
from kova.core.results import (
    ConstraintResult,
    Failure,
    Satisfied,
    Success,
    ValidationResult,
    Violated,
)
from kova.core.schema import ObjectSchema, SchemaScope
from kova.core.validator import MISSING, Validator
from kova.errors import (
    ConfigError,
    KovaError,
    MessageException,
    MissingResourceError,
    SchemaError,
    ValidationException,
)
from kova.factory import BoundFactory, ObjectFactory
from kova.log import LogEntry, LogRecorder, SatisfiedEntry, ViolatedEntry, stdlib_hook
from kova.messages import Message, MessageResolver, ResourceMessage, TextMessage
from kova.report import build_report, save_report

__version__ = "0.1.0"

__all__ = [
    "generic",
    "comparable",
    "number",
    "string",
    "collection",
    "mapping",
    "nullable",
    "ConfigLoader",
    "ValidationConfig",
    "Constraint",
    "ConstraintContext",
    "ValidationContext",
    "Path",
    "ConstraintResult",
    "Satisfied",
    "Violated",
    "ValidationResult",
    "Success",
    "Failure",
    "ObjectSchema",
    "SchemaScope",
    "ObjectFactory",
    "BoundFactory",
    "MISSING",
    "Validator",
    "KovaError",
    "ConfigError",
    "SchemaError",
    "MissingResourceError",
    "ValidationException",
    "MessageException",
    "LogEntry",
    "SatisfiedEntry",
    "ViolatedEntry",
    "LogRecorder",
    "stdlib_hook",
    "Message",
    "TextMessage",
    "ResourceMessage",
    "MessageResolver",
    "build_report",
    "save_report",
]
