from kova.constraints.collection import CollectionValidator
from kova.constraints.comparable import ComparableValidator, NumberValidator
from kova.constraints.mapping import MappingValidator
from kova.constraints.strings import StringValidator

__all__ = [
    "CollectionValidator",
    "ComparableValidator",
    "NumberValidator",
    "MappingValidator",
    "StringValidator",
]
