import enum
from typing import Any


class Variant(enum.Enum):
    STRING = "StringType"
    NUMBER = "NumberType"
    BOOLEAN = "BooleanType"
    NULL = "NullType"
    ARRAY = "ArrayType"
    READONLY_ARRAY = "ReadonlyArrayType"
    TUPLE = "TupleType"
    KEYOF = "KeyofType"
    INTERFACE = "InterfaceType"
    PARTIAL = "PartialType"
    EXACT = "ExactType"
    READONLY = "ReadonlyType"
    REFINEMENT = "RefinementType"
    UNION = "UnionType"
    INTERSECTION = "IntersectionType"
    UNDEFINED = "UndefinedType"
    FUNCTION = "FunctionType"
    VOID = "VoidType"
    UNKNOWN = "Unknown"


_BY_TAG = {v.value: v for v in Variant if v is not Variant.UNKNOWN}

_NOT_CONVERTIBLE = frozenset({Variant.UNDEFINED, Variant.FUNCTION, Variant.VOID})

OBJECT_VARIANTS = frozenset({Variant.INTERFACE, Variant.PARTIAL})


def classify(node: Any) -> Variant:
    """Return the grammar variant of `node` from its `tag` discriminant."""
    tag = getattr(node, "tag", None)
    if not isinstance(tag, str):
        return Variant.UNKNOWN
    return _BY_TAG.get(tag, Variant.UNKNOWN)


def is_convertible(node: Any) -> bool:
    """Check if a codec takes part in schema output at all."""
    return classify(node) not in _NOT_CONVERTIBLE
