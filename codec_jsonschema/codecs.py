from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _frozen(mapping: Mapping | None = None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Codec:
    """An immutable type descriptor node.

    `tag` is the discriminant the converter dispatches on; `name` is only
    used for display and error messages.
    """

    tag: str
    name: str
    codec: "Codec | None" = None
    codecs: tuple["Codec", ...] = ()
    props: Mapping[str, "Codec"] = field(default_factory=_frozen, hash=False)
    keys: tuple[str, ...] = ()
    json_schema: Mapping[str, Any] = field(default_factory=_frozen, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", _frozen(self.props))
        object.__setattr__(self, "json_schema", _frozen(self.json_schema))
        object.__setattr__(self, "codecs", tuple(self.codecs))
        object.__setattr__(self, "keys", tuple(self.keys))

    def __repr__(self) -> str:
        return f"<{self.tag} {self.name}>"


string = Codec("StringType", "string")
number = Codec("NumberType", "number")
boolean = Codec("BooleanType", "boolean")
null = Codec("NullType", "null")
undefined = Codec("UndefinedType", "undefined")
void = Codec("VoidType", "void")
function = Codec("FunctionType", "Function")
unknown = Codec("UnknownType", "unknown")


def _props_name(props: Mapping[str, Codec]) -> str:
    if not props:
        return "{}"
    return "{ " + ", ".join(f"{k}: {v.name}" for k, v in props.items()) + " }"


def refinement(
    codec: Codec, name: str | None = None, json_schema: Mapping | None = None
) -> Codec:
    """Narrow `codec` by a predicate known only by `name`."""
    return Codec(
        "RefinementType",
        name or f"({codec.name} | <predicate>)",
        codec=codec,
        json_schema=json_schema,
    )


def brand(codec: Codec, name: str) -> Codec:
    return refinement(codec, name)


Int = refinement(number, "Int")


def array(codec: Codec, name: str | None = None) -> Codec:
    return Codec("ArrayType", name or f"Array<{codec.name}>", codec=codec)


def readonly_array(codec: Codec, name: str | None = None) -> Codec:
    return Codec(
        "ReadonlyArrayType", name or f"ReadonlyArray<{codec.name}>", codec=codec
    )


def tuple_(codecs: Iterable[Codec], name: str | None = None) -> Codec:
    codecs = tuple(codecs)
    return Codec(
        "TupleType",
        name or "[" + ", ".join(c.name for c in codecs) + "]",
        codecs=codecs,
    )


def keyof(keys: Iterable[str], name: str | None = None) -> Codec:
    """Enumeration of string keys; a mapping contributes its keys in order."""
    keys = tuple(keys)
    return Codec(
        "KeyofType", name or " | ".join(f'"{k}"' for k in keys), keys=keys
    )


def type_(props: Mapping[str, Codec], name: str | None = None) -> Codec:
    """Object whose fields are all expected to be present."""
    return Codec("InterfaceType", name or _props_name(props), props=props)


def partial(props: Mapping[str, Codec], name: str | None = None) -> Codec:
    return Codec(
        "PartialType", name or f"Partial<{_props_name(props)}>", props=props
    )


def exact(codec: Codec, name: str | None = None) -> Codec:
    """Mark an object codec as rejecting undeclared properties."""
    return Codec("ExactType", name or codec.name, codec=codec)


def strict(props: Mapping[str, Codec], name: str | None = None) -> Codec:
    return exact(type_(props), name)


def readonly(codec: Codec, name: str | None = None) -> Codec:
    return Codec("ReadonlyType", name or f"Readonly<{codec.name}>", codec=codec)


def union(codecs: Iterable[Codec], name: str | None = None) -> Codec:
    codecs = tuple(codecs)
    if not codecs:
        raise ValueError("union requires at least one member")
    return Codec(
        "UnionType", name or "(" + " | ".join(c.name for c in codecs) + ")",
        codecs=codecs,
    )


def intersection(codecs: Iterable[Codec], name: str | None = None) -> Codec:
    codecs = tuple(codecs)
    if not codecs:
        raise ValueError("intersection requires at least one member")
    return Codec(
        "IntersectionType",
        name or "(" + " & ".join(c.name for c in codecs) + ")",
        codecs=codecs,
    )


def _keywords(**options: Any) -> dict[str, Any]:
    return {k: v for k, v in options.items() if v is not None}


def json_string(
    description: str | None = None,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: str | None = None,
) -> Codec:
    """A string codec carrying JSON Schema string keywords."""
    return refinement(
        string,
        "JSONString",
        _keywords(
            description=description,
            minLength=min_length,
            maxLength=max_length,
            pattern=pattern,
        ),
    )


def json_number(
    description: str | None = None,
    *,
    multiple_of: float | None = None,
    minimum: float | None = None,
    exclusive_minimum: float | None = None,
    maximum: float | None = None,
    exclusive_maximum: float | None = None,
) -> Codec:
    """A number codec carrying JSON Schema numeric keywords."""
    return refinement(
        number,
        "JSONNumber",
        _keywords(
            description=description,
            multipleOf=multiple_of,
            minimum=minimum,
            exclusiveMinimum=exclusive_minimum,
            maximum=maximum,
            exclusiveMaximum=exclusive_maximum,
        ),
    )


def json_array(
    codec: Codec,
    description: str | None = None,
    *,
    min_items: int | None = None,
    max_items: int | None = None,
) -> Codec:
    """An array codec carrying JSON Schema array keywords."""
    return refinement(
        array(codec),
        f"JSONArray<{codec.name}>",
        _keywords(description=description, minItems=min_items, maxItems=max_items),
    )
