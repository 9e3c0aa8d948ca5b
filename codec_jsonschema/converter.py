import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from codec_jsonschema.errors import (
    ConversionError,
    IntersectionMemberError,
    UnsupportedTypeError,
)
from codec_jsonschema.model import (
    ArraySchema,
    BaseSchema,
    BooleanSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OneOfSchema,
    StringSchema,
)
from codec_jsonschema.variants import (
    OBJECT_VARIANTS,
    Variant,
    classify,
    is_convertible,
)

logger = logging.getLogger(__name__)

INT_REFINEMENT = "Int"


@dataclass(frozen=True)
class Modifiers:
    """Flags inherited from enclosing wrapper codecs.

    `readonly` is tracked but does not change the emitted schema.
    """

    exact: bool = False
    readonly: bool = False


INITIAL_MODIFIERS = Modifiers()


def _is_optional(codec: Any) -> bool:
    """Check if a field codec admits `undefined` at its top level."""
    variant = classify(codec)
    if variant is Variant.UNDEFINED:
        return True
    if variant is Variant.UNION:
        return any(classify(member) is Variant.UNDEFINED for member in codec.codecs)
    return False


def required_props(props: Mapping[str, Any]) -> list[str]:
    """Keys of `props` that must be present, in declaration order.

    Only `undefined` itself, or a union listing `undefined` directly, makes a
    field optional; optionality nested any deeper is not looked for.
    """
    return [key for key, codec in props.items() if not _is_optional(codec)]


class _Converter:
    def __init__(self, dedupe_required: bool = False) -> None:
        self._dedupe_required = dedupe_required

    def _error(self, error_cls: type[ConversionError], codec: Any) -> ConversionError:
        error = error_cls.from_codec(codec)
        logger.debug("%s: %s - %s", error_cls.__name__, error.tag, error.name)
        return error

    def _convert_union(
        self, codecs: Sequence[Any], modifiers: Modifiers
    ) -> BaseSchema:
        """Convert union members, dropping the ones with no schema."""
        convertibles = [c for c in codecs if is_convertible(c)]

        if len(convertibles) == 1:
            logger.debug("collapsing union to %s", convertibles[0].name)
            return self._convert_core(convertibles[0], modifiers)

        return OneOfSchema(
            oneOf=[self._convert_core(c, modifiers) for c in convertibles]
        )

    def _convert_object(self, codec: Any, modifiers: Modifiers) -> ObjectSchema:
        properties = {
            key: self._convert_core(value, modifiers)
            for key, value in codec.props.items()
            if is_convertible(value)
        }
        obj_schema = ObjectSchema(type="object", properties=properties)

        if modifiers.exact:
            obj_schema["additionalProperties"] = False

        if classify(codec) is Variant.INTERFACE:
            obj_schema["required"] = required_props(codec.props)

        return obj_schema

    def _extract_object(self, codec: Any, modifiers: Modifiers) -> ObjectSchema:
        """Resolve one intersection operand to an object schema."""
        variant = classify(codec)

        if variant in OBJECT_VARIANTS:
            return self._convert_object(codec, modifiers)

        if variant is Variant.EXACT:
            return self._extract_object(codec.codec, replace(modifiers, exact=True))

        if variant is Variant.INTERSECTION:
            return self._merge_intersection(codec.codecs, modifiers)

        raise self._error(IntersectionMemberError, codec)

    def _merge_intersection(
        self, codecs: Sequence[Any], modifiers: Modifiers
    ) -> ObjectSchema:
        """Flatten intersected object codecs into a single object schema.

        Later operands override earlier properties of the same name, required
        keys are concatenated in operand order and the result forbids
        additional properties once any operand does.
        """
        # Operands resolve in declaration order; the first non-object one raises.
        objects = [self._extract_object(c, modifiers) for c in codecs]

        merged = ObjectSchema(type="object", required=[], properties={})
        for obj in objects:
            for key in obj.get("required", []):
                if self._dedupe_required and key in merged["required"]:
                    continue
                merged["required"].append(key)

            merged["properties"].update(obj["properties"])

            if obj.get("additionalProperties") is False:
                merged["additionalProperties"] = False

        logger.debug(
            "merged %d intersection operands into %d properties",
            len(objects),
            len(merged["properties"]),
        )
        return merged

    def _convert_refinement(self, codec: Any, modifiers: Modifiers) -> BaseSchema:
        if codec.name == INT_REFINEMENT:
            schema: BaseSchema = IntegerSchema(type="integer")
        else:
            schema = self._convert_core(codec.codec, modifiers)

        json_schema = getattr(codec, "json_schema", None)
        if json_schema:
            schema.update(json_schema)  # type: ignore[typeddict-item]

        return schema

    def _convert_core(self, codec: Any, modifiers: Modifiers) -> BaseSchema:
        """Convert a codec node to its schema."""
        variant = classify(codec)

        if variant is Variant.UNION:
            return self._convert_union(codec.codecs, modifiers)

        if variant is Variant.NUMBER:
            return NumberSchema(type="number")

        if variant is Variant.NULL:
            return NullSchema(type="null")

        if variant is Variant.STRING:
            return StringSchema(type="string")

        if variant is Variant.BOOLEAN:
            return BooleanSchema(type="boolean")

        if variant is Variant.TUPLE:
            return ArraySchema(
                type="array",
                items=[self._convert_core(c, modifiers) for c in codec.codecs],
            )

        if variant is Variant.KEYOF:
            return StringSchema(type="string", enum=list(codec.keys))

        if variant in (Variant.ARRAY, Variant.READONLY_ARRAY):
            # Element schemas never inherit the container's modifiers.
            return ArraySchema(
                type="array",
                items=self._convert_core(codec.codec, INITIAL_MODIFIERS),
            )

        if variant is Variant.READONLY:
            return self._convert_core(codec.codec, replace(modifiers, readonly=True))

        if variant is Variant.EXACT:
            return self._convert_core(codec.codec, replace(modifiers, exact=True))

        if variant in OBJECT_VARIANTS:
            return self._convert_object(codec, modifiers)

        if variant is Variant.REFINEMENT:
            return self._convert_refinement(codec, modifiers)

        if variant is Variant.INTERSECTION:
            return self._merge_intersection(codec.codecs, modifiers)

        # UNKNOWN, and undefined/function/void that were not filtered out
        # by an enclosing object or union.
        raise self._error(UnsupportedTypeError, codec)
