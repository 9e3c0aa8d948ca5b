import logging

from codec_jsonschema.converter import INITIAL_MODIFIERS, _Converter
from codec_jsonschema.errors import (
    ConversionError,
    IntersectionMemberError,
    UnsupportedTypeError,
)
from codec_jsonschema.model import BaseSchema

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "convert",
    "ConversionError",
    "IntersectionMemberError",
    "UnsupportedTypeError",
]


def convert(codec, dedupe_required: bool = False) -> BaseSchema:
    """
    Convert a codec tree to a JSON Schema representation.

    Parameters:
    - codec (Codec): The codec to convert (for example: `codecs.string`,
        `codecs.array(codecs.number)`, or `codecs.strict({...})`).
    - dedupe_required (bool): If True, a key required by several operands of
        an intersection is listed once in the merged `required` list. By
        default the operands' lists are concatenated as they are.

    Returns:
    - BaseSchema: A freshly built schema made of plain dicts and lists, ready
        for `json.dumps`.

    Raises:
    - UnsupportedTypeError: If the codec, or any codec nested in it, is
        outside the convertible grammar.
    - IntersectionMemberError: If an intersection operand is not an object
        codec (`type_`, `partial`, or one of those wrapped by `exact`).
    """

    logger.debug("converting %r", codec)
    converter = _Converter(dedupe_required)
    return converter._convert_core(codec, INITIAL_MODIFIERS)
