from typing import Any


class ConversionError(ValueError):
    """Base class for codecs that cannot be expressed as a schema.

    `tag` and `name` identify the offending codec node.
    """

    def __init__(self, message: str, tag: str | None, name: str | None) -> None:
        super().__init__(message)
        self.tag = tag
        self.name = name

    @classmethod
    def from_codec(cls, codec: Any) -> "ConversionError":
        """Build a leaf error from the `tag` and `name` of `codec`."""
        return cls(getattr(codec, "tag", None), getattr(codec, "name", None))  # type: ignore[call-arg]


class UnsupportedTypeError(ConversionError):
    """The codec is outside the convertible grammar."""

    def __init__(self, tag: str | None, name: str | None) -> None:
        super().__init__(f"Invalid type {tag} - {name}", tag, name)


class IntersectionMemberError(ConversionError):
    """An intersection operand does not resolve to an object codec."""

    def __init__(self, tag: str | None, name: str | None) -> None:
        super().__init__(
            "Only objects (partial, type or strict) are allowed in "
            f"intersections, got {tag} ({name})",
            tag,
            name,
        )
