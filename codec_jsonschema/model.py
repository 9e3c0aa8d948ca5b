from typing import Literal, TypedDict


class BaseSchema(TypedDict, total=False):
    description: str


class NullSchema(BaseSchema, total=False):
    type: Literal["null"]


class BooleanSchema(BaseSchema, total=False):
    type: Literal["boolean"]


class NumberSchema(BaseSchema, total=False):
    type: Literal["number"]
    multipleOf: float
    minimum: float
    exclusiveMinimum: float
    maximum: float
    exclusiveMaximum: float


class IntegerSchema(BaseSchema, total=False):
    type: Literal["integer"]
    multipleOf: int
    minimum: float
    maximum: float


class StringSchema(BaseSchema, total=False):
    type: Literal["string"]
    enum: list[str]
    minLength: int
    maxLength: int
    pattern: str


class ArraySchema(BaseSchema, total=False):
    type: Literal["array"]
    items: BaseSchema | list[BaseSchema]
    minItems: int
    maxItems: int


class ObjectSchema(BaseSchema, total=False):
    type: Literal["object"]
    properties: dict[str, BaseSchema]
    required: list[str]
    additionalProperties: bool


class OneOfSchema(BaseSchema, total=False):
    oneOf: list[BaseSchema]
