"""
Conversion of index templates to and from the JSON body of the elastic _template API.

Encoding leaves out every attribute that was not set (None), and writes the keys of mappings
(field names, type names, ...) in sorted order so the same template always gives the same bytes.
Decoding ignores unknown keys and is strict about value types: "1" is not an integer, and 1 is not a boolean.
"""

import json
import logging
from typing import Any, Callable, Mapping, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from estemplate.config import get_settings
from estemplate.models import Property, Template, TypeMapping

T = TypeVar("T")

TypeMappings = dict[str, TypeMapping]
JsonInput = str | bytes | Mapping[str, Any]

_type_mappings = TypeAdapter(TypeMappings)


class CodecError(ValueError):
    pass


class EncodeError(CodecError):
    """A template could not be serialized. This is a bug in the caller or in estemplate, not bad input."""


class DecodeError(CodecError):
    """The input was not valid JSON, or a value did not have the expected type"""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


####################### ENCODING #########################


def to_dict(value: Template | TypeMapping | Property | Mapping[str, TypeMapping]) -> dict[str, Any]:
    """Convert a template, type mapping, property, or a dict of type name to type mapping into JSON-ready dicts"""
    try:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True, exclude_none=True)
        data = _type_mappings.dump_python(dict(value), mode="json", by_alias=True, exclude_none=True)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Cannot encode {type(value).__name__}: {e}") from e
    return {key: data[key] for key in sorted(data)}


def _dumps(data: dict[str, Any], indent: int | None) -> str:
    settings = get_settings()
    if indent is None:
        indent = settings.json_indent
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(data, indent=indent, separators=separators, ensure_ascii=settings.ensure_ascii)


def encode_template(template: Template, indent: int | None = None) -> str:
    return _dumps(to_dict(template), indent)


def encode_mappings(mappings: Mapping[str, TypeMapping], indent: int | None = None) -> str:
    return _dumps(to_dict(mappings), indent)


def encode_type_mapping(mapping: TypeMapping, indent: int | None = None) -> str:
    return _dumps(to_dict(mapping), indent)


def encode_property(prop: Property, indent: int | None = None) -> str:
    return _dumps(to_dict(prop), indent)


####################### DECODING #########################


def _decode(what: str, data: JsonInput, validate: Callable[..., T]) -> T:
    if isinstance(data, (str, bytes)):
        # the stdlib parser has no fixed depth limit, so anything the encoder writes can be read back
        try:
            data = json.loads(data)
        except ValueError as e:
            errors = [{"type": "json_invalid", "loc": (), "msg": f"Invalid JSON: {e}", "input": data}]
            logging.debug(f"Cannot decode {what}: {e}")
            raise DecodeError(f"Cannot decode {what}: invalid JSON: {e}", errors) from e
    try:
        # wire names only: the attribute names all and source are not keys of the _template API
        return validate(data, by_alias=True, by_name=False)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logging.debug(f"Cannot decode {what}: " + json.dumps(errors, indent=2, default=str))
        raise DecodeError(f"Cannot decode {what}: {e}", errors) from e


def decode_template(data: JsonInput) -> Template:
    """Decode a template from JSON text, or from an already parsed JSON object"""
    return _decode("template", data, Template.model_validate)


def decode_mappings(data: JsonInput) -> TypeMappings:
    return _decode("mappings", data, _type_mappings.validate_python)


def decode_type_mapping(data: JsonInput) -> TypeMapping:
    return _decode("type mapping", data, TypeMapping.model_validate)


def decode_property(data: JsonInput) -> Property:
    return _decode("property", data, Property.model_validate)
