from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_serializer, model_validator
from typing_extensions import Self


######################## FIELD TYPES #########################

PropertyType = Literal[
    "text",
    "annotated_text",
    "match_only_text",
    "search_as_you_type",
    "completion",
    "keyword",
    "constant_keyword",
    "wildcard",
    "integer",
    "byte",
    "short",
    "long",
    "unsigned_long",
    "float",
    "half_float",
    "double",
    "scaled_float",
    "boolean",
    "binary",
    "date",
    "date_nanos",
    "ip",
    "object",
    "flattened",
    "nested",
    "dense_vector",
    "geo_point",
    "geo_shape",
]

# Types that take their sub-fields in a "properties" block
# - object: If the field is a dictionary (not an array of dictionaries)
# - nested: If the field is an array of dictionaries
CONTAINER_TYPES: frozenset[str] = frozenset(["nested", "object"])

Dynamic = StrictBool | Literal["strict", "runtime"]


class _Model(BaseModel):
    # unknown keys are dropped so templates written for newer elastic versions still decode.
    # attribute names (all, source) are for constructors, the codec decodes by wire name only
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _sorted_keys(value, handler):
    serialized = handler(value)
    if serialized is None:
        return None
    return {key: serialized[key] for key in sorted(serialized)}


def _sort_nested(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _sort_nested(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_sort_nested(item) for item in value]
    return value


def _deep_sorted_keys(value, handler):
    # free-form settings: sort the keys of every nested object, not only the outer one
    return _sort_nested(handler(value))


######################## MAPPINGS #########################


class Property(_Model):
    """The indexing definition of a single field.

    fields holds multi-fields (e.g. a keyword variant of a text field), properties holds the sub-properties of
    a nested or object field. Attributes left at None are not part of the mapping.
    """

    type: PropertyType
    format: StrictStr | None = None
    fielddata: StrictBool | None = None
    ignore_above: StrictInt | None = None
    fields: dict[str, "Property"] | None = None
    properties: dict[str, "Property"] | None = None
    analyzer: StrictStr | None = None
    index: StrictBool | None = None
    doc_values: StrictBool | None = None
    dynamic: Dynamic | None = None

    @model_validator(mode="after")
    def validate_properties(self) -> Self:
        if self.properties is not None and self.type not in CONTAINER_TYPES:
            raise ValueError(f"Field type {self.type} cannot have sub-properties, only nested or object fields can")
        return self

    @field_serializer("fields", "properties", mode="wrap")
    def serialize_sorted(self, value, handler):
        return _sorted_keys(value, handler)


class EnabledFlag(_Model):
    """Switches a meta field such as _all or _source on or off"""

    enabled: StrictBool


class TypeMapping(_Model):
    """The mapping of one document type within an index"""

    all: EnabledFlag | None = Field(default=None, alias="_all")
    source: EnabledFlag | None = Field(default=None, alias="_source")
    properties: dict[str, Property] | None = None
    dynamic: Dynamic | None = None

    @field_serializer("properties", mode="wrap")
    def serialize_sorted(self, value, handler):
        return _sorted_keys(value, handler)


######################## TEMPLATES #########################


class IndexSettings(_Model):
    number_of_shards: StrictInt | None = None
    number_of_replicas: StrictInt | None = None
    refresh_interval: StrictStr | None = None
    analysis: dict[str, Any] | None = None

    @field_serializer("analysis", mode="wrap")
    def serialize_sorted(self, value, handler):
        return _deep_sorted_keys(value, handler)


class Template(_Model):
    """An index template, applied to every new index whose name matches the template pattern.

    settings and mappings are always written, so a body without them re-encodes with an empty {} for each.
    """

    template: StrictStr
    settings: IndexSettings = IndexSettings()
    mappings: dict[str, TypeMapping] = {}
    order: StrictInt | None = None
    version: StrictInt | None = None
    aliases: dict[str, dict[str, Any]] | None = None

    @field_serializer("mappings", mode="wrap")
    def serialize_sorted(self, value, handler):
        return _sorted_keys(value, handler)

    @field_serializer("aliases", mode="wrap")
    def serialize_aliases(self, value, handler):
        return _deep_sorted_keys(value, handler)


# Helper functions to create fields without too much boilerplate


def _property(type: PropertyType, **attributes: Any) -> Property:
    # unset attributes are left out rather than passed as None
    return Property(type=type, **{k: v for k, v in attributes.items() if v is not None})


def nested_property(**properties: Property) -> Property:
    return _property("nested", properties=properties)


def object_property(**properties: Property) -> Property:
    return _property("object", properties=properties)


def keyword_property(ignore_above: int | None = None) -> Property:
    return _property("keyword", ignore_above=ignore_above)


def text_property(fielddata: bool | None = None, **fields: Property) -> Property:
    """A text field, optionally indexed a second way through multi-fields, e.g. text_property(keyword=...)"""
    return _property("text", fielddata=fielddata, fields=fields or None)
