"""
estemplate: Elasticsearch index templates as pydantic models, with a deterministic JSON codec
"""

from estemplate.codec import (
    CodecError,
    DecodeError,
    EncodeError,
    decode_mappings,
    decode_property,
    decode_template,
    decode_type_mapping,
    encode_mappings,
    encode_property,
    encode_template,
    encode_type_mapping,
    to_dict,
)
from estemplate.models import (
    EnabledFlag,
    IndexSettings,
    Property,
    PropertyType,
    Template,
    TypeMapping,
    keyword_property,
    nested_property,
    object_property,
    text_property,
)

__all__ = [
    "CodecError",
    "DecodeError",
    "EncodeError",
    "EnabledFlag",
    "IndexSettings",
    "Property",
    "PropertyType",
    "Template",
    "TypeMapping",
    "decode_mappings",
    "decode_property",
    "decode_template",
    "decode_type_mapping",
    "encode_mappings",
    "encode_property",
    "encode_template",
    "encode_type_mapping",
    "keyword_property",
    "nested_property",
    "object_property",
    "text_property",
    "to_dict",
]
