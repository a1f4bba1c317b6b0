"""Ready-made assertions for common argument checks."""

from alchemy_arguments.assertions.addresses import valid_zip_code, valid_zip_code_string
from alchemy_arguments.assertions.collections import (
    collection_of_size,
    element_in_collection,
    key_in_map,
    non_empty,
)
from alchemy_arguments.assertions.general import (
    equal_to,
    instance_of,
    none,
    not_none,
    same_instance_as,
)
from alchemy_arguments.assertions.network import valid_ipv4_address, valid_port, valid_url
from alchemy_arguments.assertions.numbers import (
    greater_than,
    greater_than_or_equal_to,
    less_than,
    less_than_or_equal_to,
    non_negative_integer,
    number_in_range,
    positive_integer,
)
from alchemy_arguments.assertions.strings import (
    alphabetic_string,
    integer_string,
    non_empty_string,
    string_containing,
    string_matching,
    string_with_length,
    string_with_length_greater_than_or_equal_to,
    string_with_length_in_range,
    string_with_length_less_than_or_equal_to,
    string_with_no_whitespace,
)

__all__ = [
    "alphabetic_string",
    "collection_of_size",
    "element_in_collection",
    "equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "instance_of",
    "integer_string",
    "key_in_map",
    "less_than",
    "less_than_or_equal_to",
    "non_empty",
    "non_empty_string",
    "non_negative_integer",
    "none",
    "not_none",
    "number_in_range",
    "positive_integer",
    "same_instance_as",
    "string_containing",
    "string_matching",
    "string_with_length",
    "string_with_length_greater_than_or_equal_to",
    "string_with_length_in_range",
    "string_with_length_less_than_or_equal_to",
    "string_with_no_whitespace",
    "valid_ipv4_address",
    "valid_port",
    "valid_url",
    "valid_zip_code",
    "valid_zip_code_string",
]
