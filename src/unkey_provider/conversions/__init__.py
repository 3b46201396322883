"""Conversions between Terraform state values and Unkey API bodies."""

from unkey_provider.conversions.credits import (
    credits_from_api,
    credits_to_api,
    credits_to_update_api,
)
from unkey_provider.conversions.exceptions import (
    ConversionError,
    DecodingError,
    EncodingError,
)
from unkey_provider.conversions.primitives import (
    map_to_string,
    slice_to_string_list,
    string_list_to_slice,
    string_to_map,
)
from unkey_provider.conversions.ratelimits import (
    ratelimits_from_api,
    ratelimits_to_api,
)

__all__ = [
    "ConversionError",
    "DecodingError",
    "EncodingError",
    "credits_from_api",
    "credits_to_api",
    "credits_to_update_api",
    "map_to_string",
    "ratelimits_from_api",
    "ratelimits_to_api",
    "slice_to_string_list",
    "string_list_to_slice",
    "string_to_map",
]
