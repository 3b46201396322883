"""In-process plugin host seam: values, diagnostics, schemas and envelopes."""

from unkey_provider.framework.diagnostics import Diagnostic, Diagnostics, Severity
from unkey_provider.framework.resource import (
    ConfigureRequest,
    ConfigureResponse,
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    MetadataRequest,
    MetadataResponse,
    ReadRequest,
    ReadResponse,
    Resource,
    UpdateRequest,
    UpdateResponse,
)
from unkey_provider.framework.schema import Schema
from unkey_provider.framework.values import (
    UNKNOWN,
    UnknownValue,
    is_known,
    known_or_none,
    is_null_or_unknown,
    is_unknown,
)

__all__ = [
    "UNKNOWN",
    "ConfigureRequest",
    "ConfigureResponse",
    "CreateRequest",
    "CreateResponse",
    "DeleteRequest",
    "DeleteResponse",
    "Diagnostic",
    "Diagnostics",
    "MetadataRequest",
    "MetadataResponse",
    "ReadRequest",
    "ReadResponse",
    "Resource",
    "Schema",
    "Severity",
    "UnknownValue",
    "UpdateRequest",
    "UpdateResponse",
    "is_known",
    "known_or_none",
    "is_null_or_unknown",
    "is_unknown",
]
