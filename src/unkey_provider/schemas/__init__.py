"""Attribute schemas for every resource the provider manages."""

from unkey_provider.schemas.api import api_schema
from unkey_provider.schemas.identity import identity_schema
from unkey_provider.schemas.key import key_schema
from unkey_provider.schemas.permission import permission_schema
from unkey_provider.schemas.role import role_schema

__all__ = [
    "api_schema",
    "identity_schema",
    "key_schema",
    "permission_schema",
    "role_schema",
]
