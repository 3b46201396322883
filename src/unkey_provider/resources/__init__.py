"""Resource handlers exposed by the provider."""

from unkey_provider.resources.api import ApiResource
from unkey_provider.resources.base import UnkeyResource
from unkey_provider.resources.identity import IdentityResource
from unkey_provider.resources.key import KeyResource
from unkey_provider.resources.permission import PermissionResource
from unkey_provider.resources.role import RoleResource

__all__ = [
    "ApiResource",
    "IdentityResource",
    "KeyResource",
    "PermissionResource",
    "RoleResource",
    "UnkeyResource",
]
