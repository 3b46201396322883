"""Resource state models, one dataclass per managed resource."""

from unkey_provider.domain.models.api import ApiResourceModel
from unkey_provider.domain.models.identity import IdentityResourceModel
from unkey_provider.domain.models.key import KeyResourceModel
from unkey_provider.domain.models.permission import PermissionResourceModel
from unkey_provider.domain.models.role import RoleResourceModel

__all__ = [
    "ApiResourceModel",
    "IdentityResourceModel",
    "KeyResourceModel",
    "PermissionResourceModel",
    "RoleResourceModel",
]
