"""Reference request payloads."""

from gateway.presentation.api.payloads.relationship import (
    Relationship,
    RelationshipData,
)
from gateway.presentation.api.payloads.role import (
    RoleCreate,
    RoleList,
    RoleName,
    RoleRelationships,
)

__all__ = [
    "Relationship",
    "RelationshipData",
    "RoleCreate",
    "RoleList",
    "RoleName",
    "RoleRelationships",
]
