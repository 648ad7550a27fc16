"""Role payloads.

RoleCreate is the body of ``POST /v3/roles``; RoleList is the query string
of ``GET /v3/roles``.

Role scope rules (RoleCreate):
- organization and space relationships are mutually exclusive
- space roles need a space relationship
- organization roles need an organization relationship
- any other role type is rejected
"""

import re
from enum import Enum
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError
from starlette.datastructures import QueryParams

from gateway.presentation.api.payloads.relationship import Relationship
from gateway.presentation.api.validation.payload import (
    KeyedPayload,
    Payload,
    split_list_param,
)


class RoleName(str, Enum):
    SPACE_MANAGER = "space_manager"
    SPACE_AUDITOR = "space_auditor"
    SPACE_DEVELOPER = "space_developer"
    SPACE_SUPPORTER = "space_supporter"
    ORGANIZATION_USER = "organization_user"
    ORGANIZATION_AUDITOR = "organization_auditor"
    ORGANIZATION_MANAGER = "organization_manager"
    ORGANIZATION_BILLING_MANAGER = "organization_billing_manager"

    @property
    def is_space_role(self) -> bool:
        return self.value.startswith("space_")


class RoleRelationships(Payload):
    user: Relationship
    space: Relationship | None = None
    organization: Relationship | None = None


class RoleCreate(Payload):
    """Body of a create role request.

    Example:
        {
          "type": "space_developer",
          "relationships": {
            "user": {"data": {"guid": "user-guid"}},
            "space": {"data": {"guid": "space-guid"}}
          }
        }
    """

    type: str = Field(..., min_length=1)
    relationships: RoleRelationships

    @model_validator(mode="after")
    def check_role_scope(self) -> "RoleCreate":
        relationships = self.relationships
        if relationships.organization is not None and relationships.space is not None:
            raise PydanticCustomError(
                "conflicting_relationships",
                "Cannot pass both 'organization' and 'space' in a create role request",
            )

        try:
            role = RoleName(self.type)
        except ValueError:
            raise PydanticCustomError(
                "invalid_role", "{role} is not a valid role", {"role": self.type}
            ) from None

        if role.is_space_role and relationships.space is None:
            raise PydanticCustomError(
                "required_relationship", "relationships.space is a required field"
            )
        if not role.is_space_role and relationships.organization is None:
            raise PydanticCustomError(
                "required_relationship",
                "relationships.organization is a required field",
            )
        return self

    @property
    def role(self) -> RoleName:
        return RoleName(self.type)


_ORDER_BY_VALUES = ("created_at", "-created_at", "updated_at", "-updated_at")
_LIST_KEYS = ("guids", "types", "space_guids", "organization_guids", "user_guids")


class RoleList(KeyedPayload):
    """Filters of a list roles request. Empty filters match everything."""

    guids: frozenset[str] = frozenset()
    types: frozenset[str] = frozenset()
    space_guids: frozenset[str] = frozenset()
    organization_guids: frozenset[str] = frozenset()
    user_guids: frozenset[str] = frozenset()
    order_by: str = ""

    @classmethod
    def supported_keys(cls) -> list[str]:
        return [*_LIST_KEYS, "order_by", "include"]

    @classmethod
    def ignored_keys(cls) -> list[re.Pattern[str]]:
        return [re.compile("page"), re.compile("per_page")]

    @classmethod
    def decode_from_url_values(cls, values: QueryParams) -> dict[str, Any]:
        data: dict[str, Any] = {
            key: split_list_param(values.getlist(key)[0])
            for key in _LIST_KEYS
            if key in values
        }
        if "order_by" in values:
            data["order_by"] = values.getlist("order_by")[0]
        return data

    @field_validator("order_by")
    @classmethod
    def validate_order_by(cls, v: str) -> str:
        if v and v not in _ORDER_BY_VALUES:
            raise PydanticCustomError(
                "invalid_order_by",
                "value must be one of: {values}",
                {"values": ", ".join(_ORDER_BY_VALUES)},
            )
        return v

    def matches(
        self,
        *,
        guid: str,
        type: str,
        space_guid: str = "",
        organization_guid: str = "",
        user_guid: str = "",
    ) -> bool:
        """Check a role record against every non-empty filter."""
        filters = (
            (self.guids, guid),
            (self.types, type),
            (self.space_guids, space_guid),
            (self.organization_guids, organization_guid),
            (self.user_guids, user_guid),
        )
        return all(not allowed or value in allowed for allowed, value in filters)
