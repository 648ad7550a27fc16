"""Payload base models.

Payload is the base for JSON request bodies: unknown fields are rejected
and decoded payloads are immutable. KeyedPayload is the base for query
string payloads; it declares which keys it understands and how raw URL
values map onto its fields.

Usage:
    class AppList(KeyedPayload):
        names: frozenset[str] = frozenset()

        @classmethod
        def supported_keys(cls) -> list[str]:
            return ["names"]
"""

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from starlette.datastructures import QueryParams


class Payload(BaseModel):
    """Base for decoded request bodies."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )


class KeyedPayload(Payload):
    """Base for decoded query strings.

    Subclasses list the keys they accept in supported_keys(). Keys matching
    one of ignored_keys() (full match) are accepted and dropped, as are
    sparse fieldset selectors such as ``fields[space.organization]``.
    """

    IMPLICITLY_IGNORED: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"fields\[.+\]"),
    )

    @classmethod
    def supported_keys(cls) -> list[str]:
        """Query keys understood by the payload (defaults to its field aliases)."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    @classmethod
    def ignored_keys(cls) -> list[re.Pattern[str]]:
        """Patterns for keys accepted but not decoded."""
        return []

    @classmethod
    def is_accepted_key(cls, key: str) -> bool:
        if key in cls.supported_keys():
            return True
        patterns = (*cls.IMPLICITLY_IGNORED, *cls.ignored_keys())
        return any(pattern.fullmatch(key) for pattern in patterns)

    @classmethod
    def decode_from_url_values(cls, values: QueryParams) -> dict[str, Any]:
        """Map raw URL values onto field input.

        The default takes the first value of every supported key that is
        present. Override to split lists or combine keys; raise ValueError
        for values that cannot be parsed at all.

        Args:
            values: Query parameters of the request.

        Returns:
            dict: Field input passed on to model validation.
        """
        return {
            key: values.getlist(key)[0]
            for key in cls.supported_keys()
            if key in values
        }


def split_list_param(value: Any) -> Any:
    """Split a comma-separated query value into a set of non-empty items.

    Non-string input is returned unchanged so model validation can report it.
    """
    if isinstance(value, str):
        return frozenset(item.strip() for item in value.split(",") if item.strip())
    return value
