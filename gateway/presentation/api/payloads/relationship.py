"""To-one relationship payloads shared by resource bodies."""

from pydantic import Field

from gateway.presentation.api.validation.payload import Payload


class RelationshipData(Payload):
    guid: str = Field(..., min_length=1)


class Relationship(Payload):
    """``{"data": {"guid": "..."}}``"""

    data: RelationshipData
