"""Unit tests for RequestValidator.

Tests cover:
- JSON body decoding (parse errors, unknown fields, type mismatches,
  aggregated validation messages)
- Query string decoding (unknown keys, ignored keys, parse errors,
  constraint violations, purity)
"""

import json

import pytest
from pydantic import Field
from starlette.datastructures import QueryParams

from gateway.core.enums import ErrorKind
from gateway.core.result import Failure, Success
from gateway.presentation.api.payloads import RoleCreate, RoleList
from gateway.presentation.api.validation import KeyedPayload, RequestValidator


class KeysAB(KeyedPayload):
    a: str | None = None
    b: str | None = None


class PagedList(KeyedPayload):
    names: str | None = None
    per_page: int = Field(default=50, ge=1, le=5000)
    available: bool | None = None


def _role_body(**overrides) -> str:
    body = {
        "type": "space_developer",
        "relationships": {
            "user": {"data": {"guid": "user-guid"}},
            "space": {"data": {"guid": "space-guid"}},
        },
    }
    body.update(overrides)
    return json.dumps(body)


@pytest.fixture
def validator() -> RequestValidator:
    return RequestValidator()


@pytest.mark.unit
class TestDecodeJsonPayload:
    def test_decodes_valid_body(self, validator):
        result = validator.decode_json_bytes(_role_body(), RoleCreate)

        assert isinstance(result, Success)
        assert result.value.type == "space_developer"
        assert result.value.relationships.space.data.guid == "space-guid"

    @pytest.mark.parametrize("body", ["{", "", "not json", "[]", '"text"'])
    def test_unparsable_body_is_parse_error(self, validator, body):
        result = validator.decode_json_bytes(body, RoleCreate)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.MESSAGE_PARSE_ERROR
        assert result.error.http_status == 400
        assert result.error.detail == (
            "Request invalid due to parse error: invalid request body"
        )

    def test_unknown_field(self, validator):
        result = validator.decode_json_bytes(_role_body(X=1), RoleCreate)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.UNPROCESSABLE_ENTITY
        assert result.error.http_status == 422
        assert result.error.detail == 'invalid request body: json: unknown field "X"'

    def test_type_mismatch(self, validator):
        result = validator.decode_json_bytes(_role_body(type=5), RoleCreate)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.UNPROCESSABLE_ENTITY
        assert result.error.detail == "Type must be a string"

    def test_nested_type_mismatch(self, validator):
        body = _role_body(relationships={"user": {"data": {"guid": 7}}})

        result = validator.decode_json_bytes(body, RoleCreate)

        assert result.error.detail == "Relationships.User.Data.Guid must be a string"

    def test_no_coercion_between_json_types(self, validator):
        result = validator.decode_json_bytes('{"a": 1}', KeysAB)

        assert result.error.detail == "A must be a string"

    def test_missing_field(self, validator):
        result = validator.decode_json_bytes('{"type": "space_developer"}', RoleCreate)

        assert result.error.kind is ErrorKind.UNPROCESSABLE_ENTITY
        assert result.error.detail == "relationships cannot be blank"

    def test_messages_are_sorted_and_joined(self, validator):
        body = _role_body(type="", relationships={"user": {"data": {"guid": ""}}})

        result = validator.decode_json_bytes(body, RoleCreate)

        assert result.error.detail == (
            "relationships.user.data.guid String should have at least 1 character, "
            "type String should have at least 1 character"
        )

    def test_cross_field_rule(self, validator):
        body = _role_body(
            type="organization_manager",
            relationships={
                "user": {"data": {"guid": "u"}},
                "space": {"data": {"guid": "s"}},
                "organization": {"data": {"guid": "o"}},
            },
        )

        result = validator.decode_json_bytes(body, RoleCreate)

        assert result.error.detail == (
            "Cannot pass both 'organization' and 'space' in a create role request"
        )

    def test_cause_is_kept(self, validator):
        result = validator.decode_json_bytes("{", RoleCreate)

        assert result.error.cause is not None


@pytest.mark.unit
class TestDecodeUrlValues:
    def test_unknown_key_lists_supported_keys(self, validator):
        result = validator.decode_query(QueryParams("c=1"), KeysAB)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.UNKNOWN_QUERY_KEY
        assert result.error.http_status == 400
        assert result.error.title == "CF-BadQueryParameter"
        assert result.error.detail == (
            "The query parameter is invalid: Valid parameters are: 'a, b'"
        )

    def test_supported_keys_decode(self, validator):
        result = validator.decode_query(QueryParams("a=x&b=y"), KeysAB)

        assert result == Success(value=KeysAB(a="x", b="y"))

    def test_fields_selectors_are_ignored(self, validator):
        result = validator.decode_query(
            QueryParams("a=x&fields[space.organization]=name"), KeysAB
        )

        assert result == Success(value=KeysAB(a="x"))

    def test_ignored_keys_are_accepted(self, validator):
        result = validator.decode_query(
            QueryParams("types=space_manager&page=2&per_page=10"), RoleList
        )

        assert isinstance(result, Success)
        assert result.value.types == frozenset({"space_manager"})

    def test_ignored_key_patterns_match_whole_key(self, validator):
        result = validator.decode_query(QueryParams("pages=2"), RoleList)

        assert result.error.kind is ErrorKind.UNKNOWN_QUERY_KEY

    def test_unparsable_value_is_parse_error(self, validator):
        result = validator.decode_query(QueryParams("per_page=lots"), PagedList)

        assert result.error.kind is ErrorKind.MESSAGE_PARSE_ERROR

    def test_unparsable_bool_is_parse_error(self, validator):
        result = validator.decode_query(QueryParams("available=maybe"), PagedList)

        assert result.error.kind is ErrorKind.MESSAGE_PARSE_ERROR

    def test_query_values_are_parsed_to_declared_types(self, validator):
        result = validator.decode_query(
            QueryParams("per_page=10&available=true"), PagedList
        )

        assert result.value.per_page == 10
        assert result.value.available is True

    def test_constraint_violation_is_unprocessable(self, validator):
        result = validator.decode_query(QueryParams("per_page=0"), PagedList)

        assert result.error.kind is ErrorKind.UNPROCESSABLE_ENTITY
        assert result.error.detail == "per_page Input should be greater than or equal to 1"

    def test_decode_is_pure(self, validator):
        query = QueryParams("guids=b,a&order_by=-created_at")

        first = validator.decode_query(query, RoleList)
        second = validator.decode_query(query, RoleList)

        assert first == second
        assert first.value.guids == frozenset({"a", "b"})
