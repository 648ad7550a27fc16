"""Unit tests for taxonomy discovery through wrapped causes.

Tests cover:
- find_api_error through WrappedError, ApiException and exception chaining
- Kind detection after several levels of wrapping
- Folding foreign errors into CF-UnknownError
- Wrap context collection
"""

import pytest

from gateway.core.enums import ErrorKind
from gateway.core.errors import (
    ApiException,
    as_api_error,
    error_context,
    error_kind,
    find_api_error,
    forbidden_error,
    is_kind,
    not_found_error,
    unprocessable_entity_error,
    wrap,
)


@pytest.mark.unit
class TestFindApiError:
    def test_returns_error_itself(self):
        error = not_found_error(None, "App")
        assert find_api_error(error) is error

    def test_none_for_none(self):
        assert find_api_error(None) is None

    def test_none_for_foreign_exception(self):
        assert find_api_error(RuntimeError("boom")) is None

    def test_survives_three_levels_of_wrapping(self):
        error = not_found_error(None, "App")
        wrapped = wrap(wrap(wrap(error, "fetch app"), "fetch process"), "scale process")

        assert find_api_error(wrapped) is error
        assert error_kind(wrapped) is ErrorKind.RESOURCE_NOT_FOUND
        assert is_kind(wrapped, ErrorKind.RESOURCE_NOT_FOUND)

    def test_finds_error_in_api_exception(self):
        error = forbidden_error(None, "Space")
        assert find_api_error(ApiException(error)) is error

    def test_follows_explicit_exception_chaining(self):
        error = not_found_error(None, "Droplet")
        try:
            try:
                raise ApiException(error)
            except ApiException as inner:
                raise RuntimeError("lookup failed") from inner
        except RuntimeError as outer:
            assert find_api_error(outer) is error

    def test_implicit_exception_context_is_not_followed(self):
        try:
            try:
                raise ApiException(not_found_error(None, "Droplet"))
            except ApiException:
                raise KeyError("droplet")
        except KeyError as outer:
            assert find_api_error(outer) is None
            assert as_api_error(outer).kind is ErrorKind.UNKNOWN

    def test_suppressed_context_is_not_followed(self):
        try:
            try:
                raise ApiException(not_found_error(None, "Droplet"))
            except ApiException:
                raise KeyError("droplet") from None
        except KeyError as outer:
            assert find_api_error(outer) is None

    def test_outermost_member_wins(self):
        inner = not_found_error(None, "Space")
        outer = unprocessable_entity_error(inner, "Invalid space")

        assert find_api_error(wrap(outer, "create app")) is outer


@pytest.mark.unit
class TestIsKind:
    def test_matches_any_of_several_kinds(self):
        error = wrap(forbidden_error(None, "App"), "get app")

        assert is_kind(error, ErrorKind.RESOURCE_NOT_FOUND, ErrorKind.NOT_AUTHORIZED)
        assert not is_kind(error, ErrorKind.RESOURCE_NOT_FOUND)

    def test_foreign_error_has_no_kind(self):
        assert error_kind(ValueError("x")) is None
        assert not is_kind(ValueError("x"), ErrorKind.UNKNOWN)


@pytest.mark.unit
class TestAsApiError:
    def test_foreign_error_becomes_unknown_with_cause(self):
        cause = RuntimeError("connection reset by peer")
        error = as_api_error(wrap(cause, "list apps"))

        assert error.kind is ErrorKind.UNKNOWN
        assert error.detail == "An unknown error occurred."
        assert "connection reset" not in error.detail
        assert error.cause.cause is cause

    def test_taxonomy_member_is_returned_verbatim(self):
        error = not_found_error(None, "App")
        assert as_api_error(wrap(error, "get app")) is error


@pytest.mark.unit
class TestErrorContext:
    def test_collects_context_from_every_layer(self):
        error = wrap(
            wrap(not_found_error(None, "App"), "get app", app_guid="a-1"),
            "scale",
            process_type="web",
        )

        assert error_context(error) == {"app_guid": "a-1", "process_type": "web"}

    def test_outer_context_wins(self):
        error = wrap(wrap(ValueError(), "inner", guid="inner"), "outer", guid="outer")

        assert error_context(error) == {"guid": "outer"}

    def test_includes_context_behind_taxonomy_member(self):
        inner = wrap(RuntimeError("boom"), "fetch space", space_guid="s-1")
        error = unprocessable_entity_error(inner, "Invalid space")

        assert error_context(error) == {"space_guid": "s-1"}

    def test_empty_without_wrapping(self):
        assert error_context(not_found_error(None, "App")) == {}
