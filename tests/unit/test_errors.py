"""Tests for lx_common.errors and lx_common.response."""

from unittest.mock import MagicMock

from src.lx_common.errors import (
    AccountDisabledError,
    AppError,
    InvalidCredentialsError,
    ListingNotFoundError,
    MinVolumeError,
)
from src.lx_common.response import error_response, request_id_of, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500
        assert isinstance(err, Exception)


class TestListingErrors:
    def test_listing_not_found(self) -> None:
        err = ListingNotFoundError()
        assert err.code == 2001
        assert err.http_status == 404
        assert err.message == "Listing not found"

    def test_min_volume(self) -> None:
        err = MinVolumeError(volume=7, min_volume=10)
        assert err.code == 2002
        assert err.http_status == 422
        assert "7" in err.message
        assert "10" in err.message


class TestAuthErrors:
    def test_invalid_credentials_is_401(self) -> None:
        assert InvalidCredentialsError().http_status == 401

    def test_account_disabled_is_403(self) -> None:
        assert AccountDisabledError().http_status == 403


class TestApiResponse:
    def test_success_with_list_payload(self) -> None:
        resp = success_response([{"id": "1"}])
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == [{"id": "1"}]

    def test_error(self) -> None:
        resp = error_response(2001, "Listing not found")
        assert resp.code == 2001
        assert resp.data is None

    def test_request_id_taken_from_request_state(self) -> None:
        request = MagicMock()
        request.state.request_id = "req_abc123abc123"
        resp = success_response({"ok": True}, request=request)
        assert resp.request_id == "req_abc123abc123"

    def test_request_id_generated_when_state_missing(self) -> None:
        request = MagicMock()
        request.state = object()
        assert request_id_of(request).startswith("req_")

    def test_serialization(self) -> None:
        d = success_response({"volume": 10}).model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}


class TestErrorCatalog:
    def test_only_auth_and_listing_errors_defined(self) -> None:
        from src.lx_common import errors

        subclasses = [
            obj for obj in vars(errors).values()
            if isinstance(obj, type) and issubclass(obj, AppError) and obj is not AppError
        ]
        assert {cls.__name__ for cls in subclasses} == {
            "UsernameExistsError", "EmailExistsError", "InvalidCredentialsError",
            "AccountDisabledError", "InvalidRefreshTokenError",
            "ListingNotFoundError", "MinVolumeError",
        }
