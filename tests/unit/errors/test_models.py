"""Tests for the error envelope models."""

import pytest
from httpx import Response

from df_client.errors import ApiErrorBody, ErrorCode, ResponseDecodeError


class TestErrorCode:
    @pytest.mark.unit
    def test_every_code_has_a_description(self):
        for code in ErrorCode:
            assert code.description

    @pytest.mark.unit
    def test_lookup_by_wire_value(self):
        assert ErrorCode("DNF980") is ErrorCode.DNF980
        assert ErrorCode.DNF980.description == "System under maintenance"

    @pytest.mark.unit
    def test_unknown_code_is_rejected(self):
        with pytest.raises(ValueError):
            ErrorCode("DNF002")


class TestApiErrorBody:
    @pytest.mark.unit
    def test_from_response(self):
        response = Response(
            status_code=400,
            json={"error": {"status": 400, "code": "API001", "message": "bad game id"}},
        )

        body = ApiErrorBody.from_response(response)

        assert body == ApiErrorBody(status=400, code=ErrorCode.API001, message="bad game id")

    @pytest.mark.unit
    def test_status_may_be_a_string(self):
        response = Response(
            status_code=404,
            json={"error": {"status": "404", "code": "DNF003", "message": "no item"}},
        )

        assert ApiErrorBody.from_response(response).status == 404

    @pytest.mark.unit
    def test_non_numeric_status_is_malformed(self):
        response = Response(
            status_code=404,
            json={"error": {"status": "oops", "code": "DNF003", "message": "no item"}},
        )

        with pytest.raises(ResponseDecodeError, match="malformed"):
            ApiErrorBody.from_response(response)

    @pytest.mark.unit
    def test_missing_keys_are_malformed(self):
        response = Response(status_code=500, json={"error": {"code": "API999"}})

        with pytest.raises(ResponseDecodeError, match="malformed"):
            ApiErrorBody.from_response(response)

    @pytest.mark.unit
    def test_unknown_code(self):
        response = Response(
            status_code=400,
            json={"error": {"status": 400, "code": "NEW001", "message": "?"}},
        )

        with pytest.raises(ResponseDecodeError, match="unknown error code 'NEW001'"):
            ApiErrorBody.from_response(response)

    @pytest.mark.unit
    def test_to_exception_message(self):
        body = ApiErrorBody(status=429, code=ErrorCode.API002, message="slow down")

        assert body.to_exception_message() == "API002 (API key quota exceeded): slow down"
