import pytest

from vietmap.exceptions import (
    AuthenticationError,
    InvalidUnitError,
    NetworkError,
    ParseError,
    PolylineDecodeError,
    RateLimitError,
    ServerError,
    ValidationError,
    VietmapApiError,
)


@pytest.mark.parametrize(
    ("error", "code", "status_code"),
    [
        (ValidationError(), "VALIDATION_ERROR", 400),
        (AuthenticationError(), "AUTHENTICATION_ERROR", 401),
        (AuthenticationError(status_code=403), "AUTHENTICATION_ERROR", 403),
        (RateLimitError(), "RATE_LIMIT_ERROR", 429),
        (ServerError(), "SERVER_ERROR", 500),
        (NetworkError("offline"), "NETWORK_ERROR", None),
        (ParseError(), "PARSE_ERROR", None),
        (PolylineDecodeError("bad"), "POLYLINE_DECODE_ERROR", None),
        (InvalidUnitError("bad unit"), "INVALID_UNIT", None),
    ],
)
def test_error_codes_and_statuses(
    error: VietmapApiError,
    code: str,
    status_code: int | None,
) -> None:
    assert isinstance(error, VietmapApiError)
    assert error.code == code
    assert error.status_code == status_code


def test_base_error_carries_message_and_details() -> None:
    error = VietmapApiError("boom", {"url": "http://test"})

    assert str(error) == "boom"
    assert error.message == "boom"
    assert error.details == {"url": "http://test"}
    assert VietmapApiError("boom").details == {}


def test_error_specific_attributes() -> None:
    validation = ValidationError("bad focus", field="focus", value="x")
    rate_limited = RateLimitError(retry_after=12)
    parse = ParseError(response_data=[1, 2])

    assert (validation.field, validation.value) == ("focus", "x")
    assert rate_limited.retry_after == 12
    assert parse.response_data == [1, 2]


def test_invalid_unit_is_value_error() -> None:
    with pytest.raises(ValueError):
        raise InvalidUnitError("furlongs units is invalid")
