"""Tests for decoding backend JSON payloads."""

import json

import pytest

from src.domain.exceptions import BackendError, DecodeError
from src.domain.models.accounts import AccountRecord
from src.infrastructure.decoding import (
    decode_account,
    decode_account_list,
    decode_report,
    raise_for_error,
)


TABULATION_JSON = """
{
  "ReportId": 3,
  "Title": "Monthly Expenses",
  "Subtitle": "2017",
  "Units": "USD",
  "Labels": ["Jan", "Feb"],
  "Series": {
    "Food": {
      "Values": [10, 12.5],
      "Series": {
        "Groceries": {"Values": [8, 9], "Series": null},
        "Restaurants": {"Values": [2, 3.5], "Series": {}}
      }
    },
    "Rent": {"Values": [900, 900]}
  }
}
"""


def test_decode_account_list_maps_root_sentinel() -> None:
    """ParentAccountId -1 and null both denote roots."""
    payload = json.dumps(
        {
            "accounts": [
                {"AccountId": 1, "ParentAccountId": -1, "Name": "Assets",
                 "Type": 1, "SecurityId": 1},
                {"AccountId": 2, "ParentAccountId": 1, "Name": "Checking"},
                {"AccountId": 3, "ParentAccountId": None, "Name": "Income"},
            ]
        }
    )

    assert decode_account_list(payload) == [
        AccountRecord(1, None, "Assets"),
        AccountRecord(2, 1, "Checking"),
        AccountRecord(3, None, "Income"),
    ]


def test_decode_account_list_accepts_bytes_and_empty_list() -> None:
    """A null account list decodes to no records."""
    assert decode_account_list(b'{"accounts": null}') == []


@pytest.mark.parametrize(
    "account",
    [
        {"ParentAccountId": -1, "Name": "Assets"},
        {"AccountId": "1", "ParentAccountId": -1, "Name": "Assets"},
        {"AccountId": True, "ParentAccountId": -1, "Name": "Assets"},
        {"AccountId": 1, "ParentAccountId": 1.5, "Name": "Assets"},
        {"AccountId": 1, "ParentAccountId": -1},
        ["AccountId", 1],
    ],
)
def test_decode_account_rejects_malformed_records(account) -> None:
    """Missing or ill-typed fields should be rejected."""
    with pytest.raises(DecodeError):
        decode_account(account)


def test_decode_account_list_rejects_invalid_json() -> None:
    """Unparseable text should raise DecodeError."""
    with pytest.raises(DecodeError, match="invalid JSON"):
        decode_account_list("{not json")


def test_decode_account_list_raises_backend_errors() -> None:
    """Error objects from the backend should surface as BackendError."""
    with pytest.raises(BackendError) as excinfo:
        decode_account_list('{"ErrorId": 1, "ErrorString": "Not Signed In"}')

    assert excinfo.value.error_id == 1
    assert excinfo.value.error_string == "Not Signed In"


def test_raise_for_error_ignores_empty_error_objects() -> None:
    """A zero ErrorId with no message is not an error."""
    raise_for_error({"ErrorId": 0, "ErrorString": ""})
    raise_for_error({"accounts": []})


def test_request_failed_error() -> None:
    """Client-side request failures use error id 5."""
    error = BackendError.request_failed("timeout")

    assert error.error_id == 5
    assert error.error_string == "Request Failed: timeout"


def test_decode_report_builds_series_tree_in_payload_order() -> None:
    """Series should nest and keep sibling order from the payload."""
    report = decode_report(TABULATION_JSON, top_level_account_name="Expenses")

    assert report.report_id == 3
    assert report.title == "Monthly Expenses"
    assert report.subtitle == "2017"
    assert report.units == "USD"
    assert report.labels == ("Jan", "Feb")
    assert report.top_level_account_name == "Expenses"
    assert report.children_of(()) == ("Food", "Rent")
    assert report.children_of(("Food",)) == ("Groceries", "Restaurants")
    assert report.series_at(("Food", "Restaurants")).values == (2.0, 3.5)


def test_decode_report_top_level_name_defaults() -> None:
    """The top-level name comes from the payload, else from the title."""
    tabulation = json.loads(TABULATION_JSON)

    assert decode_report(tabulation).top_level_account_name == (
        "Monthly Expenses"
    )
    tabulation["topLevelAccountName"] = "Expenses"
    assert decode_report(tabulation).top_level_account_name == "Expenses"


def test_decode_report_rejects_duplicate_siblings() -> None:
    """Duplicate series names under one parent are malformed."""
    payload = (
        '{"ReportId": 1, "Title": "T", "Series": '
        '{"Food": {"Values": []}, "Food": {"Values": []}}}'
    )

    with pytest.raises(DecodeError, match="duplicate key 'Food'"):
        decode_report(payload)


@pytest.mark.parametrize(
    "tabulation",
    [
        {"Title": "T"},
        {"ReportId": 1},
        {"ReportId": 1, "Title": "T", "Labels": [1, 2]},
        {"ReportId": 1, "Title": "T", "Series": []},
        {"ReportId": 1, "Title": "T", "Series": {"Food": {"Values": ["x"]}}},
        {"ReportId": 1, "Title": "T", "Units": 5},
    ],
)
def test_decode_report_rejects_malformed_tabulations(tabulation) -> None:
    """Ill-typed tabulation fields should be rejected."""
    with pytest.raises(DecodeError):
        decode_report(tabulation)


def test_decode_account_list_rejects_invalid_utf8() -> None:
    """Undecodable bytes should raise DecodeError, not UnicodeDecodeError."""
    with pytest.raises(DecodeError, match="invalid UTF-8"):
        decode_account_list(b'{"accounts": [{"Name": "\xff"}]}')


@pytest.mark.parametrize(
    "error_object",
    [
        '{"ErrorId": "oops", "ErrorString": "x"}',
        '{"ErrorId": true, "ErrorString": "x"}',
        '{"ErrorId": 3, "ErrorString": 7}',
    ],
)
def test_decode_account_list_rejects_malformed_error_objects(
    error_object,
) -> None:
    """Ill-typed error fields are malformed payloads, not crashes."""
    with pytest.raises(DecodeError) as excinfo:
        decode_account_list(error_object)

    assert excinfo.value.payload_kind == "error"
