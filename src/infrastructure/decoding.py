"""Decode backend JSON payloads into typed domain records.

Malformed payloads are rejected here, before they reach the account tree
builder or the report navigator. Payloads may be passed as raw JSON text
or as already-parsed objects.
"""

import json
from collections.abc import Mapping
from typing import Any

from src.domain.exceptions import BackendError, DecodeError
from src.domain.models.accounts import AccountRecord
from src.domain.models.reports import Report, Series


NO_PARENT_ACCOUNT_ID = -1


def raise_for_error(obj: Any) -> None:
    """Raise BackendError when ``obj`` is a backend error object.

    Raises:
        BackendError: If the object carries a non-zero ErrorId or a
            non-empty ErrorString.
    """
    if not isinstance(obj, Mapping) or "ErrorId" not in obj:
        return
    error_id = obj.get("ErrorId")
    if error_id is None:
        error_id = 0
    elif isinstance(error_id, bool) or not isinstance(error_id, int):
        raise DecodeError("error", "ErrorId must be an integer")
    error_string = obj.get("ErrorString")
    if error_string is None:
        error_string = ""
    elif not isinstance(error_string, str):
        raise DecodeError("error", "ErrorString must be a string")
    if error_id != 0 or error_string:
        raise BackendError(error_id, error_string)


def decode_account(obj: Any) -> AccountRecord:
    """Decode a single account object.

    The backend marks root accounts with ParentAccountId -1; null is
    accepted as well.
    """
    fields = _require_mapping(obj, "account")
    account_id = _require_int(fields, "AccountId", "account")
    raw_parent = fields.get("ParentAccountId")
    if raw_parent is None:
        parent_id = None
    else:
        parent_id = _require_int(fields, "ParentAccountId", "account")
        if parent_id == NO_PARENT_ACCOUNT_ID:
            parent_id = None
    return AccountRecord(
        account_id=account_id,
        parent_account_id=parent_id,
        name=_require_str(fields, "Name", "account"),
    )


def decode_account_list(payload: Any) -> list[AccountRecord]:
    """Decode an account-list response ``{"accounts": [...]}``.

    Returns:
        list[AccountRecord]: Records in response order.

    Raises:
        BackendError: If the response is an error object.
        DecodeError: If the response is malformed.
    """
    obj = _load(payload, "account list")
    raise_for_error(obj)
    fields = _require_mapping(obj, "account list")
    accounts = fields.get("accounts")
    if accounts is None:
        return []
    if not isinstance(accounts, list):
        raise DecodeError("account list", "accounts must be a list")
    return [decode_account(account) for account in accounts]


def decode_report(
    payload: Any,
    top_level_account_name: str | None = None,
) -> Report:
    """Decode a report tabulation.

    Args:
        payload: Tabulation with ReportId, Title, Subtitle, Units, Labels and
            a Series object mapping names to ``{Values, Series}``.
        top_level_account_name: Name of the top-level series. Defaults to
            the payload's topLevelAccountName, then to its Title.

    Returns:
        Report: Report whose sibling series keep payload order.

    Raises:
        BackendError: If the response is an error object.
        DecodeError: If the tabulation is malformed.
    """
    obj = _load(payload, "report")
    raise_for_error(obj)
    fields = _require_mapping(obj, "report")

    report_id = fields.get("ReportId")
    if isinstance(report_id, bool) or not isinstance(report_id, (int, str)):
        raise DecodeError("report", "ReportId must be an integer or string")
    title = _require_str(fields, "Title", "report")
    labels = fields.get("Labels") or []
    if not isinstance(labels, list) or not all(
        isinstance(label, str) for label in labels
    ):
        raise DecodeError("report", "Labels must be a list of strings")

    top_level = (
        top_level_account_name
        or fields.get("topLevelAccountName")
        or title
    )
    if not isinstance(top_level, str):
        raise DecodeError("report", "topLevelAccountName must be a string")

    return Report(
        report_id=report_id,
        title=title,
        top_level_account_name=top_level,
        series=_decode_series_map(fields.get("Series")),
        subtitle=_optional_str(fields, "Subtitle"),
        units=_optional_str(fields, "Units"),
        labels=tuple(labels),
    )


def _decode_series_map(raw: Any) -> tuple[Series, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, Mapping):
        raise DecodeError("report", "Series must be an object")
    # Sibling order follows JSON object order.
    return tuple(_decode_series(name, body) for name, body in raw.items())


def _decode_series(name: str, body: Any) -> Series:
    fields = _require_mapping(body, "report")
    values = fields.get("Values") or []
    if not isinstance(values, list) or not all(
        _is_number(value) for value in values
    ):
        raise DecodeError("report", f"Values of series {name!r} must be numbers")
    return Series(
        name=name,
        values=tuple(float(value) for value in values),
        children=_decode_series_map(fields.get("Series")),
    )


def _load(payload: Any, kind: str) -> Any:
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(kind, "invalid UTF-8") from exc
    if not isinstance(payload, str):
        return payload
    try:
        return json.loads(
            payload,
            object_pairs_hook=lambda pairs: _reject_duplicate_keys(
                pairs,
                kind,
            ),
        )
    except json.JSONDecodeError as exc:
        raise DecodeError(kind, f"invalid JSON: {exc.msg}") from exc


def _reject_duplicate_keys(
    pairs: list[tuple[str, Any]],
    kind: str,
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DecodeError(kind, f"duplicate key {key!r}")
        result[key] = value
    return result


def _require_mapping(obj: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise DecodeError(kind, f"expected an object, got {type(obj).__name__}")
    return obj


def _require_int(fields: Mapping[str, Any], key: str, kind: str) -> int:
    value = fields.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(kind, f"{key} must be an integer")
    return value


def _require_str(fields: Mapping[str, Any], key: str, kind: str) -> str:
    value = fields.get(key)
    if not isinstance(value, str):
        raise DecodeError(kind, f"{key} must be a string")
    return value


def _optional_str(fields: Mapping[str, Any], key: str) -> str:
    value = fields.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError("report", f"{key} must be a string")
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = [
    "NO_PARENT_ACCOUNT_ID",
    "decode_account",
    "decode_account_list",
    "decode_report",
    "raise_for_error",
]
