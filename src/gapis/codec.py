"""
Scalar conversions between the JSON wire form used by the Google REST APIs
and the native Python types carried on the resource dataclasses.

There are four kinds of converted scalar:
    timestamp   RFC 3339 string <-> aware datetime.datetime (UTC)
    bytes       standard base64 string <-> bytes
    int64       decimal string <-> int (JSON numbers lose precision past 2**53)
    duration    "3.5s" style string, passed through untouched

Everything here is a pure function.  Malformed wire values are not caught,
whatever the underlying parser raises (ValueError, binascii.Error) goes straight
back to the caller.
"""
import base64
import datetime
import re

_UTC = datetime.timezone.utc

# fromisoformat stops at microseconds, the APIs hand out nanoseconds
_FRACTION = re.compile(r"(\.\d{6})\d+")
_INT64 = re.compile(r"-?[0-9]+", re.ASCII)
# full date and time, a bare date or a space separator is not RFC 3339
_DATE_TIME = re.compile(r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}", re.ASCII)


def serialize_timestamp(value: datetime.datetime) -> str:
    """
    Render as RFC 3339 in UTC with a 'Z' marker.
    Naive datetimes are assumed to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=_UTC)
    else:
        value = value.astimezone(_UTC)
    timespec = "microseconds" if value.microsecond else "seconds"
    return value.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def deserialize_timestamp(value: str) -> datetime.datetime:
    """
    Parse an RFC 3339 date-time.  An explicit offset is honoured, no offset means UTC.
    Anything without a full date, a T and a full time raises ValueError.
    """
    text = _FRACTION.sub(r"\1", str(value))
    if not _DATE_TIME.match(text):
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_UTC)
    return dt


def serialize_bytes(value: bytes|bytearray|memoryview) -> str:
    return base64.b64encode(bytes(value)).decode("ascii")


def deserialize_bytes(value: str) -> bytes:
    """
    Strict standard-alphabet decode.  Missing '=' padding is tolerated,
    anything else that is not base64 (whitespace included) raises binascii.Error.
    """
    if isinstance(value, str) and len(value) % 4 in (2, 3) and not value.endswith("="):
        value = value + "=" * (4 - len(value) % 4)
    return base64.b64decode(value, validate=True)


def serialize_int64(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"int64 field expects an int, got {type(value).__name__}")
    return str(value)


def deserialize_int64(value: str|int) -> int:
    if isinstance(value, bool):
        raise TypeError("int64 field cannot be a bool")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise TypeError(f"int64 field expects a decimal string, got {type(value).__name__}")
    if not _INT64.fullmatch(value):
        raise ValueError(f"invalid int64 literal: {value!r}")
    return int(value)


def serialize_duration(value: str) -> str:
    return value


def deserialize_duration(value: str) -> str:
    return value
