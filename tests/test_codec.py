import binascii
import datetime

import pytest

from gapis import codec

UTC = datetime.timezone.utc

def test_bytes_padding_lengths():
    for data in [b"", b"\x00", b"\x01\x02", b"\x01\x02\x03", b"\xff\xfe\xfd\xfc", b"abcde"]:
        text = codec.serialize_bytes(data)
        assert(len(text) % 4 == 0)
        assert(codec.deserialize_bytes(text) == data)

def test_bytes_known_values():
    assert(codec.serialize_bytes(bytes([1, 2, 3])) == "AQID")
    assert(codec.serialize_bytes(b"\x01") == "AQ==")
    assert(codec.serialize_bytes(bytearray(b"\x01\x02")) == "AQI=")
    assert(codec.deserialize_bytes("AQID") == b"\x01\x02\x03")
    assert(codec.serialize_bytes(b"") == "")
    assert(codec.deserialize_bytes("") == b"")

def test_bytes_unpadded():
    assert(codec.deserialize_bytes("AQ") == b"\x01")
    assert(codec.deserialize_bytes("AQI") == b"\x01\x02")

def test_bytes_malformed():
    for bad in ["AQ I", " AQID", "AQID\n", "A", "AQ*D", "-_-_"]:
        with pytest.raises(binascii.Error):
            codec.deserialize_bytes(bad)

def test_int64_large_values():
    for n in [0, 1, -1, 2**53 + 1, 9223372036854775807, -9223372036854775808]:
        assert(codec.deserialize_int64(codec.serialize_int64(n)) == n)
    assert(codec.serialize_int64(9223372036854775807) == "9223372036854775807")
    assert(codec.deserialize_int64("12345678901234567") == 12345678901234567)

def test_int64_accepts_json_numbers():
    assert(codec.deserialize_int64(42) == 42)

def test_int64_malformed():
    for bad in ["", " 1", "1 ", "+1", "1,000", "1.000", "1_000", "0x1f", "1e3", "12abc", "١٢"]:
        with pytest.raises(ValueError):
            codec.deserialize_int64(bad)
    with pytest.raises(TypeError):
        codec.deserialize_int64(1.5)
    with pytest.raises(TypeError):
        codec.deserialize_int64(True)
    with pytest.raises(TypeError):
        codec.serialize_int64("12")
    with pytest.raises(TypeError):
        codec.serialize_int64(False)

def test_timestamp_serialize():
    t = datetime.datetime(2023, 4, 5, 6, 7, 8, tzinfo=UTC)
    assert(codec.serialize_timestamp(t) == "2023-04-05T06:07:08Z")
    t = datetime.datetime(2023, 4, 5, 6, 7, 8, 120000, tzinfo=UTC)
    assert(codec.serialize_timestamp(t) == "2023-04-05T06:07:08.120000Z")

def test_timestamp_serialize_normalizes_to_utc():
    t = datetime.datetime(2023, 4, 5, 8, 7, 8, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
    assert(codec.serialize_timestamp(t) == "2023-04-05T06:07:08Z")
    # naive is taken as UTC
    assert(codec.serialize_timestamp(datetime.datetime(2023, 4, 5, 6, 7, 8)) == "2023-04-05T06:07:08Z")

def test_timestamp_deserialize():
    t = codec.deserialize_timestamp("2023-04-05T06:07:08Z")
    assert(t == datetime.datetime(2023, 4, 5, 6, 7, 8, tzinfo=UTC))
    assert(t.tzinfo is not None)
    t = codec.deserialize_timestamp("2023-04-05T08:07:08+02:00")
    assert(t == datetime.datetime(2023, 4, 5, 6, 7, 8, tzinfo=UTC))
    t = codec.deserialize_timestamp("2023-04-05T06:07:08")
    assert(t.utcoffset() == datetime.timedelta(0))

def test_timestamp_nanoseconds_truncate():
    t = codec.deserialize_timestamp("2014-10-02T15:01:23.045123456Z")
    assert(t == datetime.datetime(2014, 10, 2, 15, 1, 23, 45123, tzinfo=UTC))

def test_timestamp_round_trip():
    for text in ["2014-10-02T15:01:23Z", "2014-10-02T15:01:23.045123Z", "1970-01-01T00:00:00Z"]:
        assert(codec.serialize_timestamp(codec.deserialize_timestamp(text)) == text)
    t = datetime.datetime(2020, 2, 29, 23, 59, 59, 999999, tzinfo=UTC)
    assert(codec.deserialize_timestamp(codec.serialize_timestamp(t)) == t)

def test_timestamp_malformed():
    for bad in ["", "yesterday", "2023-13-01T00:00:00Z", "05/04/2023", "2023-01-01", "2023-01-01 10:00:00"]:
        with pytest.raises(ValueError):
            codec.deserialize_timestamp(bad)

def test_duration_passthrough():
    assert(codec.serialize_duration("3.5s") == "3.5s")
    assert(codec.deserialize_duration("600s") == "600s")
