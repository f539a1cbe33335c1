from __future__ import annotations

from datetime import date, datetime, timezone

from dtracker.inventory.field_normalizer import (
    format_instant,
    generate_id,
    is_falsy,
    normalize_enum,
    parse_instant,
    safe_date,
    to_text,
)


def test_normalize_enum_title_cases_labels():
    assert normalize_enum("BREAKDOWN", "Available") == "Breakdown"
    assert normalize_enum("  maintenance ", "Available") == "Maintenance"
    assert normalize_enum("laptop", "Other") == "Laptop"
    assert normalize_enum("ANDT", "Other") == "Andt"


def test_normalize_enum_falls_back_on_empty_values():
    for value in (None, "", "   ", 0, False):
        assert normalize_enum(value, "Available") == "Available"


def test_normalize_enum_passes_unknown_labels_through():
    assert normalize_enum("foobar", "Available") == "Foobar"
    assert normalize_enum(5, "Other") == "5"


def test_safe_date_date_only_is_utc_midnight():
    assert safe_date("2024-01-01") == "2024-01-01T00:00:00.000Z"


def test_safe_date_normalizes_offsets_and_formats():
    assert safe_date("2024-03-05T10:30:00+02:00") == "2024-03-05T08:30:00.000Z"
    assert safe_date("2024/03/05") == "2024-03-05T00:00:00.000Z"
    assert safe_date("03/05/2024") == "2024-03-05T00:00:00.000Z"
    assert safe_date("Mar 5, 2024") == "2024-03-05T00:00:00.000Z"
    assert safe_date(date(2024, 3, 5)) == "2024-03-05T00:00:00.000Z"


def test_safe_date_numbers_are_epoch_milliseconds():
    assert safe_date(86_400_000) == "1970-01-02T00:00:00.000Z"


def test_safe_date_rejects_garbage_without_raising():
    for value in ("not a date", "2024-13-45", float("nan"), float("inf"), 1e300, [], {}, object(), True, None, ""):
        assert safe_date(value) == ""


def test_safe_date_round_trips():
    samples = ["2024-01-01", "2023-07-15T23:59:59.123456+05:30", "Jan 31, 2024", 1_700_000_000_123]
    for sample in samples:
        rendered = safe_date(sample)
        assert rendered
        assert safe_date(rendered) == rendered
        assert parse_instant(rendered) == parse_instant(sample).replace(
            microsecond=parse_instant(sample).microsecond // 1000 * 1000
        )


def test_format_instant_pads_fields():
    instant = datetime(987, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)
    assert format_instant(instant) == "0987-01-02T03:04:05.006Z"


def test_is_falsy_and_to_text_follow_json_semantics():
    assert is_falsy(0) and is_falsy(float("nan")) and is_falsy("")
    assert not is_falsy([]) and not is_falsy("0") and not is_falsy(True)
    assert to_text(42) == "42"
    assert to_text(42.0) == "42"
    assert to_text(4.5) == "4.5"
    assert to_text(True) == "true"
    assert to_text(None) == ""


def test_generate_id_is_short_and_varied():
    ids = {generate_id() for _ in range(200)}
    assert len(ids) == 200
    assert all(len(value) == 9 and value.isalnum() for value in ids)
