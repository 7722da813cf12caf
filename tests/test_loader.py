from __future__ import annotations

import json

import pytest

from loader import (
    InvalidExtension,
    MalformedDocument,
    MissingScheduleField,
    ScheduleItemKind,
    ScheduleLoader,
    Weekday,
    load,
    load_path,
)


def test_load_returns_typed_schedule(teaching_monday) -> None:
    schedule = load(json.dumps(teaching_monday).encode(), "fall.cccsched")

    items = schedule.items_for(Weekday.MONDAY)
    assert len(items) == 1
    item = items[0]
    assert item.kind is ScheduleItemKind.TEACHING
    assert item.start_time == "09:00"
    assert item.end_time == "10:30"
    assert item.class_name == "CS101"
    assert item.description is None
    assert schedule.items_for(Weekday.TUESDAY) == []


def test_wrong_extension_rejected_before_parsing() -> None:
    with pytest.raises(InvalidExtension):
        load(b"not even json", "schedule.json")


def test_extension_is_case_sensitive() -> None:
    with pytest.raises(InvalidExtension):
        load(b'{"schedule": {}}', "fall.CCCSCHED")


def test_load_path_checks_extension_before_reading(tmp_path) -> None:
    missing = tmp_path / "does-not-exist.txt"
    with pytest.raises(InvalidExtension):
        load_path(missing)


def test_load_path_reads_file(write_schedule, teaching_monday) -> None:
    path = write_schedule(teaching_monday)
    schedule = load_path(path)
    assert len(schedule) == 1


def test_syntax_error_is_malformed() -> None:
    with pytest.raises(MalformedDocument):
        load(b'{"schedule": {', "fall.cccsched")


def test_undecodable_bytes_are_malformed() -> None:
    with pytest.raises(MalformedDocument):
        load(b"\xff\xfe\x00{", "fall.cccsched")


def test_byte_order_mark_is_tolerated() -> None:
    schedule = load(b"\xef\xbb\xbf" + b'{"schedule": {"friday": []}}', "fall.cccsched")
    assert schedule.is_empty


@pytest.mark.parametrize(
    "content",
    [
        b"{}",
        b'{"schedule": null}',
        b'{"schedule": false}',
        b'{"schedule": 0}',
        b'{"schedule": 0.0}',
        b'{"schedule": ""}',
        b"[]",
        b"null",
        b'{"Schedule": {}}',
    ],
)
def test_missing_schedule_field(content: bytes) -> None:
    with pytest.raises(MissingScheduleField):
        load(content, "fall.cccsched")


def test_malformed_days_become_empty() -> None:
    content = json.dumps(
        {
            "schedule": {
                "monday": "not a list",
                "tuesday": [None, 7, "x", {"type": "campus", "startTime": "8:00", "endTime": "9:00"}],
                "Wednesday": [{"type": "teaching", "startTime": "8:00", "endTime": "9:00"}],
            }
        }
    ).encode()

    schedule = load(content, "fall.cccsched")

    assert schedule.items_for(Weekday.MONDAY) == []
    assert [item.kind for item in schedule.items_for(Weekday.TUESDAY)] == [ScheduleItemKind.CAMPUS]
    # Day keys are matched in lowercase only.
    assert schedule.items_for(Weekday.WEDNESDAY) == []


@pytest.mark.parametrize(
    "content",
    [b'{"schedule": {}}', b'{"schedule": []}', b'{"schedule": ["monday"]}', b'{"schedule": 1}'],
)
def test_empty_or_non_object_schedule_loads_as_empty(content: bytes) -> None:
    schedule = load(content, "fall.cccsched")
    assert schedule.is_empty
    assert len(schedule) == 0


def test_items_are_not_validated_at_load_time() -> None:
    content = json.dumps(
        {"schedule": {"monday": [{"type": "lunch", "startTime": 900}]}}
    ).encode()

    schedule = load(content, "fall.cccsched")

    item = schedule.items_for(Weekday.MONDAY)[0]
    assert item.kind is ScheduleItemKind.UNKNOWN
    assert item.start_time == 900
    assert not item.is_materializable


def test_errors_carry_user_messages() -> None:
    with pytest.raises(InvalidExtension) as excinfo:
        ScheduleLoader().load(b"", "notes.txt")
    assert excinfo.value.user_message == "Please select a valid .cccsched file."

    with pytest.raises(MissingScheduleField) as excinfo:
        ScheduleLoader().load(b"{}", "fall.cccsched")
    assert ".cccsched" in excinfo.value.user_message
