from __future__ import annotations

from datetime import datetime, timedelta, timezone

from gomemo.utils.datetime_fmt import now_memo_timestamp, to_memo_timestamp


def test_naive_datetime_is_formatted_as_is() -> None:
    assert to_memo_timestamp(datetime(2024, 2, 29, 23, 5, 1)) == "2024-02-29-23:05:01"


def test_aware_datetime_is_converted_to_local_time() -> None:
    aware = datetime(2024, 2, 29, 23, 5, 1, tzinfo=timezone(timedelta(hours=9)))
    expected = aware.astimezone().strftime("%Y-%m-%d-%H:%M:%S")
    assert to_memo_timestamp(aware) == expected


def test_now_has_fixed_width_format() -> None:
    stamp = now_memo_timestamp()
    assert len(stamp) == len("YYYY-MM-DD-HH:MM:SS")
    assert stamp[4] == stamp[7] == stamp[10] == "-"
    assert stamp[13] == stamp[16] == ":"
