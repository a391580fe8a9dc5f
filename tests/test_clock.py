import time

from nseof.clock import Clock


def test_format_hms_zero():
    assert Clock.format_hms(0) == "00:00:00"


def test_format_hms_mixed():
    assert Clock.format_hms((3600 + 60 + 1) * 1_000_000_000) == "01:01:01"


def test_format_hms_drops_fraction_of_second():
    whole = Clock.format_hms(5 * 1_000_000_000)
    assert Clock.format_hms(5 * 1_000_000_000 + 999_999_999) == whole


def test_format_hms_shape_for_long_runs():
    text = Clock.format_hms(123 * 3600 * 1_000_000_000)
    hours, minutes, seconds = text.split(":")
    assert int(hours) == 123
    assert minutes == seconds == "00"


def test_elapsed_is_monotonic():
    clock = Clock()
    first = clock.elapsed_ns()
    second = clock.elapsed_ns()
    assert 0 <= first <= second


def test_sleep_waits_at_least_requested():
    clock = Clock()
    Clock.sleep(20)
    assert clock.elapsed_ns() >= 20 * 1_000_000


def test_date_is_ctime_without_newline():
    text = Clock().date()
    assert "\n" not in text
    parsed = time.strptime(text, "%a %b %d %H:%M:%S %Y")
    assert parsed.tm_year == time.localtime().tm_year