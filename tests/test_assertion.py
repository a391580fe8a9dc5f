from unittest import mock

import pytest

from nseof.assertion import (
    AssertionFailed,
    check,
    exceptions_enabled,
    fire,
    set_throw_exceptions,
)


@pytest.fixture(autouse=True)
def restore_setting():
    previous = exceptions_enabled()
    yield
    set_throw_exceptions(previous)


def test_fire_message_names_location_and_function():
    with pytest.raises(AssertionFailed) as info:
        fire("x > 0", "solver.py", "update", 12)
    text = str(info.value)
    assert text.startswith('[solver.py:12]: Assertion "x > 0" failed in function "update()"\n')
    assert "Assertion parameters" not in text
    assert "Stack trace: " in text


def test_fire_lists_parameters():
    with pytest.raises(AssertionFailed) as info:
        fire("a == b", "f.py", "g", 3, 1, "two", 3.5)
    assert "Assertion parameters: 1, two, 3.5\n" in info.value.message


def test_exception_message_attribute_matches_str():
    with pytest.raises(AssertionFailed) as info:
        fire("cond", "f.py", "g", 1)
    assert info.value.message == str(info.value)


def test_check_uses_caller_location():
    with pytest.raises(AssertionFailed) as info:
        check(1 > 2, "1 > 2", 7)
    text = info.value.message
    assert 'failed in function "test_check_uses_caller_location()"' in text
    assert __file__ in text
    assert "Assertion parameters: 7" in text


def test_check_true_returns_none():
    assert check(True, "always") is None


def test_set_throw_exceptions_returns_previous():
    assert set_throw_exceptions(False) is True
    assert exceptions_enabled() is False
    assert set_throw_exceptions(True) is False
    assert exceptions_enabled() is True


def test_disabled_exceptions_stop_in_debugger():
    set_throw_exceptions(False)
    with mock.patch("signal.raise_signal") as raise_hook, mock.patch("pdb.set_trace") as pdb_hook:
        result = fire("cond", "f.py", "g", 1)
    assert result is None
    assert raise_hook.call_count + pdb_hook.call_count == 1