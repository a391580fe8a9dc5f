"""Runtime assertions that report where they failed and what they saw."""

from __future__ import annotations

import inspect
import signal
import threading
import traceback
from dataclasses import dataclass

_TRACE_DEPTH = 10


class AssertionFailed(Exception):
    """Raised when a checked condition does not hold."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class _Settings:
    throw_exceptions: bool = True


_settings = _Settings()
_lock = threading.Lock()


def set_throw_exceptions(enabled):
    """Choose whether failures raise or stop in the debugger; return the old setting."""
    previous = _settings.throw_exceptions
    _settings.throw_exceptions = bool(enabled)
    return previous


def exceptions_enabled():
    """Return True when failed assertions raise AssertionFailed."""
    return _settings.throw_exceptions


def _stack_trace():
    frames = traceback.format_stack(limit=_TRACE_DEPTH)
    if not frames:
        return "No backtrace could be generated!"
    return "".join(frames)


def _trap():
    # Where the platform has no trap signal there is nothing to stop in.
    if hasattr(signal, "SIGTRAP"):
        signal.raise_signal(signal.SIGTRAP)


def fire(message, file, func, line, *args):
    """Report a failed assertion described by its location and extra values."""
    with _lock:
        text = f'[{file}:{line}]: Assertion "{message}" failed in function "{func}()"\n'
        params = ", ".join(str(arg) for arg in args)
        if params:
            text += f"Assertion parameters: {params}\n"
        text += "Stack trace: " + _stack_trace()

        if _settings.throw_exceptions:
            raise AssertionFailed(text)
        _trap()


def check(condition, message, *args):
    """Fire an assertion at the caller's location unless ``condition`` holds."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            file, func, line = "<unknown>", "<unknown>", 0
        else:
            file = caller.f_code.co_filename
            func = caller.f_code.co_name
            line = caller.f_lineno
    finally:
        del frame, caller
    fire(message, file, func, line, *args)