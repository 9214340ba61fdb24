"""Tests for the callback helpers."""
from __future__ import annotations

import pytest

from tallykit import CapturedResult, InvalidInput, combine_then_callback, combine_with_callback


def test_combine_with_callback_invokes_once():
    calls = []
    assert combine_with_callback(10, 20, calls.append) is None
    assert calls == [30]


def test_combine_then_callback_invokes_once_with_sum():
    calls = []
    combine_then_callback(10, 20, calls.append)
    assert calls == [30]


def test_captured_result_reports_on_every_call():
    captured = combine_then_callback(10, 20, lambda _: None)
    assert captured() == 30
    assert captured() == 30
    assert captured.report() == 30
    assert captured.value == 30


def test_captured_result_is_immutable():
    captured = CapturedResult(5)
    with pytest.raises(AttributeError):
        captured.value = 6  # type: ignore[misc]


def test_callback_not_invoked_on_invalid_input():
    calls = []
    with pytest.raises(InvalidInput):
        combine_then_callback(10, "twenty", calls.append)
    assert calls == []


def test_callback_errors_propagate():
    def boom(_):
        raise RuntimeError("callback failed")

    with pytest.raises(RuntimeError, match="callback failed"):
        combine_then_callback(1, 2, boom)


def test_non_callable_callback_rejected():
    with pytest.raises(TypeError):
        combine_then_callback(1, 2, 3)  # type: ignore[arg-type]
