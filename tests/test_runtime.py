"""Tests for the runtime used by generated Python bridges."""

import logging
import threading

import pytest

from jnibridge import runtime
from jnibridge.errors import BoundaryCallError


@pytest.fixture
def counting_initializer():
    calls = []

    def initializer():
        calls.append(threading.current_thread().name)

    runtime.add_platform_initializer(initializer)
    yield calls
    runtime._initializers.remove(initializer)


def run_in_thread(target, name):
    thread = threading.Thread(target=target, name=name)
    thread.start()
    thread.join()


def test_init_platform_runs_once_per_thread(counting_initializer):
    def enter_twice():
        runtime.init_platform()
        runtime.init_platform()

    run_in_thread(enter_twice, "worker-1")
    run_in_thread(enter_twice, "worker-2")

    assert counting_initializer == ["worker-1", "worker-2"]


def test_returns_block_value():
    assert runtime.run_with_exception_conversion(None, -1, lambda: 42) == 42


def test_contains_error_and_returns_default(caplog):
    def block():
        raise RuntimeError("disk I/O error")

    with caplog.at_level(logging.ERROR, logger="jnibridge.runtime"):
        assert runtime.run_with_exception_conversion(None, -1, block) == -1

    record = caplog.records[-1]
    assert "RuntimeError: disk I/O error" in record.getMessage()
    assert record.exc_info is not None


def test_sentinel_result_is_indistinguishable_from_contained_error():
    assert runtime.run_with_exception_conversion(None, -1, lambda: -1) == -1


def test_boundary_call_error_keeps_cause():
    cause = KeyError("stmt")
    error = BoundaryCallError(cause)
    assert error.cause is cause
    assert str(error) == "KeyError: 'stmt'"
