import queue
import threading
from concurrent.futures import CancelledError, ThreadPoolExecutor

import pytest

from algokit.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerOpenError,
    Config,
    Metrics,
    State,
    TooManyRequestsError,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Operation:
    def __init__(self, should_fail: bool = False) -> None:
        self.should_fail = should_fail
        self.call_count = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            self.call_count += 1
        if self.should_fail:
            raise RuntimeError("operation failed")
        return "success"


def trip_after(count: int):
    return lambda m: m.consecutive_failures >= count


def never_trip(metrics):
    return False


def run_failures(cb: CircuitBreaker, op: Operation, times: int) -> None:
    for _ in range(times):
        with pytest.raises((RuntimeError, CircuitBreakerOpenError)):
            cb.call(op)


def make_breaker(max_requests=2, timeout=0.05, trip=2, **kwargs):
    clock = FakeClock()
    config = Config(
        max_requests=max_requests,
        timeout=timeout,
        ready_to_trip=trip_after(trip),
        **kwargs,
    )
    return CircuitBreaker(config, clock=clock), clock


def tripped(trip=2, **kwargs):
    cb, clock = make_breaker(trip=trip, **kwargs)
    run_failures(cb, Operation(should_fail=True), trip)
    assert cb.state is State.OPEN
    return cb, clock


def test_new_breaker_starts_closed_with_zero_metrics():
    cb = CircuitBreaker(Config(max_requests=3, interval=60, timeout=30))
    assert cb.state is State.CLOSED
    assert cb.metrics == Metrics()


def test_default_config_trips_after_five_failures():
    cb = CircuitBreaker(Config(), clock=FakeClock())
    op = Operation(should_fail=True)
    run_failures(cb, op, 4)
    assert cb.state is State.CLOSED
    run_failures(cb, op, 1)
    assert cb.state is State.OPEN


def test_zero_config_values_select_defaults():
    config = Config(max_requests=0, interval=0, timeout=0)
    assert (config.max_requests, config.interval, config.timeout) == (1, 60.0, 30.0)


def test_negative_config_values_rejected():
    with pytest.raises(ValueError):
        Config(timeout=-1)


@pytest.mark.parametrize(
    "state, text",
    [(State.CLOSED, "Closed"), (State.OPEN, "Open"), (State.HALF_OPEN, "Half-Open")],
)
def test_state_string_forms(state, text):
    assert str(state) == text


def test_successful_operations():
    cb, _ = make_breaker(max_requests=3, timeout=0.1, trip=3)
    op = Operation()
    assert [cb.call(op) for _ in range(5)] == ["success"] * 5
    assert cb.state is State.CLOSED
    metrics = cb.metrics
    assert (metrics.requests, metrics.successes, metrics.failures) == (5, 5, 0)


def test_circuit_opens_after_consecutive_failures():
    cb, _ = make_breaker(max_requests=3, timeout=0.1, trip=3)
    op = Operation(should_fail=True)
    for _ in range(3):
        with pytest.raises(RuntimeError, match="operation failed"):
            cb.call(op)
    assert cb.state is State.OPEN
    assert cb.metrics.consecutive_failures >= 3


def test_fast_fail_when_open_does_not_call_operation():
    cb, _ = tripped(max_requests=3, timeout=0.2)
    op = Operation()
    with pytest.raises(CircuitBreakerOpenError, match="circuit breaker is open"):
        cb.call(op)
    assert op.call_count == 0


def test_still_open_before_timeout():
    cb, clock = tripped()
    clock.advance(0.04)
    with pytest.raises(CircuitBreakerOpenError):
        cb.call(Operation())
    assert cb.state is State.OPEN


def test_half_open_success_closes_circuit_and_resets_metrics():
    cb, clock = tripped()
    clock.advance(0.06)
    assert cb.call(Operation()) == "success"
    assert cb.state is State.CLOSED
    assert cb.metrics == Metrics()


def test_half_open_failure_reopens_circuit():
    cb, clock = tripped()
    clock.advance(0.06)
    with pytest.raises(RuntimeError):
        cb.call(Operation(should_fail=True))
    assert cb.state is State.OPEN


def test_max_requests_in_half_open():
    cb, clock = tripped(max_requests=2)
    clock.advance(0.06)

    gate = threading.Event()
    outcomes: queue.Queue[str] = queue.Queue()

    def blocking_operation() -> str:
        outcomes.put("admitted")
        gate.wait(5)
        raise RuntimeError("operation failed")

    def worker() -> None:
        try:
            cb.call(blocking_operation)
        except TooManyRequestsError:
            outcomes.put("rejected")
        except RuntimeError:
            pass

    seen = []
    with ThreadPoolExecutor(max_workers=5) as pool:
        for _ in range(5):
            pool.submit(worker)
            seen.append(outcomes.get(timeout=5))
        gate.set()

    assert seen == ["admitted", "admitted", "admitted", "rejected", "rejected"]
    assert cb.state is State.OPEN


def test_concurrent_access_keeps_metrics_consistent():
    cb = CircuitBreaker(
        Config(max_requests=10, timeout=0.1, ready_to_trip=trip_after(5))
    )

    def worker(index: int) -> None:
        op = Operation(should_fail=index % 2 == 0)
        for _ in range(10):
            try:
                cb.call(op)
            except (RuntimeError, CircuitBreakerOpenError, TooManyRequestsError):
                pass

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(worker, range(100)))

    metrics = cb.metrics
    assert metrics.requests == metrics.successes + metrics.failures


def test_state_change_callback():
    changes = []
    cb, clock = tripped(
        on_state_change=lambda name, old, new: changes.append((name, f"{old}->{new}"))
    )
    clock.advance(0.06)
    cb.call(Operation())
    assert changes == [
        ("circuit-breaker", "Closed->Open"),
        ("circuit-breaker", "Open->Half-Open"),
        ("circuit-breaker", "Half-Open->Closed"),
    ]


def test_cancelled_call_is_refused():
    cb = CircuitBreaker(Config(ready_to_trip=never_trip))
    cancel = threading.Event()
    cancel.set()
    op = Operation()
    with pytest.raises(CancelledError):
        cb.call(op, cancel)
    assert op.call_count == 0


def test_uncancelled_event_allows_call():
    cb = CircuitBreaker(Config(ready_to_trip=never_trip))
    assert cb.call(Operation(), threading.Event()) == "success"


def test_metrics_accuracy():
    clock = FakeClock()
    cb = CircuitBreaker(Config(ready_to_trip=never_trip), clock=clock)
    success = Operation()
    for _ in range(5):
        cb.call(success)
    run_failures(cb, Operation(should_fail=True), 3)

    metrics = cb.metrics
    assert (metrics.requests, metrics.successes, metrics.failures) == (8, 5, 3)
    assert metrics.consecutive_failures == 3
    assert metrics.last_failure_time == clock.now


def test_metrics_reset_after_interval_on_success():
    clock = FakeClock()
    cb = CircuitBreaker(Config(interval=10, ready_to_trip=never_trip), clock=clock)
    cb.call(Operation())
    assert cb.metrics.requests == 1
    clock.advance(11)
    cb.call(Operation())
    assert cb.metrics == Metrics()


def test_metrics_snapshot_is_a_copy():
    cb = CircuitBreaker(Config(ready_to_trip=never_trip))
    cb.call(Operation())
    snapshot = cb.metrics
    snapshot.requests = 99
    assert cb.metrics.requests == 1