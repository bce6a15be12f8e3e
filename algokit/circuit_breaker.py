"""A circuit breaker that stops calling an operation that keeps failing."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from concurrent.futures import CancelledError
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeVar

T = TypeVar("T")

_DEFAULT_MAX_REQUESTS = 1
_DEFAULT_INTERVAL = 60.0
_DEFAULT_TIMEOUT = 30.0


class State(Enum):
    """The state a circuit breaker is in."""

    CLOSED = "Closed"
    OPEN = "Open"
    HALF_OPEN = "Half-Open"

    def __str__(self) -> str:
        return self.value


@dataclass
class Metrics:
    """Counters the breaker keeps about the calls it let through."""

    requests: int = 0
    successes: int = 0
    failures: int = 0
    consecutive_failures: int = 0
    last_failure_time: float | None = None


def _default_ready_to_trip(metrics: Metrics) -> bool:
    return metrics.consecutive_failures >= 5


@dataclass
class Config:
    """Settings for a circuit breaker; zero or ``None`` selects the default.

    ``interval`` and ``timeout`` are in seconds.
    """

    max_requests: int = _DEFAULT_MAX_REQUESTS
    interval: float = _DEFAULT_INTERVAL
    timeout: float = _DEFAULT_TIMEOUT
    ready_to_trip: Callable[[Metrics], bool] | None = None
    on_state_change: Callable[[str, State, State], None] | None = None

    def __post_init__(self) -> None:
        if self.max_requests < 0 or self.interval < 0 or self.timeout < 0:
            raise ValueError("max_requests, interval and timeout must not be negative")
        if self.max_requests == 0:
            self.max_requests = _DEFAULT_MAX_REQUESTS
        if self.interval == 0:
            self.interval = _DEFAULT_INTERVAL
        if self.timeout == 0:
            self.timeout = _DEFAULT_TIMEOUT
        if self.ready_to_trip is None:
            self.ready_to_trip = _default_ready_to_trip


class CircuitBreakerOpenError(Exception):
    """Raised when a call is refused because the circuit is open."""

    def __init__(self, message: str = "circuit breaker is open") -> None:
        super().__init__(message)


class TooManyRequestsError(Exception):
    """Raised when the half-open state already admitted its quota of calls."""

    def __init__(self, message: str = "too many requests in half-open state") -> None:
        super().__init__(message)


class CircuitBreaker:
    """Guards calls to an operation, failing fast while it keeps failing."""

    def __init__(
        self,
        config: Config | None = None,
        *,
        name: str = "circuit-breaker",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config if config is not None else Config()
        self._name = name
        self._clock = clock
        self._state = State.CLOSED
        self._metrics = Metrics()
        self._last_state_change = clock()
        self._half_open_requests = 0
        self._lock = threading.RLock()

    @property
    def state(self) -> State:
        """The current state."""
        with self._lock:
            return self._state

    @property
    def metrics(self) -> Metrics:
        """A snapshot of the current metrics."""
        with self._lock:
            return replace(self._metrics)

    def call(
        self,
        operation: Callable[[], T],
        cancel: threading.Event | None = None,
    ) -> T:
        """Run ``operation`` if the breaker allows it and record the outcome.

        Exceptions raised by ``operation`` count as failures and propagate.
        """
        if cancel is not None and cancel.is_set():
            raise CancelledError("call was cancelled")

        self._admit()
        try:
            result = operation()
        except Exception:
            with self._lock:
                self._record_failure()
            raise
        with self._lock:
            self._record_success()
        return result

    def _admit(self) -> None:
        with self._lock:
            if self._state is State.CLOSED:
                return
            if self._state is State.OPEN:
                if self._clock() - self._last_state_change >= self._config.timeout:
                    self._set_state(State.HALF_OPEN)
                    return
                raise CircuitBreakerOpenError()
            if self._half_open_requests >= self._config.max_requests:
                raise TooManyRequestsError()
            self._half_open_requests += 1

    def _set_state(self, new_state: State) -> None:
        if self._state is new_state:
            return
        previous = self._state
        self._state = new_state
        self._last_state_change = self._clock()
        if new_state is State.CLOSED:
            self._metrics = Metrics()
        if new_state in (State.CLOSED, State.HALF_OPEN):
            self._half_open_requests = 0
        if self._config.on_state_change is not None:
            self._config.on_state_change(self._name, previous, new_state)

    def _record_success(self) -> None:
        self._metrics.requests += 1
        self._metrics.successes += 1
        self._metrics.consecutive_failures = 0
        if self._state is State.HALF_OPEN:
            self._set_state(State.CLOSED)
        now = self._clock()
        if now - self._last_state_change >= self._config.interval:
            self._metrics = Metrics()
            self._last_state_change = now

    def _record_failure(self) -> None:
        self._metrics.requests += 1
        self._metrics.failures += 1
        self._metrics.consecutive_failures += 1
        self._metrics.last_failure_time = self._clock()
        if self._state is State.HALF_OPEN:
            self._set_state(State.OPEN)
            return
        if self._config.ready_to_trip(replace(self._metrics)):
            self._set_state(State.OPEN)