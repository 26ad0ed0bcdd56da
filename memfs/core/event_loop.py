"""
memfs Event Loop

A single-threaded event loop that runs every completion of the
filesystem engine:
- Timer-based events (the artificial I/O latency)
- Immediate events
- Ordered execution: due time first, then submission order
- Graceful shutdown that drains already-scheduled events

Because only the loop thread executes events, the work step of one
operation never interleaves with the work step of another.

Author: memfs contributors
Version: 1.0.0
"""

import heapq
import itertools
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional, List

from memfs.logger import get_logger


class EventType(Enum):
    """Types of loop events."""
    TIMER = auto()
    IMMEDIATE = auto()


@dataclass(order=True)
class Event:
    """
    A scheduled event.

    Events are ordered by ``scheduled_time`` and then by ``event_id``,
    so two events due at the same instant run in submission order.
    """
    scheduled_time: float
    event_id: int
    event_type: EventType = field(compare=False)
    callback: Callable[..., Any] = field(compare=False)
    args: tuple = field(compare=False, default=())

    def execute(self) -> Any:
        return self.callback(*self.args)


class EventLoop:
    """
    The engine event loop.

    Runs in its own daemon thread and processes events one at a time.
    Timer events are kept in a heap keyed on their due time.

    Example:
        >>> loop = EventLoop()
        >>> loop.start()
        >>> loop.schedule_timer(print, 0.1, "done")
        >>> loop.stop()
    """

    def __init__(self, poll_interval: float = 0.001, name: str = 'memfs-event-loop'):
        self._logger = get_logger('event_loop')
        self._poll_interval = poll_interval
        self._name = name
        self._running = False
        self._accepting = False
        self._thread: Optional[threading.Thread] = None
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

        self._timer_queue: List[Event] = []  # heapq
        self._immediate_queue: deque[Event] = deque()

        self._events_processed = 0
        self._callback_errors = 0

        self._shutdown_event = threading.Event()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def accepting(self) -> bool:
        """Whether new events may be scheduled."""
        return self._accepting

    def in_loop_thread(self) -> bool:
        """True when called from the loop's own thread."""
        return self._thread is not None and threading.current_thread() is self._thread

    def start(self) -> None:
        """Start the event loop in a background thread."""
        if self._running:
            return

        self._running = True
        self._accepting = True
        self._shutdown_event.clear()
        self._thread = threading.Thread(target=self._run_loop, name=self._name, daemon=True)
        self._thread.start()
        self._logger.info("Event loop started")

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """
        Stop the event loop.

        New events are refused immediately; events already scheduled
        still run (timers fire at their due time) before the thread exits.
        """
        if not self._running:
            return

        with self._lock:
            self._accepting = False
            self._shutdown_event.set()

        if self._thread and self._thread.is_alive() and not self.in_loop_thread():
            self._thread.join(timeout=timeout)

        self._logger.info(
            "Event loop stopped",
            context={
                'events_processed': self._events_processed,
                'callback_errors': self._callback_errors,
            }
        )

    def _run_loop(self) -> None:
        """Main event loop implementation."""
        self._logger.debug("Event loop thread started")

        while True:
            self._process_events()
            if self._drained():
                break
            time.sleep(self._poll_interval)

        self._running = False
        self._logger.debug("Event loop thread exiting")

    def _drained(self) -> bool:
        """True once shutdown was requested and nothing is left to run."""
        # Checked under the same lock _schedule admits events with, so an
        # event is either refused or queued before the loop decides to exit.
        with self._lock:
            return (
                self._shutdown_event.is_set()
                and not self._timer_queue
                and not self._immediate_queue
            )

    def _next_due(self) -> Optional[Event]:
        """Pop the next runnable event, or None."""
        with self._lock:
            if self._immediate_queue:
                return self._immediate_queue.popleft()
            if self._timer_queue and self._timer_queue[0].scheduled_time <= time.monotonic():
                return heapq.heappop(self._timer_queue)
        return None

    def _process_events(self) -> None:
        """Process every event that is due."""
        while True:
            event = self._next_due()
            if event is None:
                return
            self._execute_event(event)

    def _execute_event(self, event: Event) -> None:
        """Execute a single event."""
        try:
            event.execute()
        except Exception as e:
            self._callback_errors += 1
            self._logger.exception(
                f"Error executing event: {e}",
                exc=e,
                context={'event_type': event.event_type.name, 'event_id': event.event_id}
            )
        finally:
            self._events_processed += 1

    def _schedule(self, event_type: EventType, delay: float, callback: Callable[..., Any], args: tuple) -> int:
        if not self._accepting:
            raise RuntimeError("Event loop is not accepting events")

        event = Event(
            scheduled_time=time.monotonic() + delay,
            event_id=next(self._ids),
            event_type=event_type,
            callback=callback,
            args=args,
        )

        with self._lock:
            if not self._accepting:
                raise RuntimeError("Event loop is not accepting events")
            if event_type is EventType.TIMER:
                heapq.heappush(self._timer_queue, event)
            else:
                self._immediate_queue.append(event)

        return event.event_id

    def schedule_timer(self, callback: Callable[..., Any], delay: float, *args: Any) -> int:
        """
        Schedule a timer event.

        Args:
            callback: Function to call when the event fires
            delay: Delay in seconds before the event fires
            *args: Positional arguments passed to the callback

        Returns:
            Event ID
        """
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        return self._schedule(EventType.TIMER, delay, callback, args)

    def schedule_immediate(self, callback: Callable[..., Any], *args: Any) -> int:
        """
        Schedule an event to run as soon as the loop is free.

        Returns:
            Event ID
        """
        return self._schedule(EventType.IMMEDIATE, 0.0, callback, args)

    def get_stats(self) -> dict[str, Any]:
        """Get event loop statistics."""
        with self._lock:
            pending_timers = len(self._timer_queue)
            pending_immediate = len(self._immediate_queue)
        return {
            'running': self._running,
            'events_processed': self._events_processed,
            'callback_errors': self._callback_errors,
            'pending_timers': pending_timers,
            'pending_immediate': pending_immediate,
        }

    def wait_for_shutdown(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the event loop thread to exit.

        Returns:
            True if the loop has stopped, False if the timeout elapsed
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()
