"""Paced dispatch of outgoing calls."""

import asyncio
import functools
import inspect
import logging
import math
import time
from collections import deque
from typing import Any, Awaitable, Callable, Deque, Dict, List, Mapping, Optional, Set, Tuple, Union

from .models import ThrottleQueueEntry, ThrottleSpec

logger = logging.getLogger(__name__)

ThrottleSetting = Union[bool, int, float, str, Mapping[str, Any], ThrottleSpec, None]


def interval_seconds(setting: ThrottleSetting) -> float:
    """Seconds between two dispatched calls.

    Numbers and numeric strings are milliseconds. A setting with ``window`` and
    ``limit`` allows ``limit`` calls per ``window`` seconds; ``True`` means
    one call per second.
    """
    if isinstance(setting, bool) or setting is None:
        setting = ThrottleSpec()
    elif isinstance(setting, (int, float, str)):
        return float(setting) / 1000
    elif isinstance(setting, Mapping):
        setting = ThrottleSpec(**setting)

    if setting.interval:
        return setting.interval / 1000
    return math.ceil((setting.window / setting.limit) * 1000) / 1000


class _QueuedCall:
    __slots__ = ("fn", "args", "kwargs", "future", "entry")

    def __init__(
        self,
        fn: Callable[..., Any],
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
        future: "asyncio.Future[Any]",
        entry: ThrottleQueueEntry,
    ) -> None:
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.future = future
        self.entry = entry


class RequestThrottle:
    """FIFO queue releasing one call per interval.

    A single timer task drains the queue; it starts on the first submission
    and stops as soon as the queue is empty. Each submission returns a
    future resolving to the outcome of the call.
    """

    def __init__(self, setting: ThrottleSetting = True) -> None:
        self.interval = interval_seconds(setting)
        self._queue: Deque[_QueuedCall] = deque()
        self._timer: Optional["asyncio.Task[None]"] = None
        self._in_flight: Set["asyncio.Task[None]"] = set()

    @property
    def running(self) -> bool:
        return self._timer is not None

    def pending(self) -> List[ThrottleQueueEntry]:
        return [call.entry for call in self._queue]

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> "asyncio.Future[Any]":
        loop = asyncio.get_running_loop()
        future: "asyncio.Future[Any]" = loop.create_future()
        position = len(self._queue) + 1
        entry = ThrottleQueueEntry(
            position=position,
            queued_at=time.time(),
            time_until_call=position * self.interval,
        )
        self._queue.append(_QueuedCall(fn, args, kwargs, future, entry))
        logger.debug(
            "Queued throttled call at position %d, dispatch in %.3fs",
            entry.position,
            entry.time_until_call,
        )

        if self._timer is None:
            self._timer = loop.create_task(self._run_queue())
        return future

    def wrap(self, fn: Callable[..., Any]) -> Callable[..., "Awaitable[Any]"]:
        """Throttled version of ``fn``."""

        @functools.wraps(fn)
        def throttled(*args: Any, **kwargs: Any) -> "asyncio.Future[Any]":
            return self.submit(fn, *args, **kwargs)

        return throttled

    async def _run_queue(self) -> None:
        try:
            while self._queue:
                await asyncio.sleep(self.interval)
                call = self._queue.popleft()
                if call.future.cancelled():
                    continue
                task = asyncio.get_running_loop().create_task(self._invoke(call))
                self._in_flight.add(task)
                task.add_done_callback(self._in_flight.discard)
        finally:
            self._timer = None

    @staticmethod
    async def _invoke(call: _QueuedCall) -> None:
        try:
            result = call.fn(*call.args, **call.kwargs)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            if not call.future.done():
                call.future.set_exception(e)
        else:
            if not call.future.done():
                call.future.set_result(result)
