"""Periodic sampling of CPU, memory, network and disk usage."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

import psutil

from gbstream.stat.queue import CircleQueue, PercentData

TOP_QUEUE_CAP = 30
NET_SAMPLE_SECONDS = 1.0
FIRST_DELAY_SECONDS = 0.05
TICK_SECONDS = 0.2

logger = logging.getLogger(__name__)


@dataclass
class UsageStat:
    """Usage of one storage location, all values preformatted as text."""

    name: str = ""
    unit: str = ""
    size: str = ""
    free_space: str = ""
    used: str = ""
    percent: str = ""
    threshold: str = ""


def _read(fn: Callable[..., Any], what: str, **kwargs: Any) -> Any:
    try:
        return fn(**kwargs)
    except NotImplementedError:
        return None
    except (OSError, psutil.Error) as exc:
        logger.error("load %s: %s", what, exc)
        return None


def _net_counters() -> Any:
    try:
        return psutil.net_io_counters(pernic=False)
    except (OSError, psutil.Error, NotImplementedError):
        return None


def _last_dict(queue: CircleQueue) -> dict[str, Any] | None:
    last = queue.last()
    return last.to_dict() if last is not None else None


class Monitor:
    """Keeps recent usage history and the latest readings."""

    def __init__(self, capacity: int = TOP_QUEUE_CAP) -> None:
        self.mem_queue = CircleQueue(capacity)
        self.cpu_queue = CircleQueue(capacity)
        self.net_queue = CircleQueue(capacity)
        self.current_mem = 0.0
        self.current_cpu = 0.0
        self.current_main_disk = 0
        self.total_main_disk = 0
        self.current_kernel_disk = 0.0
        self.total_kernel_disk = 0

    def sample(self, path: str) -> dict[str, Any]:
        """Take one round of readings and return the latest values.

        Network rates are measured over one second, so this blocks that long.
        """
        now = datetime.now()

        cpu = _read(psutil.cpu_percent, "cpu", interval=None)
        if cpu is not None:
            self.cpu_queue.push(PercentData(time=now, used=float(cpu)))

        mem = _read(psutil.virtual_memory, "virtual memory")
        if mem is not None:
            self.mem_queue.push(PercentData(time=now, used=float(mem.percent)))

        first = _net_counters()
        time.sleep(NET_SAMPLE_SECONDS)
        second = _net_counters()
        if first is not None and second is not None:
            self.net_queue.push(
                PercentData(
                    time=now,
                    up=float(second.bytes_sent - first.bytes_sent) * 8,
                    down=float(second.bytes_recv - first.bytes_recv) * 8,
                )
            )

        if mem is not None:
            self.current_mem = float(mem.percent)
            if cpu is not None:
                self.current_cpu = float(cpu)

        try:
            usage = psutil.disk_usage(path)
        except OSError:
            pass
        else:
            self.current_main_disk = usage.used
            self.total_main_disk = usage.total

        return {
            "mem": _last_dict(self.mem_queue),
            "cpu": _last_dict(self.cpu_queue),
            "net": _last_dict(self.net_queue),
            "disk": [
                {
                    "name": path,
                    "used": self.current_main_disk,
                    "total": self.total_main_disk,
                }
            ],
        }

    def run(
        self,
        path: str,
        callback: Callable[[dict[str, Any]], None],
        stop_event: threading.Event | None = None,
    ) -> None:
        """Sample repeatedly, handing each result to ``callback``, until stopped."""
        stop = stop_event if stop_event is not None else threading.Event()
        delay = FIRST_DELAY_SECONDS
        while not stop.wait(delay):
            callback(self.sample(path))
            delay = TICK_SECONDS

    def mem_data(self) -> list[PercentData]:
        return self.mem_queue.snapshot()

    def cpu_data(self) -> list[PercentData]:
        return self.cpu_queue.snapshot()

    def net_data(self) -> list[PercentData]:
        return self.net_queue.snapshot()