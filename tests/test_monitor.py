import threading
from contextlib import ExitStack, contextmanager
from types import SimpleNamespace
from unittest import mock

import pytest

from gbstream.stat.monitor import TOP_QUEUE_CAP, Monitor, UsageStat


@contextmanager
def fake_system(cpu=12.5, mem=40.0, net=None, disk=None, disk_error=None):
    if net is None:
        net = [
            SimpleNamespace(bytes_sent=100, bytes_recv=200),
            SimpleNamespace(bytes_sent=150, bytes_recv=260),
        ]
    with ExitStack() as stack:
        if isinstance(cpu, BaseException):
            stack.enter_context(mock.patch("psutil.cpu_percent", side_effect=cpu))
        else:
            stack.enter_context(mock.patch("psutil.cpu_percent", return_value=cpu))
        stack.enter_context(
            mock.patch("psutil.virtual_memory", return_value=SimpleNamespace(percent=mem))
        )
        stack.enter_context(mock.patch("psutil.net_io_counters", side_effect=list(net)))
        if disk_error is not None:
            stack.enter_context(mock.patch("psutil.disk_usage", side_effect=disk_error))
        else:
            usage = disk or SimpleNamespace(used=10, total=100)
            stack.enter_context(mock.patch("psutil.disk_usage", return_value=usage))
        sleep = stack.enter_context(mock.patch("time.sleep"))
        yield sleep


def test_default_capacity():
    monitor = Monitor()
    assert monitor.mem_queue.capacity == TOP_QUEUE_CAP


def test_sample_records_readings():
    monitor = Monitor(5)
    with fake_system() as sleep:
        result = monitor.sample("/data")
    assert sleep.call_count == 1
    assert result["cpu"]["used"] == 12.5
    assert result["mem"]["used"] == 40.0
    assert result["net"]["up"] == 400.0
    assert result["net"]["down"] == 480.0
    assert result["disk"] == [{"name": "/data", "used": 10, "total": 100}]
    assert monitor.current_cpu == 12.5
    assert monitor.current_mem == 40.0
    assert monitor.current_main_disk == 10
    assert monitor.total_main_disk == 100
    assert [d.used for d in monitor.cpu_data()] == [12.5]
    assert [d.used for d in monitor.mem_data()] == [40.0]
    assert len(monitor.net_data()) == 1


def test_samples_share_one_timestamp():
    monitor = Monitor(5)
    with fake_system():
        monitor.sample("/data")
    times = {monitor.cpu_data()[0].time, monitor.mem_data()[0].time, monitor.net_data()[0].time}
    assert len(times) == 1


def test_history_is_bounded_by_capacity():
    monitor = Monitor(2)
    for value in (1.0, 2.0, 3.0):
        with fake_system(cpu=value, mem=value):
            monitor.sample("/data")
    assert [d.used for d in monitor.cpu_data()] == [2.0, 3.0]
    assert len(monitor.mem_data()) == 2


def test_cpu_not_implemented_is_skipped():
    monitor = Monitor(5)
    with fake_system(cpu=NotImplementedError()):
        result = monitor.sample("/data")
    assert result["cpu"] is None
    assert monitor.cpu_data() == []
    assert monitor.current_cpu == 0.0
    assert monitor.current_mem == 40.0


def test_missing_net_counters_skip_net():
    monitor = Monitor(5)
    with fake_system(net=[None, None]):
        result = monitor.sample("/data")
    assert result["net"] is None
    assert monitor.net_data() == []


def test_disk_error_keeps_previous_values():
    monitor = Monitor(5)
    with fake_system(disk=SimpleNamespace(used=7, total=70)):
        monitor.sample("/data")
    with fake_system(disk_error=OSError("gone")):
        result = monitor.sample("/data")
    assert result["disk"][0]["used"] == 7
    assert monitor.total_main_disk == 70


def test_run_stops_when_event_set():
    monitor = Monitor(5)
    stop = threading.Event()
    calls = []

    def callback(result):
        calls.append(result)
        stop.set()

    with fake_system():
        monitor.run("/data", callback, stop)
    assert len(calls) == 1
    assert calls[0]["disk"][0]["name"] == "/data"
    assert calls[0]["cpu"]["used"] == 12.5
    assert [d.used for d in monitor.cpu_data()] == [12.5]
    assert monitor.current_mem == 40.0
    assert monitor.total_main_disk == 100


def test_run_with_preset_event_never_samples():
    monitor = Monitor(5)
    stop = threading.Event()
    stop.set()
    calls = []
    monitor.run("/data", calls.append, stop)
    assert calls == []
    assert monitor.mem_data() == []


@pytest.mark.parametrize("field_name", ["name", "unit", "size", "free_space", "used", "percent", "threshold"])
def test_usage_stat_fields_default_empty(field_name):
    stat = UsageStat(name="/data")
    assert stat.name == "/data"
    if field_name != "name":
        assert getattr(stat, field_name) == ""