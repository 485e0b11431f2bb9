"""HTTP endpoint that reports the monitor's usage history."""

from __future__ import annotations

import os
import sys
from typing import Any

from flask import Blueprint, Flask, jsonify

from gbstream.stat.monitor import Monitor


def find_stat(monitor: Monitor, executable: str | None = None) -> dict[str, Any]:
    """Collect the usage history; disk usage is reported for the executable's directory."""
    path = executable if executable is not None else sys.executable
    directory = os.path.dirname(path) or "."
    return {
        "mem": [d.to_dict() for d in monitor.mem_data()],
        "cpu": [d.to_dict() for d in monitor.cpu_data()],
        "disk": [
            {
                "name": directory,
                "used": monitor.current_main_disk,
                "total": monitor.total_main_disk,
            }
        ],
        "net": [d.to_dict() for d in monitor.net_data()],
    }


def create_blueprint(monitor: Monitor) -> Blueprint:
    """A blueprint serving GET /stats."""
    blueprint = Blueprint("stat", __name__)

    @blueprint.get("/stats")
    def stats() -> Any:
        return jsonify(find_stat(monitor))

    return blueprint


def register(app: Flask, monitor: Monitor) -> Blueprint:
    """Mount the stats endpoint on ``app``."""
    blueprint = create_blueprint(monitor)
    app.register_blueprint(blueprint)
    return blueprint