# gbstream

`gbstream` gives a video platform two building blocks:

- `gbstream.zlm` — a small client for the HTTP API of a ZLMediaKit media
  server: read and change the server configuration, add pull-stream proxies,
  open and close GB28181 RTP receive ports, and take snapshots.
- `gbstream.stat` — host resource statistics (CPU, memory, network
  throughput, disk usage) kept in fixed-size ring buffers, plus a Flask
  blueprint that serves them as JSON.

## Installation

```
pip install gbstream
```

For running the test suite:

```
pip install "gbstream[test]"
pytest
```

## Talking to the media server

```python
from gbstream.zlm.engine import (
    AddStreamProxyRequest,
    CloseRTPServerRequest,
    Config,
    Engine,
    GetSnapRequest,
    OpenRTPServerRequest,
    ZLMError,
)

engine = Engine(Config(url="http://127.0.0.1:8080", secret="secret"))

config = engine.get_server_config()
print(config.data[0].http_port)

opened = engine.open_rtp_server(OpenRTPServerRequest(port=0, tcp_mode=0, stream_id="demo"))
print(opened.port)  # the port the server bound

closed = engine.close_rtp_server(CloseRTPServerRequest(stream_id="demo"))
print(closed.hit)

proxy = engine.add_stream_proxy(
    AddStreamProxyRequest(
        vhost="__defaultVhost__",
        app="live",
        stream="test",
        url="rtmp://localhost:1935/live/test",
    )
)
print(proxy.key)

try:
    jpeg = engine.get_snap(
        GetSnapRequest(url="rtmp://localhost:1935/live/test", timeout_sec=10, expire_sec=10)
    )
except ZLMError as exc:
    print("snapshot failed:", exc)
```

Requests are sent as JSON POST bodies with a 5 second timeout, and the
configured secret is added to every body. A non-zero `code` in a reply is
raised as `ZLMError`, which keeps the `code` and `msg` it was built from;
`ResultCode` names the codes the server documents, and
`check_code(code, msg)` performs the same check on a code you already have.

`get_snap` returns the image bytes. A short JSON reply carrying an error
code is raised as `ZLMError`, and so is the server's placeholder image that
it sends when no fresh snapshot could be taken.

`Engine.with_config(config)` returns a new engine that shares the HTTP
session but talks to another server or uses another secret. An existing
`requests.Session` can be passed as `Engine(config, session)`.

The configuration types live in `gbstream.zlm.server_config`:
`ServerConfigData` holds every setting reported by `get_server_config`
(ports as integers, everything else as strings), and
`SetServerConfigRequest` lists the settings to change — only fields that
are not `None` are sent:

```python
from gbstream.zlm.server_config import SetServerConfigRequest

resp = engine.set_server_config(SetServerConfigRequest(hook_enable="1", hook_timeout_sec="10"))
print(resp.changed)
```

## Host statistics

```python
import threading

from flask import Flask

from gbstream.stat.monitor import Monitor
from gbstream.stat.statapi import register

monitor = Monitor(30)                 # keep the last 30 samples of each series
stop = threading.Event()
threading.Thread(
    target=monitor.run,
    args=("/", print, stop),          # path whose disk usage is reported, callback, stop flag
    daemon=True,
).start()

app = Flask(__name__)
register(app, monitor)                # GET /stats
```

`Monitor.sample(path)` takes a single round of readings and returns the
latest CPU, memory and network samples together with the disk usage of
`path`; the network rates (in bits) are measured over one second, so the
call blocks that long. `Monitor.run` repeats `sample` until the stop event
is set, passing each result to the callback. `mem_data()`, `cpu_data()`
and `net_data()` return the buffered history, oldest first.

`GET /stats` answers with the buffered `mem`, `cpu` and `net` series and
the last disk reading, named after the directory of the running Python
interpreter. `find_stat(monitor, executable)` builds the same mapping
directly, and `create_blueprint(monitor)` returns the blueprint without
registering it.

The ring buffer itself is `CircleQueue` in `gbstream.stat.queue`: it holds
between 1 and 255 `PercentData` entries and, once full, overwrites the
oldest one on each `push`.

## What this package does not do

There is no command-line program and no server of its own: the statistics
endpoint only runs inside a Flask application you start, and sampling only
happens while `Monitor.run` or `Monitor.sample` is called. Statistics are
kept in memory and are lost when the process ends. The media server client
covers only the API calls listed above.