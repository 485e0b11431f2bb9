import json

import pytest
import responses

from gbstream.zlm.engine import (
    AddStreamProxyRequest,
    CloseRTPServerRequest,
    Config,
    Engine,
    GetSnapRequest,
    OpenRTPServerRequest,
    ResultCode,
    ZLMError,
    check_code,
)
from gbstream.zlm.server_config import SetServerConfigRequest

URL = "http://127.0.0.1:8080"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def engine():
    return Engine().with_config(Config(url=URL, secret="secret"))


def _body(mock, index=0):
    return json.loads(mock.calls[index].request.body)


def test_check_code_success():
    assert check_code(0, "ignored") is None


@pytest.mark.parametrize(
    "code,text",
    [
        (-1, "zlm: boom"),
        (-100, "zlm authentication failed: boom"),
        (-200, "zlm sql failed: boom"),
        (-300, "zlm: boom"),
        (-400, "zlm exception raised: boom"),
        (7, "zlm unknown error: boom"),
    ],
)
def test_check_code_errors(code, text):
    with pytest.raises(ZLMError) as info:
        check_code(code, "boom")
    assert str(info.value) == text
    assert info.value.code == code


def test_get_server_config(rsps, engine):
    rsps.post(
        URL + "/index/api/getServerConfig",
        json={
            "code": 0,
            "data": [{"http.port": "80", "rtsp.port": "554", "api.secret": "secret"}],
        },
    )
    out = engine.get_server_config()
    assert out.code == 0
    assert out.data[0].http_port == 80
    assert out.data[0].rtsp_port == 554
    assert _body(rsps) == {"secret": "secret"}


def test_get_server_config_auth_failure(rsps, engine):
    rsps.post(URL + "/index/api/getServerConfig", json={"code": -100, "msg": "bad secret"})
    with pytest.raises(ZLMError) as info:
        engine.get_server_config()
    assert info.value.code == ResultCode.AUTH_FAILED


def test_secret_omitted_when_empty(rsps):
    rsps.post(URL + "/index/api/getServerConfig", json={"code": 0, "data": []})
    Engine(Config(url=URL)).get_server_config()
    assert _body(rsps) == {}


def test_set_server_config(rsps, engine):
    rsps.post(URL + "/index/api/setServerConfig", json={"code": 0, "changed": 2})
    out = engine.set_server_config(
        SetServerConfigRequest(hook_enable="1", http_port="8080")
    )
    assert out.changed == 2
    assert _body(rsps) == {"secret": "secret", "hook.enable": "1", "http.port": "8080"}


def test_add_stream_proxy(rsps, engine):
    rsps.post(
        URL + "/index/api/addStreamProxy",
        json={"code": 0, "data": {"key": "__defaultVhost__/live/test"}},
    )
    request = AddStreamProxyRequest(
        vhost="__defaultVhost__",
        app="live",
        stream="test",
        url="rtmp://localhost/live/test",
        retry_count=-1,
        enable_mp4=False,
    )
    out = engine.add_stream_proxy(request)
    assert out.key == "__defaultVhost__/live/test"
    body = _body(rsps)
    assert body["enable_mp4"] is False
    assert "enable_hls" not in body
    assert body["retry_count"] == -1


def test_add_stream_proxy_error(rsps, engine):
    rsps.post(URL + "/index/api/addStreamProxy", json={"code": -1, "msg": "exists"})
    with pytest.raises(ZLMError, match="zlm: exists"):
        engine.add_stream_proxy(AddStreamProxyRequest(app="live", stream="test"))


def test_open_rtp_server(rsps, engine):
    rsps.post(URL + "/index/api/openRtpServer", json={"code": 0, "port": 30000})
    out = engine.open_rtp_server(OpenRTPServerRequest(port=0, tcp_mode=1, stream_id="s1"))
    assert out.port == 30000
    assert _body(rsps) == {"secret": "secret", "port": 0, "tcp_mode": 1, "stream_id": "s1"}


def test_close_rtp_server(rsps, engine):
    rsps.post(URL + "/index/api/closeRtpServer", json={"code": 0, "hit": 1})
    out = engine.close_rtp_server(CloseRTPServerRequest(stream_id="s1"))
    assert out.hit == 1


def test_close_rtp_server_error_message(rsps, engine):
    rsps.post(URL + "/index/api/closeRtpServer", json={"code": -300})
    with pytest.raises(ZLMError, match="rtp close err"):
        engine.close_rtp_server(CloseRTPServerRequest(stream_id="s1"))


def test_get_snap_returns_image(rsps):
    image = b"\xff\xd8" + b"\x00" * 500
    rsps.post(URL + "/index/api/getSnap", body=image)
    link = "rtmp://localhost:1935/rtp/che1ml5"
    out = Engine().with_config(Config(url=URL, secret="secret")).get_snap(
        GetSnapRequest(url=link, timeout_sec=50, expire_sec=10)
    )
    assert out == image
    assert _body(rsps) == {
        "secret": "secret",
        "url": link,
        "timeout_sec": 50,
        "expire_sec": 10,
    }


def test_get_snap_always_sends_secret(rsps):
    rsps.post(URL + "/index/api/getSnap", body=b"x" * 200)
    Engine(Config(url=URL)).get_snap(GetSnapRequest(url="rtsp://localhost/a"))
    assert _body(rsps)["secret"] == ""


def test_get_snap_error_reply(rsps, engine):
    rsps.post(URL + "/index/api/getSnap", json={"code": -400, "msg": "crash"})
    with pytest.raises(ZLMError) as info:
        engine.get_snap(GetSnapRequest(url="rtsp://localhost/a"))
    assert info.value.code == ResultCode.EXCEPTION


def test_get_snap_short_non_json_passes(rsps, engine):
    rsps.post(URL + "/index/api/getSnap", body=b"tiny")
    assert engine.get_snap(GetSnapRequest(url="rtsp://localhost/a")) == b"tiny"


def test_get_snap_same_size_other_content(rsps, engine):
    image = b"a" * 47255
    rsps.post(URL + "/index/api/getSnap", body=image)
    assert len(engine.get_snap(GetSnapRequest(url="rtsp://localhost/a"))) == 47255


def test_with_config_shares_session():
    base = Engine()
    other = base.with_config(Config(url=URL, secret="secret"))
    assert other.session is base.session
    assert other.config.url == URL
    assert base.config.url == ""