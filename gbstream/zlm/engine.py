"""HTTP client for the media server's REST API."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping

import requests
from requests.adapters import HTTPAdapter

from gbstream.zlm.server_config import (
    FixedHeader,
    GetServerConfigResponse,
    SetServerConfigRequest,
    SetServerConfigResponse,
)

GET_SERVER_CONFIG = "/index/api/getServerConfig"
SET_SERVER_CONFIG = "/index/api/setServerConfig"
ADD_STREAM_PROXY = "/index/api/addStreamProxy"
OPEN_RTP_SERVER = "/index/api/openRtpServer"
CLOSE_RTP_SERVER = "/index/api/closeRtpServer"
GET_SNAPSHOT = "/index/api/getSnap"

DEFAULT_TIMEOUT = 5.0

# The server answers with this placeholder image when no fresh snapshot exists.
_STALE_SNAP_SIZE = 47255
_STALE_SNAP_MD5 = "32ddfa5715059731ae893ec92fca0311"


class ResultCode(IntEnum):
    """Status codes carried in the ``code`` field of every reply."""

    EXCEPTION = -400
    INVALID_ARGS = -300
    SQL_FAILED = -200
    AUTH_FAILED = -100
    OTHER_FAILED = -1
    SUCCESS = 0


_PREFIXES = {
    ResultCode.OTHER_FAILED: "zlm",
    ResultCode.AUTH_FAILED: "zlm authentication failed",
    ResultCode.SQL_FAILED: "zlm sql failed",
    ResultCode.INVALID_ARGS: "zlm",
    ResultCode.EXCEPTION: "zlm exception raised",
}


class ZLMError(Exception):
    """The media server reported a failure."""

    def __init__(self, code: int, msg: str) -> None:
        self.code = code
        self.msg = msg
        try:
            prefix = _PREFIXES[ResultCode(code)]
        except (ValueError, KeyError):
            prefix = "zlm unknown error"
        super().__init__(f"{prefix}: {msg}")


def check_code(code: int, msg: str) -> None:
    """Raise ZLMError unless ``code`` signals success."""
    if code != ResultCode.SUCCESS:
        raise ZLMError(code, msg)


@dataclass(frozen=True)
class Config:
    """Where the media server lives and the secret it expects."""

    url: str = ""
    secret: str = ""


def _without_none(values: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass
class AddStreamProxyRequest:
    """Parameters of addStreamProxy; optional settings are omitted when None."""

    vhost: str = ""
    app: str = ""
    stream: str = ""
    url: str = ""
    retry_count: int = 0
    rtp_type: int = 0  # 0 tcp, 1 udp, 2 multicast
    timeout_sec: float = 0.0
    enable_hls: bool | None = None
    enable_hls_fmp4: bool | None = None
    enable_mp4: bool | None = None
    enable_rtsp: bool | None = None
    enable_rtmp: bool | None = None
    enable_ts: bool | None = None
    enable_fmp4: bool | None = None
    hls_demand: bool | None = None
    rtsp_demand: bool | None = None
    rtmp_demand: bool | None = None
    ts_demand: bool | None = None
    fmp4_demand: bool | None = None
    enable_audio: bool | None = None
    add_mute_audio: bool | None = None
    mp4_save_path: str | None = None
    mp4_max_second: int | None = None
    mp4_as_player: bool | None = None
    hls_save_path: str | None = None
    modify_stamp: int | None = None
    auto_close: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "vhost": self.vhost,
                "app": self.app,
                "stream": self.stream,
                "url": self.url,
                "retry_count": self.retry_count,
                "rtp_type": self.rtp_type,
                "timeout_sec": self.timeout_sec,
                "enable_hls": self.enable_hls,
                "enable_hls_fmp4": self.enable_hls_fmp4,
                "enable_mp4": self.enable_mp4,
                "enable_rtsp": self.enable_rtsp,
                "enable_rtmp": self.enable_rtmp,
                "enable_ts": self.enable_ts,
                "enable_fmp4": self.enable_fmp4,
                "hls_demand": self.hls_demand,
                "rtsp_demand": self.rtsp_demand,
                "rtmp_demand": self.rtmp_demand,
                "ts_demand": self.ts_demand,
                "fmp4_demand": self.fmp4_demand,
                "enable_audio": self.enable_audio,
                "add_mute_audio": self.add_mute_audio,
                "mp4_save_path": self.mp4_save_path,
                "mp4_max_second": self.mp4_max_second,
                "mp4_as_player": self.mp4_as_player,
                "hls_save_path": self.hls_save_path,
                "modify_stamp": self.modify_stamp,
                "auto_close": self.auto_close,
            }
        )


@dataclass
class AddStreamProxyResponse(FixedHeader):
    """Reply to addStreamProxy; ``key`` identifies the proxy."""

    key: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AddStreamProxyResponse:
        header = FixedHeader.from_dict(data)
        inner = data.get("data") or {}
        return cls(code=header.code, msg=header.msg, key=str(inner.get("key") or ""))


@dataclass
class OpenRTPServerRequest:
    """Parameters of openRtpServer; port 0 picks a random port."""

    port: int = 0
    tcp_mode: int = 0  # 0 udp, 1 tcp passive, 2 tcp active
    stream_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"port": self.port, "tcp_mode": self.tcp_mode, "stream_id": self.stream_id}


@dataclass
class OpenRTPServerResponse(FixedHeader):
    """Reply to openRtpServer with the port actually bound."""

    port: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OpenRTPServerResponse:
        header = FixedHeader.from_dict(data)
        return cls(code=header.code, msg=header.msg, port=int(data.get("port") or 0))


@dataclass
class CloseRTPServerRequest:
    """Parameters of closeRtpServer."""

    stream_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"stream_id": self.stream_id}


@dataclass
class CloseRTPServerResponse:
    """Reply to closeRtpServer; ``hit`` tells whether a server was closed."""

    code: int = 0
    hit: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CloseRTPServerResponse:
        return cls(code=int(data.get("code") or 0), hit=int(data.get("hit") or 0))


@dataclass
class GetSnapRequest:
    """Parameters of getSnap."""

    url: str = ""
    timeout_sec: int = 0
    expire_sec: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "timeout_sec": self.timeout_sec, "expire_sec": self.expire_sec}


def _new_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=30, pool_maxsize=100)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


@dataclass
class Engine:
    """Client bound to one media server."""

    config: Config = field(default_factory=Config)
    session: requests.Session = field(default_factory=_new_session)
    timeout: float = DEFAULT_TIMEOUT

    def __init__(
        self,
        config: Config | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or Config()
        self.session = session or _new_session()
        self.timeout = DEFAULT_TIMEOUT

    def with_config(self, config: Config) -> Engine:
        """A new engine for ``config`` that shares this engine's connections."""
        return Engine(config, self.session)

    def _send(self, path: str, body: dict[str, Any]) -> requests.Response:
        return self.session.post(
            self.config.url + path,
            data=json.dumps(body),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

    def _post(self, path: str, data: Mapping[str, Any] | None) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.config.secret:
            body["secret"] = self.config.secret
        body.update(data or {})
        with self._send(path, body) as response:
            payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"{path}: expected a JSON object in the reply")
        return payload

    def _post_raw(self, path: str, data: Mapping[str, Any]) -> bytes:
        body: dict[str, Any] = {"secret": self.config.secret, **data}
        with self._send(path, body) as response:
            return response.content

    def get_server_config(self) -> GetServerConfigResponse:
        resp = GetServerConfigResponse.from_dict(self._post(GET_SERVER_CONFIG, None))
        check_code(resp.code, resp.msg)
        return resp

    def set_server_config(self, request: SetServerConfigRequest) -> SetServerConfigResponse:
        resp = SetServerConfigResponse.from_dict(
            self._post(SET_SERVER_CONFIG, request.to_dict())
        )
        check_code(resp.code, resp.msg)
        return resp

    def add_stream_proxy(self, request: AddStreamProxyRequest) -> AddStreamProxyResponse:
        resp = AddStreamProxyResponse.from_dict(self._post(ADD_STREAM_PROXY, request.to_dict()))
        check_code(resp.code, resp.msg)
        return resp

    def open_rtp_server(self, request: OpenRTPServerRequest) -> OpenRTPServerResponse:
        """Open a GB28181 RTP receive port; the server reclaims it on timeout."""
        resp = OpenRTPServerResponse.from_dict(self._post(OPEN_RTP_SERVER, request.to_dict()))
        check_code(resp.code, resp.msg)
        return resp

    def close_rtp_server(self, request: CloseRTPServerRequest) -> CloseRTPServerResponse:
        resp = CloseRTPServerResponse.from_dict(self._post(CLOSE_RTP_SERVER, request.to_dict()))
        check_code(resp.code, "rtp close err")
        return resp

    def get_snap(self, request: GetSnapRequest) -> bytes:
        """Fetch a snapshot image of the stream at ``request.url``."""
        content = self._post_raw(GET_SNAPSHOT, request.to_dict())
        if len(content) < 100:
            try:
                payload = json.loads(content)
            except ValueError:
                payload = None
            if isinstance(payload, dict):
                code = payload.get("code", 0)
                msg = payload.get("msg", "")
                if isinstance(code, int) and isinstance(msg, str):
                    check_code(code, msg)
        if (
            len(content) == _STALE_SNAP_SIZE
            and hashlib.md5(content).hexdigest() == _STALE_SNAP_MD5
        ):
            raise ZLMError(ResultCode.OTHER_FAILED, "snapshot not updated")
        return content