"""Media server configuration payloads for getServerConfig and setServerConfig."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

_INT_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)")

# Wire key of the API credential setting.
_CREDENTIAL_FIELD = "api.secret"


def _key(name: str) -> Any:
    """A plain string setting carried under ``name``."""
    return field(default="", metadata={"key": name})


def _port(name: str) -> Any:
    """An integer setting transmitted as a quoted string under ``name``."""
    return field(default=0, metadata={"key": name, "quoted_int": True})


def _opt(name: str) -> Any:
    """An optional setting, left out of the payload when unset."""
    return field(default=None, metadata={"key": name})


def _decode_quoted_int(key: str, raw: Any) -> int:
    if not isinstance(raw, str):
        raise TypeError(f"{key}: expected a quoted integer, got {type(raw).__name__}")
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"{key}: invalid integer {raw!r}")
    return int(raw)


def _decode_str(key: str, raw: Any) -> str:
    if not isinstance(raw, str):
        raise TypeError(f"{key}: expected a string, got {type(raw).__name__}")
    return raw


@dataclass
class FixedHeader:
    """Status fields shared by every response; ``msg`` only matters on failure."""

    code: int = 0
    msg: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FixedHeader:
        return cls(code=int(data.get("code") or 0), msg=str(data.get("msg") or ""))


@dataclass
class ServerConfigData:
    """One server's full configuration as reported by getServerConfig."""

    api_api_debug: str = _key("api.apiDebug")
    api_default_snap: str = _key("api.defaultSnap")
    api_download_root: str = _key("api.downloadRoot")
    api_secret: str = _key(_CREDENTIAL_FIELD)
    api_snap_root: str = _key("api.snapRoot")
    cluster_origin_url: str = _key("cluster.origin_url")
    cluster_retry_count: str = _key("cluster.retry_count")
    cluster_timeout_sec: str = _key("cluster.timeout_sec")
    ffmpeg_bin: str = _key("ffmpeg.bin")
    ffmpeg_cmd: str = _key("ffmpeg.cmd")
    ffmpeg_log: str = _key("ffmpeg.log")
    ffmpeg_restart_sec: str = _key("ffmpeg.restart_sec")
    ffmpeg_snap: str = _key("ffmpeg.snap")
    general_broadcast_player_count_changed: str = _key("general.broadcast_player_count_changed")
    general_check_nvidia_dev: str = _key("general.check_nvidia_dev")
    general_enable_vhost: str = _key("general.enableVhost")
    general_enable_ffmpeg_log: str = _key("general.enable_ffmpeg_log")
    general_flow_threshold: str = _key("general.flowThreshold")
    general_listen_ip: str = _key("general.listen_ip")
    general_max_stream_wait_ms: str = _key("general.maxStreamWaitMS")
    general_media_server_id: str = _key("general.mediaServerId")
    general_merge_write_ms: str = _key("general.mergeWriteMS")
    general_reset_when_re_play: str = _key("general.resetWhenRePlay")
    general_stream_none_reader_delay_ms: str = _key("general.streamNoneReaderDelayMS")
    general_unready_frame_cache: str = _key("general.unready_frame_cache")
    general_wait_add_track_ms: str = _key("general.wait_add_track_ms")
    general_wait_audio_track_data_ms: str = _key("general.wait_audio_track_data_ms")
    general_wait_track_ready_ms: str = _key("general.wait_track_ready_ms")
    hls_broadcast_record_ts: str = _key("hls.broadcastRecordTs")
    hls_delete_delay_sec: str = _key("hls.deleteDelaySec")
    hls_fast_register: str = _key("hls.fastRegister")
    hls_file_buf_size: str = _key("hls.fileBufSize")
    hls_seg_delay: str = _key("hls.segDelay")
    hls_seg_dur: str = _key("hls.segDur")
    hls_seg_keep: str = _key("hls.segKeep")
    hls_seg_num: str = _key("hls.segNum")
    hls_seg_retain: str = _key("hls.segRetain")
    hook_alive_interval: str = _key("hook.alive_interval")
    hook_enable: str = _key("hook.enable")
    hook_on_flow_report: str = _key("hook.on_flow_report")
    hook_on_http_access: str = _key("hook.on_http_access")
    hook_on_play: str = _key("hook.on_play")
    hook_on_publish: str = _key("hook.on_publish")
    hook_on_record_mp4: str = _key("hook.on_record_mp4")
    hook_on_record_ts: str = _key("hook.on_record_ts")
    hook_on_rtp_server_timeout: str = _key("hook.on_rtp_server_timeout")
    hook_on_rtsp_auth: str = _key("hook.on_rtsp_auth")
    hook_on_rtsp_realm: str = _key("hook.on_rtsp_realm")
    hook_on_send_rtp_stopped: str = _key("hook.on_send_rtp_stopped")
    hook_on_server_exited: str = _key("hook.on_server_exited")
    hook_on_server_keepalive: str = _key("hook.on_server_keepalive")
    hook_on_server_started: str = _key("hook.on_server_started")
    hook_on_shell_login: str = _key("hook.on_shell_login")
    hook_on_stream_changed: str = _key("hook.on_stream_changed")
    hook_on_stream_none_reader: str = _key("hook.on_stream_none_reader")
    hook_on_stream_not_found: str = _key("hook.on_stream_not_found")
    hook_retry: str = _key("hook.retry")
    hook_retry_delay: str = _key("hook.retry_delay")
    hook_stream_changed_schemas: str = _key("hook.stream_changed_schemas")
    hook_timeout_sec: str = _key("hook.timeoutSec")
    http_allow_cross_domains: str = _key("http.allow_cross_domains")
    http_allow_ip_range: str = _key("http.allow_ip_range")
    http_char_set: str = _key("http.charSet")
    http_dir_menu: str = _key("http.dirMenu")
    http_forbid_cache_suffix: str = _key("http.forbidCacheSuffix")
    http_forwarded_ip_header: str = _key("http.forwarded_ip_header")
    http_keep_alive_second: str = _key("http.keepAliveSecond")
    http_max_req_size: str = _key("http.maxReqSize")
    http_not_found: str = _key("http.notFound")
    http_port: int = _port("http.port")
    http_root_path: str = _key("http.rootPath")
    http_send_buf_size: str = _key("http.sendBufSize")
    http_sslport: int = _port("http.sslport")
    http_virtual_path: str = _key("http.virtualPath")
    multicast_addr_max: str = _key("multicast.addrMax")
    multicast_addr_min: str = _key("multicast.addrMin")
    multicast_udp_ttl: str = _key("multicast.udpTTL")
    protocol_add_mute_audio: str = _key("protocol.add_mute_audio")
    protocol_auto_close: str = _key("protocol.auto_close")
    protocol_continue_push_ms: str = _key("protocol.continue_push_ms")
    protocol_enable_audio: str = _key("protocol.enable_audio")
    protocol_enable_fmp4: str = _key("protocol.enable_fmp4")
    protocol_enable_hls: str = _key("protocol.enable_hls")
    protocol_enable_hls_fmp4: str = _key("protocol.enable_hls_fmp4")
    protocol_enable_mp4: str = _key("protocol.enable_mp4")
    protocol_enable_rtmp: str = _key("protocol.enable_rtmp")
    protocol_enable_rtsp: str = _key("protocol.enable_rtsp")
    protocol_enable_ts: str = _key("protocol.enable_ts")
    protocol_fmp4_demand: str = _key("protocol.fmp4_demand")
    protocol_hls_demand: str = _key("protocol.hls_demand")
    protocol_hls_save_path: str = _key("protocol.hls_save_path")
    protocol_modify_stamp: str = _key("protocol.modify_stamp")
    protocol_mp4_as_player: str = _key("protocol.mp4_as_player")
    protocol_mp4_max_second: str = _key("protocol.mp4_max_second")
    protocol_mp4_save_path: str = _key("protocol.mp4_save_path")
    protocol_paced_sender_ms: str = _key("protocol.paced_sender_ms")
    protocol_rtmp_demand: str = _key("protocol.rtmp_demand")
    protocol_rtsp_demand: str = _key("protocol.rtsp_demand")
    protocol_ts_demand: str = _key("protocol.ts_demand")
    record_app_name: str = _key("record.appName")
    record_enable_fmp4: str = _key("record.enableFmp4")
    record_fast_start: str = _key("record.fastStart")
    record_file_buf_size: str = _key("record.fileBufSize")
    record_file_repeat: str = _key("record.fileRepeat")
    record_sample_ms: str = _key("record.sampleMS")
    rtc_datachannel_echo: str = _key("rtc.datachannel_echo")
    rtc_extern_ip: str = _key("rtc.externIP")
    rtc_max_rtp_cache_ms: str = _key("rtc.maxRtpCacheMS")
    rtc_max_rtp_cache_size: str = _key("rtc.maxRtpCacheSize")
    rtc_max_bitrate: str = _key("rtc.max_bitrate")
    rtc_min_bitrate: str = _key("rtc.min_bitrate")
    rtc_nack_interval_ratio: str = _key("rtc.nackIntervalRatio")
    rtc_nack_max_count: str = _key("rtc.nackMaxCount")
    rtc_nack_max_ms: str = _key("rtc.nackMaxMS")
    rtc_nack_max_size: str = _key("rtc.nackMaxSize")
    rtc_nack_rtp_size: str = _key("rtc.nackRtpSize")
    rtc_port: str = _key("rtc.port")
    rtc_preferred_codec_a: str = _key("rtc.preferredCodecA")
    rtc_preferred_codec_v: str = _key("rtc.preferredCodecV")
    rtc_remb_bit_rate: str = _key("rtc.rembBitRate")
    rtc_start_bitrate: str = _key("rtc.start_bitrate")
    rtc_tcp_port: str = _key("rtc.tcpPort")
    rtc_timeout_sec: str = _key("rtc.timeoutSec")
    rtmp_direct_proxy: str = _key("rtmp.directProxy")
    rtmp_enhanced: str = _key("rtmp.enhanced")
    rtmp_handshake_second: str = _key("rtmp.handshakeSecond")
    rtmp_keep_alive_second: str = _key("rtmp.keepAliveSecond")
    rtmp_port: int = _port("rtmp.port")
    rtmp_sslport: int = _port("rtmp.sslport")
    rtp_audio_mtu_size: str = _key("rtp.audioMtuSize")
    rtp_h264_stap_a: str = _key("rtp.h264_stap_a")
    rtp_low_latency: str = _key("rtp.lowLatency")
    rtp_rtp_max_size: str = _key("rtp.rtpMaxSize")
    rtp_video_mtu_size: str = _key("rtp.videoMtuSize")
    rtp_proxy_dump_dir: str = _key("rtp_proxy.dumpDir")
    rtp_proxy_gop_cache: str = _key("rtp_proxy.gop_cache")
    rtp_proxy_h264_pt: str = _key("rtp_proxy.h264_pt")
    rtp_proxy_h265_pt: str = _key("rtp_proxy.h265_pt")
    rtp_proxy_opus_pt: str = _key("rtp_proxy.opus_pt")
    rtp_proxy_port: int = _port("rtp_proxy.port")
    rtp_proxy_port_range: str = _key("rtp_proxy.port_range")
    rtp_proxy_ps_pt: str = _key("rtp_proxy.ps_pt")
    rtp_proxy_rtp_g711_dur_ms: str = _key("rtp_proxy.rtp_g711_dur_ms")
    rtp_proxy_timeout_sec: str = _key("rtp_proxy.timeoutSec")
    rtp_proxy_udp_recv_socket_buffer: str = _key("rtp_proxy.udp_recv_socket_buffer")
    rtsp_auth_basic: str = _key("rtsp.authBasic")
    rtsp_direct_proxy: str = _key("rtsp.directProxy")
    rtsp_handshake_second: str = _key("rtsp.handshakeSecond")
    rtsp_keep_alive_second: str = _key("rtsp.keepAliveSecond")
    rtsp_low_latency: str = _key("rtsp.lowLatency")
    rtsp_port: int = _port("rtsp.port")
    rtsp_rtp_transport_type: str = _key("rtsp.rtpTransportType")
    rtsp_sslport: int = _port("rtsp.sslport")
    shell_max_req_size: str = _key("shell.maxReqSize")
    shell_port: str = _key("shell.port")
    srt_latency_mul: str = _key("srt.latencyMul")
    srt_pkt_buf_size: str = _key("srt.pktBufSize")
    srt_port: str = _key("srt.port")
    srt_timeout_sec: str = _key("srt.timeoutSec")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ServerConfigData:
        """Build from a decoded JSON object; unknown keys are ignored.

        Raises TypeError for a value of the wrong JSON type and ValueError
        for a port that is not a quoted integer.
        """
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = f.metadata["key"]
            raw = data.get(key)
            if raw is None:
                continue
            if f.metadata.get("quoted_int"):
                values[f.name] = _decode_quoted_int(key, raw)
            else:
                values[f.name] = _decode_str(key, raw)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Encode every setting under its wire key; ports are quoted."""
        return {
            f.metadata["key"]: str(getattr(self, f.name))
            for f in fields(self)
        }


@dataclass
class GetServerConfigResponse(FixedHeader):
    """Reply to getServerConfig."""

    data: list[ServerConfigData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GetServerConfigResponse:
        header = FixedHeader.from_dict(data)
        items = data.get("data") or []
        return cls(
            code=header.code,
            msg=header.msg,
            data=[ServerConfigData.from_dict(item) for item in items],
        )


@dataclass
class SetServerConfigResponse(FixedHeader):
    """Reply to setServerConfig; ``changed`` counts the settings that changed."""

    changed: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SetServerConfigResponse:
        header = FixedHeader.from_dict(data)
        return cls(code=header.code, msg=header.msg, changed=int(data.get("changed") or 0))


@dataclass
class SetServerConfigRequest:
    """Settings to change; only fields that are not None are sent."""

    api_api_debug: str | None = _opt("api.apiDebug")
    api_default_snap: str | None = _opt("api.defaultSnap")
    api_download_root: str | None = _opt("api.downloadRoot")
    api_secret: str | None = _opt(_CREDENTIAL_FIELD)
    api_snap_root: str | None = _opt("api.snapRoot")
    cluster_origin_url: str | None = _opt("cluster.origin_url")
    cluster_retry_count: str | None = _opt("cluster.retry_count")
    cluster_timeout_sec: str | None = _opt("cluster.timeout_sec")
    ffmpeg_bin: str | None = _opt("ffmpeg.bin")
    ffmpeg_cmd: str | None = _opt("ffmpeg.cmd")
    ffmpeg_log: str | None = _opt("ffmpeg.log")
    ffmpeg_restart_sec: str | None = _opt("ffmpeg.restart_sec")
    ffmpeg_snap: str | None = _opt("ffmpeg.snap")
    general_broadcast_player_count_changed: str | None = _opt("general.broadcast_player_count_changed")
    general_check_nvidia_dev: str | None = _opt("general.check_nvidia_dev")
    general_enable_vhost: str | None = _opt("general.enableVhost")
    general_enable_ffmpeg_log: str | None = _opt("general.enable_ffmpeg_log")
    general_flow_threshold: str | None = _opt("general.flowThreshold")
    general_listen_ip: str | None = _opt("general.listen_ip")
    general_max_stream_wait_ms: str | None = _opt("general.maxStreamWaitMS")
    general_media_server_id: str | None = _opt("general.mediaServerId")
    general_merge_write_ms: str | None = _opt("general.mergeWriteMS")
    general_reset_when_re_play: str | None = _opt("general.resetWhenRePlay")
    general_stream_none_reader_delay_ms: str | None = _opt("general.streamNoneReaderDelayMS")
    general_unready_frame_cache: str | None = _opt("general.unready_frame_cache")
    general_wait_add_track_ms: str | None = _opt("general.wait_add_track_ms")
    general_wait_audio_track_data_ms: str | None = _opt("general.wait_audio_track_data_ms")
    general_wait_track_ready_ms: str | None = _opt("general.wait_track_ready_ms")
    hls_broadcast_record_ts: str | None = _opt("hls.broadcastRecordTs")
    hls_delete_delay_sec: str | None = _opt("hls.deleteDelaySec")
    hls_fast_register: str | None = _opt("hls.fastRegister")
    hls_file_buf_size: str | None = _opt("hls.fileBufSize")
    hls_seg_delay: str | None = _opt("hls.segDelay")
    hls_seg_dur: str | None = _opt("hls.segDur")
    hls_seg_keep: str | None = _opt("hls.segKeep")
    hls_seg_num: str | None = _opt("hls.segNum")
    hls_seg_retain: str | None = _opt("hls.segRetain")
    hook_alive_interval: str | None = _opt("hook.alive_interval")
    hook_enable: str | None = _opt("hook.enable")
    hook_on_flow_report: str | None = _opt("hook.on_flow_report")
    hook_on_http_access: str | None = _opt("hook.on_http_access")
    hook_on_play: str | None = _opt("hook.on_play")
    hook_on_publish: str | None = _opt("hook.on_publish")
    hook_on_record_mp4: str | None = _opt("hook.on_record_mp4")
    hook_on_record_ts: str | None = _opt("hook.on_record_ts")
    hook_on_rtp_server_timeout: str | None = _opt("hook.on_rtp_server_timeout")
    hook_on_rtsp_auth: str | None = _opt("hook.on_rtsp_auth")
    hook_on_rtsp_realm: str | None = _opt("hook.on_rtsp_realm")
    hook_on_send_rtp_stopped: str | None = _opt("hook.on_send_rtp_stopped")
    hook_on_server_exited: str | None = _opt("hook.on_server_exited")
    hook_on_server_keepalive: str | None = _opt("hook.on_server_keepalive")
    hook_on_server_started: str | None = _opt("hook.on_server_started")
    hook_on_shell_login: str | None = _opt("hook.on_shell_login")
    hook_on_stream_changed: str | None = _opt("hook.on_stream_changed")
    hook_on_stream_none_reader: str | None = _opt("hook.on_stream_none_reader")
    hook_on_stream_not_found: str | None = _opt("hook.on_stream_not_found")
    hook_retry: str | None = _opt("hook.retry")
    hook_retry_delay: str | None = _opt("hook.retry_delay")
    hook_stream_changed_schemas: str | None = _opt("hook.stream_changed_schemas")
    # Timeout of the HTTP POST issued when an event fires.
    hook_timeout_sec: str | None = _opt("hook.timeoutSec")
    http_allow_cross_domains: str | None = _opt("http.allow_cross_domains")
    http_allow_ip_range: str | None = _opt("http.allow_ip_range")
    http_char_set: str | None = _opt("http.charSet")
    http_dir_menu: str | None = _opt("http.dirMenu")
    http_forbid_cache_suffix: str | None = _opt("http.forbidCacheSuffix")
    http_forwarded_ip_header: str | None = _opt("http.forwarded_ip_header")
    http_keep_alive_second: str | None = _opt("http.keepAliveSecond")
    http_max_req_size: str | None = _opt("http.maxReqSize")
    http_not_found: str | None = _opt("http.notFound")
    http_port: str | None = _opt("http.port")
    http_root_path: str | None = _opt("http.rootPath")
    http_send_buf_size: str | None = _opt("http.sendBufSize")
    http_sslport: str | None = _opt("http.sslport")
    http_virtual_path: str | None = _opt("http.virtualPath")
    multicast_addr_max: str | None = _opt("multicast.addrMax")
    multicast_addr_min: str | None = _opt("multicast.addrMin")
    multicast_udp_ttl: str | None = _opt("multicast.udpTTL")
    protocol_add_mute_audio: str | None = _opt("protocol.add_mute_audio")
    protocol_auto_close: str | None = _opt("protocol.auto_close")
    protocol_continue_push_ms: str | None = _opt("protocol.continue_push_ms")
    protocol_enable_audio: str | None = _opt("protocol.enable_audio")
    protocol_enable_fmp4: str | None = _opt("protocol.enable_fmp4")
    protocol_enable_hls: str | None = _opt("protocol.enable_hls")
    protocol_enable_hls_fmp4: str | None = _opt("protocol.enable_hls_fmp4")
    protocol_enable_mp4: str | None = _opt("protocol.enable_mp4")
    protocol_enable_rtmp: str | None = _opt("protocol.enable_rtmp")
    protocol_enable_rtsp: str | None = _opt("protocol.enable_rtsp")
    protocol_enable_ts: str | None = _opt("protocol.enable_ts")
    protocol_fmp4_demand: str | None = _opt("protocol.fmp4_demand")
    protocol_hls_demand: str | None = _opt("protocol.hls_demand")
    protocol_hls_save_path: str | None = _opt("protocol.hls_save_path")
    protocol_modify_stamp: str | None = _opt("protocol.modify_stamp")
    protocol_mp4_as_player: str | None = _opt("protocol.mp4_as_player")
    protocol_mp4_max_second: str | None = _opt("protocol.mp4_max_second")
    protocol_mp4_save_path: str | None = _opt("protocol.mp4_save_path")
    protocol_paced_sender_ms: str | None = _opt("protocol.paced_sender_ms")
    protocol_rtmp_demand: str | None = _opt("protocol.rtmp_demand")
    protocol_rtsp_demand: str | None = _opt("protocol.rtsp_demand")
    protocol_ts_demand: str | None = _opt("protocol.ts_demand")
    record_app_name: str | None = _opt("record.appName")
    record_enable_fmp4: str | None = _opt("record.enableFmp4")
    record_fast_start: str | None = _opt("record.fastStart")
    record_file_buf_size: str | None = _opt("record.fileBufSize")
    record_file_repeat: str | None = _opt("record.fileRepeat")
    record_sample_ms: str | None = _opt("record.sampleMS")
    rtc_datachannel_echo: str | None = _opt("rtc.datachannel_echo")
    rtc_extern_ip: str | None = _opt("rtc.externIP")
    rtc_max_rtp_cache_ms: str | None = _opt("rtc.maxRtpCacheMS")
    rtc_max_rtp_cache_size: str | None = _opt("rtc.maxRtpCacheSize")
    rtc_max_bitrate: str | None = _opt("rtc.max_bitrate")
    rtc_min_bitrate: str | None = _opt("rtc.min_bitrate")
    rtc_nack_interval_ratio: str | None = _opt("rtc.nackIntervalRatio")
    rtc_nack_max_count: str | None = _opt("rtc.nackMaxCount")
    rtc_nack_max_ms: str | None = _opt("rtc.nackMaxMS")
    rtc_nack_max_size: str | None = _opt("rtc.nackMaxSize")
    rtc_nack_rtp_size: str | None = _opt("rtc.nackRtpSize")
    rtc_port: str | None = _opt("rtc.port")
    rtc_preferred_codec_a: str | None = _opt("rtc.preferredCodecA")
    rtc_preferred_codec_v: str | None = _opt("rtc.preferredCodecV")
    rtc_remb_bit_rate: str | None = _opt("rtc.rembBitRate")
    rtc_start_bitrate: str | None = _opt("rtc.start_bitrate")
    rtc_tcp_port: str | None = _opt("rtc.tcpPort")
    rtc_timeout_sec: str | None = _opt("rtc.timeoutSec")
    rtmp_direct_proxy: str | None = _opt("rtmp.directProxy")
    rtmp_enhanced: str | None = _opt("rtmp.enhanced")
    rtmp_handshake_second: str | None = _opt("rtmp.handshakeSecond")
    rtmp_keep_alive_second: str | None = _opt("rtmp.keepAliveSecond")
    rtmp_port: str | None = _opt("rtmp.port")
    rtmp_sslport: str | None = _opt("rtmp.sslport")
    rtp_audio_mtu_size: str | None = _opt("rtp.audioMtuSize")
    rtp_h264_stap_a: str | None = _opt("rtp.h264_stap_a")
    rtp_low_latency: str | None = _opt("rtp.lowLatency")
    rtp_rtp_max_size: str | None = _opt("rtp.rtpMaxSize")
    rtp_video_mtu_size: str | None = _opt("rtp.videoMtuSize")
    rtp_proxy_dump_dir: str | None = _opt("rtp_proxy.dumpDir")
    rtp_proxy_gop_cache: str | None = _opt("rtp_proxy.gop_cache")
    rtp_proxy_h264_pt: str | None = _opt("rtp_proxy.h264_pt")
    rtp_proxy_h265_pt: str | None = _opt("rtp_proxy.h265_pt")
    rtp_proxy_opus_pt: str | None = _opt("rtp_proxy.opus_pt")
    rtp_proxy_port: str | None = _opt("rtp_proxy.port")
    rtp_proxy_port_range: str | None = _opt("rtp_proxy.port_range")
    rtp_proxy_ps_pt: str | None = _opt("rtp_proxy.ps_pt")
    rtp_proxy_rtp_g711_dur_ms: str | None = _opt("rtp_proxy.rtp_g711_dur_ms")
    rtp_proxy_timeout_sec: str | None = _opt("rtp_proxy.timeoutSec")
    rtp_proxy_udp_recv_socket_buffer: str | None = _opt("rtp_proxy.udp_recv_socket_buffer")
    rtsp_auth_basic: str | None = _opt("rtsp.authBasic")
    rtsp_direct_proxy: str | None = _opt("rtsp.directProxy")
    rtsp_handshake_second: str | None = _opt("rtsp.handshakeSecond")
    rtsp_keep_alive_second: str | None = _opt("rtsp.keepAliveSecond")
    rtsp_low_latency: str | None = _opt("rtsp.lowLatency")
    rtsp_port: str | None = _opt("rtsp.port")
    rtsp_rtp_transport_type: str | None = _opt("rtsp.rtpTransportType")
    rtsp_sslport: str | None = _opt("rtsp.sslport")
    shell_max_req_size: str | None = _opt("shell.maxReqSize")
    shell_port: str | None = _opt("shell.port")
    srt_latency_mul: str | None = _opt("srt.latencyMul")
    srt_pkt_buf_size: str | None = _opt("srt.pktBufSize")
    srt_port: str | None = _opt("srt.port")
    srt_timeout_sec: str | None = _opt("srt.timeoutSec")

    def to_dict(self) -> dict[str, str]:
        """Encode the settings that are set; an empty string is still sent."""
        return {
            f.metadata["key"]: value
            for f in fields(self)
            if (value := getattr(self, f.name)) is not None
        }