from __future__ import annotations

from typing import Any

from lib_bridge_scrub.application.ports import CodecPort, FlagPort, InvalidJson
from lib_bridge_scrub.application.use_cases import create_scrub_message
from lib_bridge_scrub.domain import Envelope, ScrubbingFlag


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def record(self, name: str, payload: Any = None) -> None:
        self.calls.append((name, payload))


class _FakeCodec(CodecPort):
    def __init__(self, recorder: _Recorder) -> None:
        self.recorder = recorder

    def load(self, payload: bytes | str) -> Any:
        self.recorder.record("load", payload)
        if payload == b"broken env":
            raise InvalidJson("broken")
        return {"env": payload}

    def decode_envelope(self, document: Any) -> Envelope:
        self.recorder.record("decode_envelope", document)
        return document

    def encode(self, value: Any) -> bytes:
        self.recorder.record("encode", value)
        return b"encoded"


class _StaticFlag(FlagPort):
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def is_enabled(self) -> bool:
        return self.enabled


def test_ports_are_runtime_checkable() -> None:
    assert isinstance(ScrubbingFlag(), FlagPort)
    assert isinstance(_FakeCodec(_Recorder()), CodecPort)


def test_scrub_message_calls_ports_in_pipeline_order() -> None:
    recorder = _Recorder()

    def shape(envelope: Envelope) -> None:
        recorder.record("shape", dict(envelope))
        envelope["env"] = "x"

    scrub = create_scrub_message(flag=_StaticFlag(True), codec=_FakeCodec(recorder), shape=shape)

    assert scrub(b"has env") == b"encoded"
    assert [name for name, _ in recorder.calls] == ["load", "decode_envelope", "shape", "encode"]
    assert recorder.calls[-1] == ("encode", {"env": "x"})


def test_scrub_message_stops_after_invalid_json() -> None:
    recorder = _Recorder()
    scrub = create_scrub_message(flag=_StaticFlag(True), codec=_FakeCodec(recorder), shape=lambda envelope: None)

    payload = b"broken env"
    assert scrub(payload) is payload
    assert [name for name, _ in recorder.calls] == ["load"]


def test_scrub_message_skips_codec_when_disabled() -> None:
    recorder = _Recorder()
    scrub = create_scrub_message(flag=_StaticFlag(False), codec=_FakeCodec(recorder), shape=lambda envelope: None)

    assert scrub(b"has env") == b"has env"
    assert recorder.calls == []
