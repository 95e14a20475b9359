from __future__ import annotations

import json

import pytest

from lib_bridge_scrub.adapters.json_codec import JsonCodec
from lib_bridge_scrub.application.ports import CodecPort, InvalidJson
from lib_bridge_scrub.domain.errors import DecodeError, EncodeError


@pytest.fixture
def codec() -> JsonCodec:
    return JsonCodec()


def test_codec_satisfies_port(codec: JsonCodec) -> None:
    assert isinstance(codec, CodecPort)


def test_load_accepts_bytes_and_text(codec: JsonCodec) -> None:
    assert codec.load(b'{"a":[1,2]}') == {"a": [1, 2]}
    assert codec.load('{"a":null}') == {"a": None}


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        b'{"env":',
        b'{"env": [1,]}',
        b'{"env": NaN}',
        b'{"env": 1} trailing',
    ],
)
def test_load_raises_invalid_json(codec: JsonCodec, payload: bytes) -> None:
    with pytest.raises(InvalidJson):
        codec.load(payload)


def test_decode_envelope_requires_object(codec: JsonCodec) -> None:
    envelope = {"ActivityId": "a"}
    assert codec.decode_envelope(envelope) is envelope
    with pytest.raises(DecodeError, match="expected JSON object"):
        codec.decode_envelope(["env"])


def test_encode_keeps_markup_and_unicode_literal(codec: JsonCodec) -> None:
    encoded = codec.encode({"cmd": "<script>a && b</script>", "user": "jürgen"})
    assert encoded == '{"cmd":"<script>a && b</script>","user":"jürgen"}'.encode("utf-8")
    assert b"\\u003c" not in encoded


def test_encode_preserves_key_order(codec: JsonCodec) -> None:
    document = codec.load(b'{"z":1,"a":{"y":2,"b":3}}')
    assert codec.encode(document) == b'{"z":1,"a":{"y":2,"b":3}}'


def test_encode_rejects_unserialisable_values(codec: JsonCodec) -> None:
    with pytest.raises(EncodeError):
        codec.encode({"value": object()})


def test_encode_output_is_semantically_equal(codec: JsonCodec) -> None:
    original = b'{ "ActivityId" : "a",\n  "nested": {"list": [1, "two", null, true]} }'
    assert json.loads(codec.encode(codec.load(original))) == json.loads(original)


def test_load_replaces_invalid_utf8_instead_of_rejecting(codec: JsonCodec) -> None:
    assert codec.load(b'{"env":"a\xffb"}') == {"env": "a\ufffdb"}


def test_load_too_deep_nesting_is_a_decode_error(codec: JsonCodec) -> None:
    depth = 200_000
    payload = b'{"env":' + b"[" * depth + b"]" * depth + b"}"
    with pytest.raises(DecodeError, match="nested too deeply"):
        codec.load(payload)


def test_encode_replaces_lone_surrogates(codec: JsonCodec) -> None:
    document = codec.load(b'{"note":"x\\ud800y","pair":"\\ud83d\\ude00"}')
    assert codec.encode(document) == '{"note":"x\ufffdy","pair":"\U0001f600"}'.encode("utf-8")
