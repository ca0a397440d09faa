"""Tests for WGDP probe encoding and response header decoding."""

import struct

import pytest

from wgdp.protocol import (
    PROBE_CODE_DISCOVERY,
    PROBE_TYPE_GWC,
    RECEIVE_PORT,
    RESPONSE_CODE_IP4,
    RESPONSE_TYPE_AP,
    SEND_PORT,
    APResponse,
    ResponseParseError,
    TruncatedResponseError,
    UnrecognizedResponseError,
    encode_probe,
)


class TestConstants:
    def test_ports(self):
        assert SEND_PORT == 2528
        assert RECEIVE_PORT == 2529

    def test_discriminators_are_ascii_tags(self):
        assert struct.pack(">I", PROBE_TYPE_GWC) == b"WGWC"
        assert struct.pack(">I", PROBE_CODE_DISCOVERY) == b"DISC"
        assert struct.pack(">I", RESPONSE_TYPE_AP) == b"WGAP"
        assert struct.pack(">I", RESPONSE_CODE_IP4) == b"IP4@"


class TestEncodeProbe:
    def test_length(self):
        assert len(encode_probe()) == 8

    def test_layout(self):
        """Type discriminator first, discovery code second, big-endian."""
        probe = encode_probe()
        assert probe[:4] == b"\x57\x47\x57\x43"
        assert probe[4:] == b"\x44\x49\x53\x43"

    def test_stable(self):
        assert encode_probe() == encode_probe()


class TestAPResponseDecode:
    def test_header_size(self):
        assert APResponse.HEADER_SIZE == 16
        assert struct.calcsize(APResponse.HEADER_FORMAT) == 16

    def test_decode_fields(self, make_response):
        data = make_response("AP\n", address=b"\x0a\x01\x05\x19", port=8080)
        response = APResponse.decode(data)
        assert response.address == b"\x0a\x01\x05\x19"
        assert response.port == 8080
        assert response.payload == b"AP\n"
        assert response.sysinfo == "AP\n"

    def test_port_is_unsigned(self, make_response):
        response = APResponse.decode(make_response("AP", port=0xFFFF))
        assert response.port == 65535

    def test_reserved_bytes_ignored(self, make_response):
        data = bytearray(make_response("AP"))
        data[14:16] = b"\xde\xad"
        response = APResponse.decode(bytes(data))
        assert response.payload == b"AP"

    def test_explicit_length_limits_payload(self, make_response):
        """Bytes past the given length are not part of the payload."""
        data = make_response("Office-AP") + b"\x00" * 32
        response = APResponse.decode(data, 16 + len("Office-AP"))
        assert response.payload == b"Office-AP"

    def test_bytearray_buffer(self, make_response):
        response = APResponse.decode(bytearray(make_response("AP")))
        assert isinstance(response.payload, bytes)

    def test_invalid_utf8_replaced(self, make_response):
        response = APResponse.decode(make_response(b"AP\xff\n"))
        assert response.sysinfo == "AP�\n"

    @pytest.mark.parametrize("size", [0, 1, 10, 15, 16])
    def test_header_only_or_shorter_is_truncated(self, make_response, size):
        """Anything of 16 bytes or fewer carries no sysinfo and is rejected."""
        data = make_response("")[:size]
        with pytest.raises(TruncatedResponseError):
            APResponse.decode(data)

    def test_length_beyond_buffer_is_truncated(self, make_response):
        data = make_response("AP")
        with pytest.raises(TruncatedResponseError):
            APResponse.decode(data, len(data) + 1)

    def test_length_at_header_size_is_truncated(self, make_response):
        data = make_response("Office-AP")
        with pytest.raises(TruncatedResponseError):
            APResponse.decode(data, 16)

    def test_wrong_type(self, make_response):
        data = make_response("AP", response_type=PROBE_TYPE_GWC)
        with pytest.raises(UnrecognizedResponseError) as exc_info:
            APResponse.decode(data)
        assert exc_info.value.response_type == PROBE_TYPE_GWC
        assert exc_info.value.response_code == RESPONSE_CODE_IP4

    def test_wrong_code(self, make_response):
        data = make_response("AP", response_code=0x49503640)
        with pytest.raises(UnrecognizedResponseError) as exc_info:
            APResponse.decode(data)
        assert exc_info.value.response_code == 0x49503640

    def test_own_probe_is_not_a_response(self):
        """Our own broadcast padded to response size is still rejected."""
        data = encode_probe() + b"\x00" * 16
        with pytest.raises(UnrecognizedResponseError):
            APResponse.decode(data)

    def test_errors_are_value_errors(self):
        assert issubclass(TruncatedResponseError, ResponseParseError)
        assert issubclass(UnrecognizedResponseError, ResponseParseError)
        assert issubclass(ResponseParseError, ValueError)

    def test_frozen(self, make_response):
        response = APResponse.decode(make_response("AP"))
        with pytest.raises(AttributeError):
            response.port = 1
