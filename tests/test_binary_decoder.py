import re
import time

import pytest

from application.services.binary_decoder import (
    BinaryStringDecodeError,
    create_image_from_binary_string,
    decode_binary_string,
    encode_binary_string,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize(
    "binary_str",
    ["", "AA==", "/w==", "iVBORw0KGgo=", encode_binary_string(bytes(range(256)))],
)
def test_decode_then_encode_returns_input(binary_str):
    image = create_image_from_binary_string(binary_str)
    assert encode_binary_string(image.content) == binary_str


def test_empty_string_gives_zero_length_file():
    image = create_image_from_binary_string("")
    assert image.size == 0
    assert image.content == b""


@pytest.mark.parametrize("binary_str", ["", "SGVsbG8=", "iVBORw0KGgo="])
def test_mime_type_is_always_png(binary_str):
    assert create_image_from_binary_string(binary_str).content_type == "image/png"


def test_high_bytes_survive_decoding():
    assert decode_binary_string("/w==") == b"\xff"
    assert decode_binary_string("iVBORw0KGgo=") == PNG_SIGNATURE


def test_name_uses_pinned_timestamp():
    image = create_image_from_binary_string("AA==", now_ms=1700000000123)
    assert image.filename == "1700000000123.png"


def test_name_defaults_to_current_millis():
    before = int(time.time() * 1000) - 1
    image = create_image_from_binary_string("AA==")
    after = int(time.time() * 1000) + 1

    assert re.fullmatch(r"\d+\.png", image.filename)
    assert before <= int(image.filename[:-4]) <= after


def test_whitespace_and_missing_padding_are_tolerated():
    assert decode_binary_string("iVBO Rw0K\nGgo=") == PNG_SIGNATURE
    assert decode_binary_string("QQ") == b"A"
    assert decode_binary_string("QUI") == b"AB"


@pytest.mark.parametrize("binary_str", ["Q", "QQ=", "Q===", "QQ==QQ==", "%%%%", "héllo=="])
def test_malformed_input_raises(binary_str):
    with pytest.raises(BinaryStringDecodeError):
        create_image_from_binary_string(binary_str)


def test_decode_error_is_a_value_error():
    with pytest.raises(ValueError):
        decode_binary_string("*")


def test_decoded_file_is_immutable():
    image = create_image_from_binary_string("AA==")
    with pytest.raises(AttributeError):
        image.filename = "other.png"
