"""Exchange message models and encoding helpers."""

import pytest
from pydantic import ValidationError

from dhkex.common.protocol import ModuloKeyMessage, PublicParameters
from dhkex.common.utils import b64d, b64e, bytes_to_int, int_to_bytes


def test_public_parameters_defaults():
    params = PublicParameters(p=23)
    assert params.g == 2
    assert params.model_dump() == {"type": "dh_params", "p": 23, "g": 2}


def test_public_parameters_from_json():
    params = PublicParameters.model_validate_json('{"type": "dh_params", "p": 23, "g": 5}')
    assert (params.p, params.g) == (23, 5)


@pytest.mark.parametrize("data", [
    {"p": 1},
    {"p": 23, "g": 1},
    {"g": 5},
    {"type": "dh_modulo_key", "p": 23},
])
def test_public_parameters_rejects_bad_input(data):
    with pytest.raises(ValidationError):
        PublicParameters.model_validate(data)


def test_messages_are_frozen():
    message = ModuloKeyMessage(m=8)
    with pytest.raises(ValidationError):
        message.m = 9


def test_int_encoding():
    assert int_to_bytes(0) == b"\x00"
    assert int_to_bytes(255) == b"\xff"
    assert int_to_bytes(256) == b"\x01\x00"
    assert bytes_to_int(b"\x01\x00") == 256
    assert b64e(int_to_bytes(23)) == "Fw=="
    assert bytes_to_int(b64d("Fw==")) == 23


def test_negative_int_rejected():
    with pytest.raises(ValueError):
        int_to_bytes(-1)
