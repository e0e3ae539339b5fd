from __future__ import annotations

import pytest

import consts
from fbnotation import FixedBitNotation


@pytest.fixture
def b32():
    return FixedBitNotation(5, consts.BASE32_CHARS, True, True)


@pytest.fixture
def write_input(tmp_path):
    def _write(data, name="input"):
        path = tmp_path / name
        if isinstance(data, str):
            data = data.encode()
        path.write_bytes(data)
        return str(path)

    return _write
