# -*- encoding: utf-8 -*-
# @File   : conftest.py
# @Time   : 2026/10/17 15:20:31
# @Author : Kariko Lin

import pytest


@pytest.fixture
def sample_text() -> str:
    return (
        '; line comment\n'
        '# also a line comment\n'
        '[ignored-section-header]\n'
        'hello = World        ; inline comment stripped\n'
        '  Rust   =   Is great, trimmed at ends   \n'
        'test = "TEST"\n'
    )


@pytest.fixture
def typed_text() -> str:
    return 'flag = true\ncount = 42\npi = 3.14\nnames = a, b,, c\n'


@pytest.fixture
def write_cfg(tmp_path):
    """Write `text` to a file under `tmp_path`, returning its path."""
    def _write(text: str, name: str = 'config.cfg', encoding='utf-8'):
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _write
