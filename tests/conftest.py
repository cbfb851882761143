"""测试公共 fixture"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """包含 a.txt、b.txt 和子目录 sub/ 的临时目录"""
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "inner.txt").write_text("inner")
    return tmp_path


@pytest.fixture
def non_utf8_file(tmp_path: Path) -> bytes:
    """创建一个文件名不是合法 UTF-8 的文件，文件系统不支持时跳过"""
    if os.name == "nt":
        pytest.skip("Windows 文件名始终是 Unicode")
    name = os.fsencode(tmp_path) + b"/bad\xff.txt"
    try:
        with open(name, "wb"):
            pass
    except OSError:
        pytest.skip("文件系统不接受非 UTF-8 文件名")
    return name
