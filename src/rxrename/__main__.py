"""rxrename CLI 入口点"""

import io
import sys

from rxrename.cli import app


def setup_utf8_output():
    """Windows 下将 stdout/stderr 切换为 UTF-8，避免非 ASCII 文件名输出乱码"""
    if sys.platform != "win32":
        return
    for name in ("stdout", "stderr"):
        stream = getattr(sys, name)
        if hasattr(stream, "buffer"):
            setattr(
                sys,
                name,
                io.TextIOWrapper(
                    stream.buffer, encoding="utf-8", errors="replace", line_buffering=True
                ),
            )


def main():
    setup_utf8_output()
    app(prog_name="rxrename")


if __name__ == "__main__":
    main()
