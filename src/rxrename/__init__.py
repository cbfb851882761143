"""rxrename - 正则表达式批量重命名工具

对当前目录下的文件名执行正则替换，默认只预览，传入 -f 后才执行。
"""

__version__ = "0.1.0"

from rxrename.models import (
    FileEntry,
    PatternPair,
    RenameDecision,
    RenameOptions,
    RenameResult,
    SkippedEntry,
)
from rxrename.patterns import ReplacementTemplate, RenamePattern, compile_pattern

__all__ = [
    "FileEntry",
    "PatternPair",
    "RenameDecision",
    "RenameOptions",
    "RenameResult",
    "SkippedEntry",
    "ReplacementTemplate",
    "RenamePattern",
    "compile_pattern",
]
