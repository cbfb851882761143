"""rxrename 数据模型

输入参数使用 Pydantic 校验，扫描和重命名过程中的记录使用 dataclass。
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class PatternPair(BaseModel):
    """匹配模式与替换模板

    两个字段都必须能编译为正则表达式。to_template 实际只作为替换文本使用，
    这里对它的正则校验仅作为输入检查。
    """

    model_config = ConfigDict(frozen=True)

    from_pattern: str
    to_template: str

    @field_validator("from_pattern", "to_template")
    @classmethod
    def _must_compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"无效的正则表达式 {value!r}: {e}") from e
        return value


@dataclass(frozen=True)
class RenameOptions:
    """运行选项（来自命令行参数）"""

    force: bool = False  # 实际执行重命名；否则只预览
    verbose: bool = False  # 输出逐条目诊断信息


@dataclass(frozen=True)
class FileEntry:
    """目录中的一个待处理文件"""

    file_name: str  # 文件名（合法 UTF-8）
    parent: Path  # 所在目录

    @property
    def path(self) -> Path:
        return self.parent / self.file_name


@dataclass(frozen=True)
class SkippedEntry:
    """扫描时被跳过的条目"""

    path: Path
    reason: str

    @property
    def display_path(self) -> str:
        """可安全输出的路径（非 UTF-8 字节转义显示）"""
        return str(self.path).encode("utf-8", "backslashreplace").decode("utf-8")

    @property
    def message(self) -> str:
        return f"跳过 {self.display_path}: {self.reason}"


@dataclass(frozen=True)
class RenameDecision:
    """单个文件的重命名决定"""

    entry: FileEntry
    new_name: str

    @property
    def old_name(self) -> str:
        return self.entry.file_name

    @property
    def has_plain_target(self) -> bool:
        """新名称不含路径分隔符，重命名后仍留在原目录"""
        if self.new_name in ("", ".", ".."):
            return False
        separators = {os.sep, os.altsep} - {None}
        return not any(sep in self.new_name for sep in separators)

    @property
    def is_identity(self) -> bool:
        """新旧名称相同（无需改动）"""
        return self.old_name == self.new_name

    @property
    def source(self) -> Path:
        return self.entry.path

    @property
    def target(self) -> Path:
        return self.entry.parent / self.new_name

    def __str__(self) -> str:
        return f"{self.old_name} -> {self.new_name}"


@dataclass
class RenameFailure:
    """重命名失败记录"""

    decision: RenameDecision
    error: str

    @property
    def message(self) -> str:
        return f"无法重命名 {self.decision.source} -> {self.decision.new_name}: {self.error}"


@dataclass
class RenameResult:
    """一次运行的统计结果"""

    renamed: int = 0  # 已重命名（或预览中将被重命名）
    unchanged: int = 0  # 新旧名称相同
    failed: int = 0
    skipped: int = 0  # 扫描阶段跳过的条目
    failures: list[RenameFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.renamed + self.unchanged + self.failed + self.skipped
