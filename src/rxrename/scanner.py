"""目录扫描器

只扫描一层目录，为每个条目产出 FileEntry 或 SkippedEntry。
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from rxrename.models import FileEntry, SkippedEntry

logger = logging.getLogger(__name__)

ScanItem = FileEntry | SkippedEntry


class DirectoryScanner:
    """目录扫描器 - 逐条目检查，单个条目出错不影响其余条目"""

    def scan(self, folder: Path) -> Iterator[ScanItem]:
        """扫描目录下的直接子项

        顺序取决于文件系统，不做排序。

        Args:
            folder: 要扫描的目录

        Yields:
            每个条目对应的 FileEntry 或 SkippedEntry

        Raises:
            OSError: 目录本身无法读取
        """
        folder = Path(folder)
        with os.scandir(folder) as entries:
            for entry in entries:
                yield self._check_entry(entry)

    def _check_entry(self, entry: os.DirEntry) -> ScanItem:
        """检查单个条目

        Args:
            entry: os.scandir 返回的条目

        Returns:
            合法文件返回 FileEntry，否则返回带原因的 SkippedEntry
        """
        path = Path(entry.path)

        try:
            # 不跟随符号链接，指向目录的链接按普通条目处理
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            return self._skip(path, f"无法读取条目信息: {e}")

        if is_dir:
            return self._skip(path, "跳过目录")

        try:
            entry.name.encode("utf-8")
        except UnicodeEncodeError:
            return self._skip(path, "文件名不是合法的 UTF-8")

        parent = path.parent
        if parent == path:
            return self._skip(path, "条目没有父目录")

        return FileEntry(file_name=entry.name, parent=parent)

    @staticmethod
    def _skip(path: Path, reason: str) -> SkippedEntry:
        skipped = SkippedEntry(path=path, reason=reason)
        logger.debug(skipped.message)
        return skipped
