"""文件重命名器

逐个条目计算新名称，预览或执行重命名。单个条目失败只记录，不中断批次。
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from rxrename.models import (
    FileEntry,
    RenameDecision,
    RenameFailure,
    RenameOptions,
    RenameResult,
    SkippedEntry,
)
from rxrename.patterns import RenamePattern

logger = logging.getLogger(__name__)


def _ignore(_item: object) -> None:
    return None


class FileRenamer:
    """文件重命名器"""

    def __init__(
        self,
        pattern: RenamePattern,
        options: RenameOptions | None = None,
        on_preview: Callable[[RenameDecision], None] = _ignore,
        on_skip: Callable[[SkippedEntry], None] = _ignore,
        on_failure: Callable[[RenameFailure], None] = _ignore,
    ):
        """初始化重命名器

        Args:
            pattern: 已编译的模式
            options: 运行选项，默认只预览
            on_preview: 预览模式下每个有改动的决定的回调
            on_skip: 扫描阶段被跳过条目的回调
            on_failure: 重命名失败的回调
        """
        self.pattern = pattern
        self.options = options or RenameOptions()
        self.on_preview = on_preview
        self.on_skip = on_skip
        self.on_failure = on_failure

    def decide(self, entry: FileEntry) -> RenameDecision:
        """计算单个文件的新名称"""
        return RenameDecision(
            entry=entry, new_name=self.pattern.replace_first(entry.file_name)
        )

    def run(self, items: Iterable[FileEntry | SkippedEntry]) -> RenameResult:
        """处理扫描结果

        Args:
            items: DirectoryScanner.scan 的产出

        Returns:
            统计结果
        """
        result = RenameResult()

        for item in items:
            if isinstance(item, SkippedEntry):
                result.skipped += 1
                self.on_skip(item)
                continue

            decision = self.decide(item)

            if not self.options.force:
                # 预览模式不报告名称不变的条目
                if decision.is_identity:
                    result.unchanged += 1
                    continue
                self.on_preview(decision)
                if decision.has_plain_target:
                    result.renamed += 1
                else:
                    # 执行时会被拒绝，预览阶段就计为失败
                    self._record_failure(result, self._invalid_target(decision))
                continue

            # 执行模式下名称不变的条目同样调用 rename，对文件系统无影响
            failure = self.rename_single(decision)
            if failure is not None:
                self._record_failure(result, failure)
            elif decision.is_identity:
                result.unchanged += 1
            else:
                result.renamed += 1

        return result

    def rename_single(self, decision: RenameDecision) -> RenameFailure | None:
        """在同一目录内重命名单个文件

        不预先检查目标是否存在，覆盖等行为取决于平台。

        Args:
            decision: 重命名决定

        Returns:
            失败时返回 RenameFailure，成功返回 None
        """
        src: Path = decision.source
        tgt: Path = decision.target

        if not decision.has_plain_target:
            return self._invalid_target(decision)

        try:
            src.rename(tgt)
        except OSError as e:
            failure = RenameFailure(decision=decision, error=str(e))
            logger.debug(failure.message)
            return failure

        if not decision.is_identity:
            logger.info(f"重命名: {decision}")
        return None

    def _record_failure(self, result: RenameResult, failure: RenameFailure) -> None:
        result.failed += 1
        result.failures.append(failure)
        self.on_failure(failure)

    @staticmethod
    def _invalid_target(decision: RenameDecision) -> RenameFailure:
        failure = RenameFailure(
            decision=decision, error=f"目标名称无效: {decision.new_name!r}"
        )
        logger.debug(failure.message)
        return failure
