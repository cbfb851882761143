"""模式编译与替换模板

from 模式编译为正则表达式；to 模板解析为 ``$`` 风格的替换模板：

- ``$1`` / ``$name``：按编号或名称引用捕获组（名称取最长的 ``[0-9A-Za-z_]`` 序列）
- ``${1}`` / ``${name}``：带花括号的引用，可紧跟名称字符
- ``$$``：字面量 ``$``

不存在或未参与匹配的捕获组展开为空字符串。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from rxrename.models import PatternPair

logger = logging.getLogger(__name__)

_GROUP_REF = re.compile(r"\$(?:\{(?P<braced>[^}]+)\}|(?P<bare>[0-9A-Za-z_]+))")

# 模板片段：字面文本，或捕获组引用（编号 / 名称）
GroupRef = Union[int, str]


@dataclass(frozen=True)
class _Group:
    ref: GroupRef


TemplatePart = Union[str, _Group]


class ReplacementTemplate:
    """预先解析的替换模板"""

    def __init__(self, template: str):
        self.template = template
        self.parts = self._parse(template)

    @staticmethod
    def _parse(template: str) -> list[TemplatePart]:
        """将模板拆分为字面文本与捕获组引用

        Args:
            template: 原始模板字符串

        Returns:
            片段列表，相邻的字面文本已合并
        """
        parts: list[TemplatePart] = []
        literal: list[str] = []
        i = 0

        while i < len(template):
            char = template[i]
            if char != "$":
                literal.append(char)
                i += 1
                continue

            if template.startswith("$$", i):
                literal.append("$")
                i += 2
                continue

            match = _GROUP_REF.match(template, i)
            if match is None:
                # 无法构成引用的 $ 按字面处理
                literal.append("$")
                i += 1
                continue

            if literal:
                parts.append("".join(literal))
                literal = []
            name = match.group("braced") or match.group("bare")
            parts.append(_Group(_to_ref(name)))
            i = match.end()

        if literal:
            parts.append("".join(literal))
        return parts

    def expand(self, match: re.Match[str]) -> str:
        """用一次匹配结果展开模板"""
        pieces: list[str] = []
        for part in self.parts:
            if isinstance(part, str):
                pieces.append(part)
            else:
                pieces.append(_group_text(match, part.ref))
        return "".join(pieces)


def _to_ref(name: str) -> GroupRef:
    if name.isascii() and name.isdigit():
        return int(name)
    return name


def _group_text(match: re.Match[str], ref: GroupRef) -> str:
    if isinstance(ref, int):
        if ref > match.re.groups:
            return ""
    elif ref not in match.re.groupindex:
        return ""
    return match.group(ref) or ""


class RenamePattern:
    """已编译的 from 模式 + 替换模板"""

    def __init__(self, regex: re.Pattern[str], template: ReplacementTemplate):
        self.regex = regex
        self.template = template

    def replace_first(self, name: str) -> str:
        """替换 name 中第一处匹配；无匹配时原样返回"""
        return self.regex.sub(self.template.expand, name, count=1)


def compile_pattern(pair: PatternPair) -> RenamePattern:
    """由已校验的 PatternPair 构建 RenamePattern

    Args:
        pair: 通过校验的模式对

    Returns:
        RenamePattern 对象
    """
    regex = re.compile(pair.from_pattern)
    template = ReplacementTemplate(pair.to_template)
    logger.debug(
        f"编译模式: {pair.from_pattern!r} -> {pair.to_template!r} "
        f"({regex.groups} 个捕获组)"
    )
    return RenamePattern(regex, template)
