"""rxrename CLI

使用 typer 实现命令行界面，rich 负责输出。
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from rxrename import __version__
from rxrename.models import (
    PatternPair,
    RenameDecision,
    RenameFailure,
    RenameOptions,
    RenameResult,
    SkippedEntry,
)
from rxrename.patterns import compile_pattern
from rxrename.renamer import FileRenamer
from rxrename.scanner import DirectoryScanner

app = typer.Typer(
    name="rxrename",
    help="按正则表达式批量重命名当前目录下的文件",
    no_args_is_help=True,
    add_completion=False,
)
console = Console(highlight=False, emoji=False)

# 命令行参数名 -> PatternPair 字段
_FIELD_NAMES = {"from_pattern": "FROM", "to_template": "TO"}


def _echo(text: str) -> None:
    """原样输出一行（不解析标记、不折行）"""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _print_preview(decision: RenameDecision) -> None:
    _echo(str(decision))


def _print_skip(skipped: SkippedEntry) -> None:
    _echo(skipped.message)


def _print_failure(failure: RenameFailure) -> None:
    _echo(failure.message)


def _print_summary(result: RenameResult, force: bool) -> None:
    if force:
        console.print(
            f"完成 (共 {result.total} 项): 重命名 {result.renamed}, 未改变 {result.unchanged}, "
            f"失败 {result.failed}, 跳过 {result.skipped}"
        )
    else:
        console.print(
            f"预览 (共 {result.total} 项): 将重命名 {result.renamed}, 未改变 {result.unchanged}, "
            f"失败 {result.failed}, 跳过 {result.skipped}"
        )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"rxrename {__version__}")
        raise typer.Exit()


@app.command()
def rename(
    from_pattern: Annotated[
        str,
        typer.Argument(metavar="FROM", help="匹配文件名的正则表达式"),
    ],
    to_template: Annotated[
        str,
        typer.Argument(metavar="TO", help="替换模板，支持 $1 / ${name} 引用捕获组"),
    ],
    force: Annotated[
        bool,
        typer.Option("-f", "--force", help="实际执行重命名（默认只预览）"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="输出被跳过条目和失败详情"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="显示版本号",
        ),
    ] = None,
) -> None:
    """对当前目录下每个文件名执行一次正则替换（只替换第一处匹配）"""
    try:
        pair = PatternPair(from_pattern=from_pattern, to_template=to_template)
    except ValidationError as e:
        for error in e.errors():
            field = _FIELD_NAMES.get(str(error["loc"][0]), str(error["loc"][0]))
            console.print(f"[red]错误:[/red] {field}: {escape(error['msg'])}")
        raise typer.Exit(1)

    pattern = compile_pattern(pair)
    options = RenameOptions(force=force, verbose=verbose)

    if not options.force:
        console.print("[yellow]以下改动仅为预览，传入 -f 后才会执行:[/yellow]")

    renamer = FileRenamer(pattern, options)
    if options.verbose:
        renamer.on_skip = _print_skip
        renamer.on_failure = _print_failure
    if not options.force:
        renamer.on_preview = _print_preview

    try:
        folder = Path.cwd()
        result = renamer.run(DirectoryScanner().scan(folder))
    except OSError as e:
        console.print(f"[red]错误:[/red] 无法读取目录: {escape(str(e))}")
        raise typer.Exit(1)

    if options.verbose:
        _print_summary(result, options.force)


if __name__ == "__main__":
    app()
