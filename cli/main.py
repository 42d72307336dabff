"""
@PURPOSE: CLI 主入口 - 封装 pytest 调用, 列出场景目录
@OUTLINE:
  - app: Typer 主应用
  - version(): 版本信息
  - scenarios(): 场景目录
  - run(): 组装 pytest 参数并执行 e2e 用例
  - build_pytest_args(): 组装 pytest 参数
  - find_e2e_tests_dir(): 定位 e2e 用例目录
@GOTCHAS:
  - 用例选择/并行等完全交给 pytest, 这里只做参数转换
  - 并行(-n)需要安装 pytest-xdist, 顺序组通过 xdist_group 固定在同一 worker
  - 确保 Playwright 浏览器已安装(playwright install chromium)
  - 用例目录优先取当前目录下的 tests/e2e, 其次是源码检出中的目录
@DEPENDENCIES:
  - 内部: cli.commands.*, config.settings, src.scenarios
  - 外部: typer, rich, pytest
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
import typer
from rich.console import Console
from rich.table import Table

from cli.commands.config import config_app
from config.settings import settings
from src.scenarios import SCENARIO_GROUPS

__version__ = "0.1.0"

# 源码检出中的用例目录; 非 editable 安装时 tests/ 不随包分发
E2E_TESTS_DIR = Path(__file__).resolve().parent.parent / "tests" / "e2e"

app = typer.Typer(
    name="mercari-e2e",
    help="メルカリ カテゴリー検索 / 検索履歴 E2E テスト",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(config_app, name="config")


@app.command()
def version():
    """显示版本信息."""
    console.print("\n[bold cyan]mercari-e2e[/bold cyan]")
    console.print(f"版本: [bold]{__version__}[/bold]")
    console.print("\n环境配置:")
    console.print(f"  环境: {settings.environment}")
    console.print(f"  站点: {settings.base_url}")
    console.print(f"  Python: {sys.version.split()[0]}")


@app.command()
def scenarios():
    """列出内置场景目录."""
    table = Table(title="Scenarios")
    table.add_column("Group", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("第1カテゴリー")
    table.add_column("第2カテゴリー")
    table.add_column("第3カテゴリー")
    table.add_column("Mode")

    for group in SCENARIO_GROUPS.values():
        mode = "serial" if group.sequential else "parallel"
        for index, scenario in enumerate(group.scenarios, 1):
            table.add_row(group.name, str(index), *scenario.as_tuple(), mode)

    console.print(table)


def find_e2e_tests_dir(cwd: Path | None = None) -> Path:
    """定位 e2e 用例目录.

    Args:
        cwd: 起始目录, 默认当前工作目录

    Returns:
        cwd/tests/e2e 存在时返回它, 否则返回 E2E_TESTS_DIR
    """
    candidate = (cwd or Path.cwd()) / "tests" / "e2e"
    if candidate.is_dir():
        return candidate
    return E2E_TESTS_DIR


def build_pytest_args(
    site_url: str | None = None,
    headed: bool = False,
    keyword: str | None = None,
    workers: int | None = None,
    extra: list[str] | None = None,
) -> list[str]:
    """组装 pytest 参数.

    Examples:
        >>> build_pytest_args(workers=2)[-3:]
        ['-n', '2', '--dist=loadgroup']
    """
    args = [str(find_e2e_tests_dir()), "--run-e2e"]
    if site_url:
        args += ["--site-url", site_url]
    if headed:
        args.append("--headed")
    if keyword:
        args += ["-k", keyword]
    if extra:
        args += list(extra)
    if workers and workers > 1:
        args += ["-n", str(workers), "--dist=loadgroup"]
    return args


@app.command()
def run(
    site_url: str | None = typer.Option(None, "--site-url", help="覆盖被测站点 URL"),
    headed: bool = typer.Option(False, "--headed", help="显示浏览器窗口"),
    debug: bool = typer.Option(False, "--debug", help="输出调试日志(等同 DEBUG=1)"),
    keyword: str | None = typer.Option(None, "-k", help="pytest -k 表达式"),
    workers: int | None = typer.Option(None, "-n", "--workers", help="并行 worker 数"),
):
    """执行 e2e 用例.

    需要在项目根目录(或 editable 安装的源码检出)中执行, 用例目录不随包安装。

    Examples:
        mercari-e2e run
        mercari-e2e run --headed --debug -k history
    """
    tests_dir = find_e2e_tests_dir()
    if not tests_dir.is_dir():
        console.print(f"[red]找不到 e2e 用例目录: {tests_dir}[/red]")
        raise typer.Exit(1)

    if debug:
        # settings 已在导入时创建, 同时更新实例
        os.environ["DEBUG"] = "1"
        settings.debug = True

    args = build_pytest_args(site_url, headed, keyword, workers)
    console.print(f"[bold blue]pytest {' '.join(args)}[/bold blue]")
    exit_code = pytest.main(args)
    raise typer.Exit(int(exit_code))


if __name__ == "__main__":
    app()
