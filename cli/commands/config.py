"""
@PURPOSE: CLI 配置命令 - 查看生效的配置
@OUTLINE:
  - config_app: Typer 配置命令组
  - show(): 显示配置
@DEPENDENCIES:
  - 内部: config.settings
  - 外部: typer, rich, pyyaml
"""

import json

import typer
import yaml
from rich.console import Console
from rich.syntax import Syntax

from config.settings import create_settings

config_app = typer.Typer(
    name="config",
    help="配置管理",
)

console = Console()


@config_app.command("show")
def show(
    env: str | None = typer.Option(None, "--env", help="环境名称"),
    format: str = typer.Option("yaml", "--format", "-f", help="输出格式(yaml/json)"),
):
    """显示当前配置.

    Examples:
        mercari-e2e config show
        mercari-e2e config show --env ci -f json
    """
    try:
        current = create_settings(env)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]✗[/red] 配置加载失败: {e}")
        raise typer.Exit(1) from None

    console.print(f"\n[bold]环境:[/bold] {current.environment}\n")
    config_dict = current.to_dict()

    if format == "json":
        output = json.dumps(config_dict, indent=2, ensure_ascii=False)
        syntax = Syntax(output, "json", theme="monokai", line_numbers=True)
    elif format == "yaml":
        output = yaml.dump(config_dict, allow_unicode=True, default_flow_style=False)
        syntax = Syntax(output, "yaml", theme="monokai", line_numbers=True)
    else:
        console.print(f"[red]✗[/red] 不支持的格式: {format}")
        raise typer.Exit(1)

    console.print(syntax)
