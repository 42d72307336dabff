"""
@PURPOSE: Pytest 配置文件，注册命令行选项、标记并初始化日志
@OUTLINE:
  - pytest_addoption(): --run-e2e / --site-url / --headed
  - pytest_configure(): 注册标记, 配置日志
  - pytest_collection_modifyitems(): 未开启 --run-e2e 时跳过 e2e 用例
@DEPENDENCIES:
  - 外部: pytest, pytest-asyncio
  - 内部: config.settings, src.utils.logger_setup
"""

import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
app_root = Path(__file__).parent
if str(app_root) not in sys.path:
    sys.path.insert(0, str(app_root))

pytest_plugins = ("pytest_asyncio", "pytester")


def pytest_addoption(parser):
    """注册 e2e 相关的命令行选项."""
    group = parser.getgroup("mercari-e2e")
    group.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="执行需要真实浏览器和网络的 e2e 用例",
    )
    group.addoption(
        "--site-url",
        action="store",
        default=None,
        help="覆盖被测站点 URL (默认 settings.base_url)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="显示浏览器窗口",
    )


def pytest_configure(config):
    """配置pytest."""
    config.addinivalue_line("markers", "e2e: 需要真实浏览器和网络的端到端用例")
    config.addinivalue_line("markers", "xdist_group(name): 同组用例固定在同一个 worker 上顺序执行")

    from src.utils.logger_setup import setup_logger

    setup_logger(force=True)


def pytest_collection_modifyitems(config, items):
    """未指定 --run-e2e 时跳过 e2e 用例."""
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="需要 --run-e2e 才会执行 e2e 用例")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
