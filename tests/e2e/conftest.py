"""
@PURPOSE: e2e 用例 fixtures - 会话级浏览器, 每个用例独立页面, 顺序组共享页面
@OUTLINE:
  - e2e_settings: 应用 --site-url 覆盖后的配置
  - browser_manager: 会话级浏览器管理器
  - page: 每个用例独立的上下文和页面, 失败时截图
  - search_history_session: 类级共享页面(顺序执行组)
  - shared_page_screenshot: 顺序执行组用例失败时截取共享页面
  - pytest_runtest_makereport(): 记录用例各阶段结果供截图判断
@GOTCHAS:
  - 所有异步 fixture 和用例运行在同一个会话级事件循环中
  - 使用 pytest-xdist 时, 顺序组依赖 --dist=loadgroup 固定在同一 worker
@DEPENDENCIES:
  - 外部: pytest, pytest-asyncio, playwright
  - 内部: src.browser, src.workflows, config.settings
"""

from __future__ import annotations

import re
from datetime import datetime

import pytest
import pytest_asyncio
from loguru import logger

from config.settings import Settings, settings
from src.browser.browser_manager import BrowserManager
from src.scenarios import SEARCH_HISTORY
from src.workflows.search_condition_workflow import SearchHistorySession


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def _call_failed(node) -> bool:
    report = getattr(node, "rep_call", None)
    return bool(report and report.failed)


@pytest.fixture(scope="session")
def e2e_settings(request) -> Settings:
    """应用命令行覆盖后的配置."""
    site_url = request.config.getoption("--site-url")
    if site_url:
        return settings.model_copy(update={"base_url": site_url.rstrip("/")})
    return settings


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(request, e2e_settings):
    """会话级浏览器管理器.

    Yields:
        BrowserManager: 已启动的管理器
    """
    headless = False if request.config.getoption("--headed") else None
    manager = BrowserManager(
        e2e_settings.browser,
        base_url=e2e_settings.base_url,
        debug=e2e_settings.debug,
    )
    await manager.start(headless=headless)
    yield manager
    await manager.close()


async def _screenshot_on_failure(manager: BrowserManager, page, name: str, config: Settings) -> None:
    if not config.browser.screenshot_on_failure:
        return
    safe_name = re.sub(r"[^\w.-]+", "_", name)
    target = config.get_absolute_path(config.artifacts_dir) / (
        f"{safe_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.png"
    )
    try:
        await manager.screenshot(page, target)
    except Exception as e:
        logger.warning(f"失败截图保存失败: {e}")


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, browser_manager, e2e_settings):
    """每个用例独立的页面(独立 BrowserContext)."""
    page = await browser_manager.new_page()
    yield page
    if _call_failed(request.node):
        await _screenshot_on_failure(browser_manager, page, request.node.name, e2e_settings)
    await browser_manager.close_page(page)


@pytest_asyncio.fixture(scope="class", loop_scope="session")
async def search_history_session(request, browser_manager, e2e_settings):
    """顺序执行组共享的会话, 组内所有用例使用同一个页面."""
    page = await browser_manager.new_page()
    session = SearchHistorySession(page, SEARCH_HISTORY, base_url=e2e_settings.base_url)
    yield session
    await browser_manager.close_page(page)


@pytest_asyncio.fixture(loop_scope="session")
async def shared_page_screenshot(request, browser_manager, search_history_session, e2e_settings):
    """顺序执行组的失败截图, 拍摄共享页面的当前状态."""
    yield
    if _call_failed(request.node):
        await _screenshot_on_failure(
            browser_manager, search_history_session.page, request.node.name, e2e_settings
        )
