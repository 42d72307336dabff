"""
@PURPOSE: 浏览器管理器, 使用 Playwright 管理浏览器实例, 为每个场景提供隔离的上下文和页面
@OUTLINE:
  - class BrowserManager: 浏览器管理器主类
  - async def start(): 启动 Playwright 和浏览器
  - async def new_page(): 创建独立上下文中的新页面(带 base_url/超时/console 转发)
  - async def close_page(): 关闭页面及其上下文
  - async def screenshot(): 整页截图
  - async def close(): 关闭所有上下文和浏览器
@GOTCHAS:
  - 必须使用 async/await 异步操作
  - 每个页面独占一个 BrowserContext, 互不共享 Cookie 与搜索履历
  - 需要共享状态的场景组应复用同一个页面, 而不是再次调用 new_page()
@DEPENDENCIES:
  - 外部: playwright, loguru
  - 内部: config.settings, src.utils.logger_setup
@RELATED: src/workflows/search_condition_workflow.py, tests/e2e/conftest.py
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)

from config.settings import BrowserConfig, settings

from ..utils.logger_setup import forward_console_debug


class BrowserManager:
    """浏览器管理器.

    Attributes:
        config: 浏览器配置
        base_url: 被测站点基础 URL
        playwright: Playwright 实例
        browser: 浏览器实例
        contexts: 当前打开的上下文

    Examples:
        >>> async with BrowserManager() as manager:
        ...     page = await manager.new_page()
        ...     await page.goto("/")
    """

    def __init__(
        self,
        config: BrowserConfig | None = None,
        base_url: str | None = None,
        debug: bool | None = None,
    ):
        """初始化管理器.

        Args:
            config: 浏览器配置, 默认使用 settings.browser
            base_url: 基础 URL, 默认使用 settings.base_url
            debug: 是否转发页面 console.debug, 默认使用 settings.debug
        """
        self.config = config or settings.browser
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.debug = settings.debug if debug is None else debug

        self.playwright: Playwright | None = None
        self.browser: Browser | None = None
        self.contexts: list[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def is_started(self) -> bool:
        return self.browser is not None

    async def start(self, headless: bool | None = None) -> None:
        """启动浏览器.

        Args:
            headless: 是否无头模式, None 则使用配置.
        """
        if self.is_started:
            return

        if headless is None:
            headless = self.config.headless

        logger.info(
            f"启动 Playwright 浏览器: {self.config.browser_name} "
            f"(headless={headless}, slow_mo={self.config.slow_mo})"
        )
        self.playwright = await async_playwright().start()
        browser_type = getattr(self.playwright, self.config.browser_name)
        self.browser = await browser_type.launch(
            headless=headless,
            slow_mo=self.config.slow_mo,
        )
        logger.success("✓ 浏览器已启动")

    async def new_page(self) -> Page:
        """在新的隔离上下文中创建页面.

        Returns:
            新页面

        Raises:
            RuntimeError: 浏览器未启动
        """
        if not self.browser:
            raise RuntimeError("浏览器未启动")

        context = await self.browser.new_context(
            base_url=self.base_url,
            locale=self.config.locale,
            timezone_id=self.config.timezone_id,
            viewport=self.config.viewport,
        )
        context.set_default_timeout(self.config.timeout)
        self.contexts.append(context)

        page = await context.new_page()
        if self.debug:
            forward_console_debug(page)
        logger.debug(f"已创建新页面 (contexts={len(self.contexts)})")
        return page

    async def close_page(self, page: Page) -> None:
        """关闭页面及其所属上下文."""
        context = page.context
        await context.close()
        if context in self.contexts:
            self.contexts.remove(context)

    async def screenshot(self, page: Page, path: str | Path) -> Path:
        """整页截图.

        Args:
            page: 页面
            path: 保存路径

        Returns:
            截图文件路径
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(target), full_page=True)
        logger.info(f"截图已保存: {target}")
        return target

    async def close(self) -> None:
        """关闭所有上下文和浏览器."""
        for context in list(self.contexts):
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"关闭上下文失败: {e}")
        self.contexts.clear()

        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None
        logger.info("浏览器已关闭")
