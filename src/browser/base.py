"""
@PURPOSE: 页面控制器基类, 提供选择器解析和共享的页面操作
@OUTLINE:
  - class MercariPageController: 控制器基类
  - async def open_top_page(): 打开站点首页
  - async def open_search_box(): 点击搜索框
@DEPENDENCIES:
  - 外部: playwright.async_api
  - 内部: .selector_resolver, src.utils.logger_setup
"""

from __future__ import annotations

from typing import Any

from playwright.async_api import Page

from ..utils.logger_setup import log_step
from .selector_resolver import SelectorResolver


class MercariPageController:
    """控制器基类.

    Attributes:
        page: Playwright 页面对象
        resolver: 选择器解析器
    """

    def __init__(self, page: Page, selectors: dict[str, Any] | None = None):
        """初始化控制器.

        Args:
            page: Playwright 页面对象
            selectors: 选择器契约条目, 为 None 时读取默认契约文件
        """
        if page is None:
            raise RuntimeError("页面未创建")
        self.page = page
        self.resolver = SelectorResolver(page, selectors)

    async def open_top_page(self, base_url: str = "") -> None:
        """打开站点首页(相对上下文的 base_url)."""
        log_step(f"1. メルカリのトップページを開く: {base_url or '/'}")
        await self.page.goto("/")

    async def open_search_box(self) -> None:
        log_step("2. 検索ボックスをクリック")
        await self.resolver.locator_for("search_box").click()
