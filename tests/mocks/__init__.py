"""
@PURPOSE: 测试 Mock 模块
@OUTLINE:
  - MockPage / MockLocator / MockElementHandle: 页面级 Mock
  - MockPlaywright / MockBrowser / MockBrowserContext: Playwright 核心对象 Mock
"""

from .browser_mock import (
    MockConsoleMessage,
    MockElementHandle,
    MockLocator,
    MockPage,
)
from .playwright_mock import (
    MockAsyncPlaywright,
    MockBrowser,
    MockBrowserContext,
    MockBrowserType,
    MockPlaywright,
)

__all__ = [
    "MockAsyncPlaywright",
    "MockBrowser",
    "MockBrowserContext",
    "MockBrowserType",
    "MockConsoleMessage",
    "MockElementHandle",
    "MockLocator",
    "MockPage",
    "MockPlaywright",
]
