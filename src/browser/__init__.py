"""
@PURPOSE: 浏览器自动化模块,封装 Playwright 操作和页面控制器
@OUTLINE:
  - BrowserManager: 浏览器管理器
  - SelectorResolver: 选择器契约解析
  - CategorySearchController: 类目搜索控制器
  - SearchHistoryController: 搜索履历控制器
@DEPENDENCIES:
  - 外部: playwright
@RELATED: ../workflows/, ../../config/
"""

from .browser_manager import BrowserManager
from .category_search_controller import CategorySearchController
from .search_history_controller import SearchHistoryController
from .selector_resolver import SelectorResolver, load_selector_config

__all__ = [
    "BrowserManager",
    "CategorySearchController",
    "SearchHistoryController",
    "SelectorResolver",
    "load_selector_config",
]
