"""
@PURPOSE: 搜索履历控制器, 打开搜索框后统计搜索履历区块中的条目
@OUTLINE:
  - class SearchHistoryController: 搜索履历控制器
  - async def count_entries(): 统计履历条目(区块不存在时为 0)
  - async def verify_not_empty(): 打开搜索框并校验履历条目数 > 0
@GOTCHAS:
  - 履历在同一浏览器上下文内累积, 需在执行过搜索的同一页面上检查
@DEPENDENCIES:
  - 内部: .base, src.errors, src.utils
"""

from __future__ import annotations

from loguru import logger

from ..errors import SearchHistoryEmptyError
from ..utils.dom_helpers import count_items_in_section
from ..utils.logger_setup import log_debug, log_step
from .base import MercariPageController


class SearchHistoryController(MercariPageController):
    """搜索履历控制器."""

    async def count_entries(self) -> int:
        """统计搜索履历条目数."""
        return await count_items_in_section(
            self.page,
            self.resolver.css_for("search_history_section"),
            self.resolver.css_for("search_history_item"),
        )

    async def verify_not_empty(self) -> int:
        """打开搜索框并校验搜索履历非空.

        Returns:
            履历条目数

        Raises:
            SearchHistoryEmptyError: 条目数不大于 0
        """
        log_debug('**Start testing "Search history"')
        await self.open_search_box()

        log_step("3. 検索履歴を検証")
        count = await self.count_entries()
        log_debug(f"search history items: {count}")
        if count <= 0:
            raise SearchHistoryEmptyError(count)
        logger.success(f"✓ 検索履歴: {count} 件")
        return count
