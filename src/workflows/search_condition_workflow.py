"""
@PURPOSE: 搜索条件工作流 - 打开首页, 执行类目下钻并校验; 以及共享页面的顺序执行会话
@OUTLINE:
  - async def run_search_condition(): 单个场景: 首页 → 类目下钻 → 校验第1类目
  - class SearchHistorySession: 顺序执行组的共享上下文(同一页面, 履历累积)
  - async def run(): 在共享页面上执行一个场景并记录
  - async def check_history(): 在共享页面上校验搜索履历非空
@GOTCHAS:
  - 场景内各步骤严格顺序执行, 没有重试
  - SearchHistorySession 的页面在整个分组内复用, 搜索履历的累积是其契约的一部分
@DEPENDENCIES:
  - 内部: src.browser, src.models
@RELATED: tests/e2e/test_search_condition.py
"""

from __future__ import annotations

from typing import Any

from loguru import logger
from playwright.async_api import Page

from ..browser.category_search_controller import CategorySearchController
from ..browser.search_history_controller import SearchHistoryController
from ..models.scenario import CategoryScenario, ScenarioGroup
from ..utils.logger_setup import get_logger_with_context


async def run_search_condition(
    page: Page,
    scenario: CategoryScenario,
    selectors: dict[str, Any] | None = None,
    base_url: str = "",
) -> str:
    """执行单个搜索条件场景.

    Args:
        page: Playwright 页面对象
        scenario: 三级类目场景
        selectors: 选择器契约条目(可选)
        base_url: 仅用于日志显示

    Returns:
        第1类目选择框的显示文本

    Raises:
        ElementNotFoundError: 选择框不存在
        CategoryMismatchError: 选中类目与期望不一致
    """
    log = get_logger_with_context(scenario=scenario.title)
    log.info(f"Search condition: {scenario.title}")

    controller = CategorySearchController(page, selectors)
    await controller.open_top_page(base_url)
    await controller.execute(scenario)
    return await controller.verify_first_category(scenario.first_category)


class SearchHistorySession:
    """顺序执行组的共享上下文.

    同一个会话内的场景共享一个页面(也就是同一个浏览器上下文),
    前面场景产生的搜索履历对后续步骤可见。

    Attributes:
        page: 共享页面
        group: 场景分组(可选, 用于校验顺序)
        executed: 已执行的场景, 按执行顺序

    Examples:
        >>> session = SearchHistorySession(page, SEARCH_HISTORY)
        >>> for scenario in SEARCH_HISTORY.scenarios:
        ...     await session.run(scenario)
        >>> await session.check_history()
        2
    """

    def __init__(
        self,
        page: Page,
        group: ScenarioGroup | None = None,
        selectors: dict[str, Any] | None = None,
        base_url: str = "",
    ):
        if page is None:
            raise RuntimeError("页面未创建")
        self.page = page
        self.group = group
        self.selectors = selectors
        self.base_url = base_url
        self.executed: list[CategoryScenario] = []

    async def run(self, scenario: CategoryScenario) -> str:
        """在共享页面上执行场景并记录."""
        if self.group is not None and self.group.sequential:
            position = len(self.executed)
            declared = self.group.scenarios[position] if position < len(self.group.scenarios) else None
            if declared != scenario:
                logger.warning(
                    f"执行顺序与分组声明不一致: declared={declared.title if declared else None}, "
                    f"actual={scenario.title}"
                )

        result = await run_search_condition(
            self.page, scenario, self.selectors, base_url=self.base_url
        )
        self.executed.append(scenario)
        return result

    async def check_history(self) -> int:
        """校验搜索履历非空.

        Returns:
            履历条目数

        Raises:
            SearchHistoryEmptyError: 条目数不大于 0
        """
        logger.info(f"Check search history (executed={len(self.executed)})")
        controller = SearchHistoryController(self.page, self.selectors)
        return await controller.verify_not_empty()
