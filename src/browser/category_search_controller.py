"""
@PURPOSE: 类目搜索控制器, 依次点击三级类目链接并校验类目选择框
@OUTLINE:
  - class CategorySearchController: 类目搜索控制器
  - async def execute(): 执行类目下钻(搜索框 → カテゴリーからさがす → 一级 → 二级 → 三级)
  - async def read_first_category(): 读取第1类目选择框当前显示文本
  - async def verify_first_category(): 校验第1类目选择框
@GOTCHAS:
  - 各步骤严格按顺序 await, 后一级链接只有在前一级点击后才会出现
  - 二级链接限定在 merListItem-container 范围内, 避免与一级同名链接冲突
  - 第2类目选择框(select:nth-of-type(2))无法稳定获取元素句柄, 暂不校验,
    契约中标记为 unstable
@DEPENDENCIES:
  - 外部: playwright, loguru
  - 内部: .base, src.errors, src.utils
@RELATED: search_history_controller.py, src/workflows/search_condition_workflow.py
"""

from __future__ import annotations

from loguru import logger

from ..errors import CategoryMismatchError, ElementNotFoundError
from ..models.scenario import CategoryScenario
from ..utils.dom_helpers import extract_selected_displayed_value, get_tag_name
from ..utils.logger_setup import is_debug_enabled, log_debug, log_step
from .base import MercariPageController

FIRST_CATEGORY_SELECT_NAME = "第1カテゴリー選択要素"


class CategorySearchController(MercariPageController):
    """类目搜索控制器.

    Examples:
        >>> controller = CategorySearchController(page)
        >>> await controller.execute(scenario)
        >>> await controller.verify_first_category("本・雑誌・漫画")
        '本・雑誌・漫画'
    """

    async def execute(self, scenario: CategoryScenario) -> None:
        """执行类目下钻.

        Args:
            scenario: 三级类目场景
        """
        log_debug(f'**Start testing "Search condition": {scenario.title}')
        await self.open_search_box()

        log_step("3. 「カテゴリーからさがす」リンクをクリック")
        await self.resolver.locator_for("category_browser_link").click()

        log_step(f"4. 第1カテゴリーとして {scenario.first_category} を選択")
        await self.resolver.locator_for(
            "top_category_link", name=scenario.first_category
        ).click()

        log_step(f"5. 第2カテゴリーとして {scenario.second_category} を選択")
        await self.resolver.locator_for(
            "sub_category_link", name=scenario.second_category
        ).click()

        log_step(f"6. 第3カテゴリーとして {scenario.third_category} を選択")
        await self.resolver.locator_for(
            "subsub_category_link", name=scenario.third_category
        ).click()

    async def read_first_category(self) -> str | None:
        """读取第1类目选择框当前选中项文本.

        Returns:
            选中项文本

        Raises:
            ElementNotFoundError: 选择框不存在
        """
        selector = self.resolver.css_for("first_category_select")

        if is_debug_enabled():
            category1 = self.page.locator(selector).first
            log_debug(f"category1: {category1}")
            if await category1.count() > 0:
                log_debug(f"tagName: {await get_tag_name(category1)}")

        handle = await self.page.query_selector(selector)
        if handle is None:
            raise ElementNotFoundError(FIRST_CATEGORY_SELECT_NAME, selector)

        value = await extract_selected_displayed_value(handle)
        log_debug(f"category1Value: {value}")
        return value

    async def verify_first_category(self, expected: str) -> str:
        """校验第1类目选择框显示的是期望类目.

        Args:
            expected: 期望的一级类目名称

        Returns:
            实际读取到的文本

        Raises:
            ElementNotFoundError: 选择框不存在
            CategoryMismatchError: 文本不一致
        """
        log_step("7. 選択されたカテゴリーを検証")
        actual = await self.read_first_category()
        if actual != expected:
            raise CategoryMismatchError(expected, actual)
        logger.success(f"✓ 第1カテゴリー: {actual}")
        return actual
