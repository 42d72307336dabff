"""
@PURPOSE: 页面 DOM 读取辅助函数(只读, 不修改页面状态)
@OUTLINE:
  - async def extract_selected_displayed_value(): 读取 select 当前选中项的显示文本
  - async def get_tag_name(): 读取元素标签名
  - async def count_items_in_section(): 统计区块内条目数, 区块不存在时返回 0
@DEPENDENCIES:
  - 外部: playwright.async_api
"""

from __future__ import annotations

from typing import Any

SELECTED_OPTION_TEXT_JS = (
    "(node) => node.selectedIndex >= 0 ? node.options[node.selectedIndex].textContent : null"
)

COUNT_SECTION_ITEMS_JS = """([sectionSelector, itemSelector]) => {
    const section = document.querySelector(sectionSelector);
    if (!section) return 0;
    return section.querySelectorAll(itemSelector).length;
}"""


async def extract_selected_displayed_value(select: Any) -> str | None:
    """读取 select 元素当前选中项的显示文本.

    Args:
        select: select 元素的 ElementHandle 或 Locator

    Returns:
        选中项的 textContent, 没有选中项时返回 None
    """
    return await select.evaluate(SELECTED_OPTION_TEXT_JS)


async def get_tag_name(locator: Any) -> str:
    return await locator.evaluate("(e) => e.tagName")


async def count_items_in_section(page: Any, section_selector: str, item_selector: str) -> int:
    """统计区块内匹配的条目数.

    Args:
        page: Playwright 页面对象
        section_selector: 区块 css 选择器
        item_selector: 条目 css 选择器(相对区块)

    Returns:
        条目数, 区块不存在时为 0
    """
    count = await page.evaluate(COUNT_SECTION_ITEMS_JS, [section_selector, item_selector])
    return int(count or 0)
