"""
@PURPOSE: 定义场景断言与选择器契约相关的自定义异常
@OUTLINE:
  - ScenarioAssertionError: 场景断言失败基类(AssertionError 子类, pytest 记为失败)
  - ElementNotFoundError: 期望的页面元素不存在
  - CategoryMismatchError: 选中的类目与期望不一致
  - SearchHistoryEmptyError: 搜索履历为空
  - SelectorConfigError: 选择器契约配置错误
@GOTCHAS:
  - 断言消息保持日文, 与被测站点语言一致
@DEPENDENCIES:
  - 外部: 无
"""

from __future__ import annotations


class ScenarioAssertionError(AssertionError):
    """场景断言失败基类."""


class ElementNotFoundError(ScenarioAssertionError):
    """期望的页面元素不存在时抛出此异常.

    Attributes:
        element_name: 元素的业务名称(日文)
        selector: 查找时使用的选择器
    """

    def __init__(
        self,
        element_name: str,
        selector: str = "",
        message: str | None = None,
    ) -> None:
        """初始化元素不存在异常.

        Args:
            element_name: 元素的业务名称, 例如 "第1カテゴリー選択要素"
            selector: 查找时使用的选择器
            message: 自定义错误消息（可选）
        """
        self.element_name = element_name
        self.selector = selector
        self.message = message or f"{element_name}が見つかりませんでした"
        super().__init__(self.message)


class CategoryMismatchError(ScenarioAssertionError):
    """选中的类目文本与期望值不一致."""

    def __init__(self, expected: str, actual: str | None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"選択中のカテゴリーが一致しません: expected={expected!r}, actual={actual!r}"
        )


class SearchHistoryEmptyError(ScenarioAssertionError):
    """搜索履历条目数不大于 0."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"検索履歴のアイテム数が0です (count={count})")


class SelectorConfigError(ValueError):
    """选择器契约文件缺失条目、类型未知或模板参数缺失."""
