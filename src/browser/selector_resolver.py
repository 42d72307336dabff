"""
@PURPOSE: 解析 JSON 选择器契约并转换为 Playwright Locator 对象
@OUTLINE:
  - def load_selector_config(): 读取选择器契约文件(带缓存)
  - class SelectorResolver: 根据契约条目动态创建定位器
  - resolve_locator(): 单个条目转 Locator
  - locator_for(): 按契约名称获取 Locator(支持模板参数)
  - css_for(): 获取 css 条目的原始选择器字符串
@GOTCHAS:
  - 支持 get_by_placeholder, get_by_role, get_by_test_id, get_by_text, css, xpath
  - value/name 中的 {name} 等占位符由调用方传入的参数填充
  - within 字段表示在父定位器范围内查找
  - 标记了 unstable 的条目只作为已知限制记录, 运行时不使用
@DEPENDENCIES:
  - 外部: playwright.async_api, loguru
  - 内部: config.settings, src.errors
@RELATED: config/mercari_selectors.json
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from loguru import logger
from playwright.async_api import Locator, Page

from ..errors import SelectorConfigError


@lru_cache(maxsize=8)
def _read_selector_file(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    selectors = data.get("selectors")
    if not isinstance(selectors, dict):
        raise SelectorConfigError(f"选择器契约缺少 selectors 字段: {path}")
    logger.debug(f"选择器契约已加载: {path} (version={data.get('version', '?')})")
    return selectors


def load_selector_config(path: str | Path | None = None) -> dict[str, Any]:
    """读取选择器契约文件.

    Args:
        path: 契约文件路径, 默认使用 settings.selectors_file

    Returns:
        契约名称 -> 条目配置 的字典

    Raises:
        FileNotFoundError: 文件不存在
        SelectorConfigError: 文件结构不正确
    """
    from config.settings import settings

    if path is None:
        path = settings.get_absolute_path(settings.selectors_file)
    return _read_selector_file(str(path))


class SelectorResolver:
    """将 JSON 选择器契约转换为 Playwright Locator.

    Examples:
        >>> resolver = SelectorResolver(page)
        >>> resolver.locator_for("top_category_link", name="チケット")
    """

    def __init__(self, page: Page, selectors: dict[str, Any] | None = None):
        """初始化解析器.

        Args:
            page: Playwright 页面对象.
            selectors: 契约条目, 为 None 时读取默认契约文件.
        """
        self.page = page
        self.selectors = selectors if selectors is not None else load_selector_config()

    def entry(self, key: str) -> dict[str, Any]:
        """获取契约条目."""
        try:
            return self.selectors[key]
        except KeyError:
            raise SelectorConfigError(f"选择器契约中没有条目: {key}") from None

    def resolve_locator(
        self,
        config: dict[str, Any] | str,
        scope: Page | Locator | None = None,
        **params: str,
    ) -> Locator:
        """根据配置创建单个 Locator.

        Args:
            config: 选择器配置字典或 CSS 选择器字符串.
                字典格式: {"type": "get_by_role", "value": "link", "name": "{name}"}
            scope: 查找范围, 默认是整个页面.
            **params: 模板参数.

        Returns:
            Playwright Locator 对象.

        Raises:
            SelectorConfigError: 类型未知或模板参数缺失
        """
        if scope is None:
            scope = self.page

        if isinstance(config, str):
            return scope.locator(self._render(config, params))

        within = config.get("within")
        if within:
            scope = self.resolve_locator(within, scope=scope, **params)

        locator_type = config.get("type", "css")
        value = self._render(config.get("value", ""), params)
        exact = config.get("exact", False)

        if locator_type == "get_by_role":
            name = config.get("name")
            if name is not None:
                name = self._render(name, params)
            return scope.get_by_role(value, name=name, exact=exact)
        elif locator_type == "get_by_placeholder":
            return scope.get_by_placeholder(value, exact=exact)
        elif locator_type == "get_by_test_id":
            return scope.get_by_test_id(value)
        elif locator_type == "get_by_text":
            return scope.get_by_text(value, exact=exact)
        elif locator_type == "css":
            return scope.locator(value)
        elif locator_type == "xpath":
            return scope.locator(f"xpath={value}")
        raise SelectorConfigError(f"未知的定位器类型: {locator_type}")

    def locator_for(self, key: str, **params: str) -> Locator:
        """按契约名称创建 Locator."""
        return self.resolve_locator(self.entry(key), **params)

    def css_for(self, key: str) -> str:
        """获取 css 类型条目的原始选择器, 供 query_selector/evaluate 使用."""
        config = self.entry(key)
        if config.get("type", "css") != "css":
            raise SelectorConfigError(f"条目 {key} 不是 css 类型")
        return config["value"]

    @staticmethod
    def _render(template: str, params: dict[str, str]) -> str:
        try:
            return template.format(**params)
        except KeyError as e:
            raise SelectorConfigError(f"选择器模板缺少参数 {e}: {template}") from None
