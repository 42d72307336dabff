"""
@PURPOSE: 单元测试通用 fixtures
@OUTLINE:
  - selectors: 默认选择器契约
  - mock_page: 记录操作顺序的模拟页面
  - reset_debug: 每个用例前后恢复 settings.debug
@DEPENDENCIES:
  - 内部: tests.mocks, src.browser.selector_resolver
"""

from __future__ import annotations

from typing import Any

import pytest

from tests.mocks import MockPage


@pytest.fixture
def selectors() -> dict[str, Any]:
    """默认选择器契约(读取 config/mercari_selectors.json)."""
    from src.browser.selector_resolver import load_selector_config

    return load_selector_config()


@pytest.fixture
def mock_page() -> MockPage:
    """提供模拟的 Playwright Page 对象."""
    return MockPage()


@pytest.fixture(autouse=True)
def reset_debug():
    """避免用例之间共享 DEBUG 状态."""
    from config.settings import settings

    original = settings.debug
    yield
    settings.debug = original
