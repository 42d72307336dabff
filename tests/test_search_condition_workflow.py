"""
@PURPOSE: 搜索条件工作流测试
@OUTLINE:
  - TestRunSearchCondition: 单个场景
  - TestSearchHistorySession: 共享页面的顺序执行会话
@DEPENDENCIES:
  - 内部: src.workflows.search_condition_workflow, src.scenarios, tests.mocks
  - 外部: pytest, pytest-asyncio
"""

import pytest
from loguru import logger

from src.errors import ElementNotFoundError, SearchHistoryEmptyError
from src.scenarios import BOOKS_COMPUTER_IT, SEARCH_HISTORY, TICKET_MUSIC_IDOL
from src.workflows.search_condition_workflow import SearchHistorySession, run_search_condition

FIRST_SELECT = 'li[data-testid="category_id"] select'


class TestRunSearchCondition:
    """run_search_condition 测试"""

    @pytest.mark.asyncio
    async def test_success(self, mock_page, selectors) -> None:
        mock_page.set_select(FIRST_SELECT, "本・雑誌・漫画")

        result = await run_search_condition(mock_page, BOOKS_COMPUTER_IT, selectors)

        assert result == "本・雑誌・漫画"
        assert mock_page.actions[0] == ("goto", "/")
        assert ("query_selector", FIRST_SELECT) in mock_page.actions

    @pytest.mark.asyncio
    async def test_verification_after_all_clicks(self, mock_page, selectors) -> None:
        """校验发生在三级类目点击之后"""
        mock_page.set_select(FIRST_SELECT, "チケット")

        await run_search_condition(mock_page, TICKET_MUSIC_IDOL, selectors)

        names = [action for action, _ in mock_page.actions]
        last_click = max(i for i, name in enumerate(names) if name == "click")
        assert names.index("query_selector") > last_click

    @pytest.mark.asyncio
    async def test_missing_select(self, mock_page, selectors) -> None:
        with pytest.raises(ElementNotFoundError):
            await run_search_condition(mock_page, BOOKS_COMPUTER_IT, selectors)


class TestSearchHistorySession:
    """SearchHistorySession 测试"""

    def test_requires_page(self) -> None:
        with pytest.raises(RuntimeError):
            SearchHistorySession(None)

    @pytest.mark.asyncio
    async def test_runs_on_shared_page_in_order(self, mock_page, selectors) -> None:
        """两个场景和履历检查都在同一个页面上执行"""
        session = SearchHistorySession(mock_page, SEARCH_HISTORY, selectors)

        mock_page.set_select(FIRST_SELECT, "本・雑誌・漫画")
        await session.run(BOOKS_COMPUTER_IT)
        mock_page.set_select(FIRST_SELECT, "チケット")
        await session.run(TICKET_MUSIC_IDOL)

        mock_page.set_evaluate_result(2)
        assert await session.check_history() == 2

        assert session.executed == [BOOKS_COMPUTER_IT, TICKET_MUSIC_IDOL]
        assert [target for action, target in mock_page.actions if action == "goto"] == ["/", "/"]
        assert mock_page.clicks[-1] == "placeholder=なにをお探しですか？"

    @pytest.mark.asyncio
    async def test_failed_scenario_not_recorded(self, mock_page, selectors) -> None:
        session = SearchHistorySession(mock_page, SEARCH_HISTORY, selectors)

        with pytest.raises(ElementNotFoundError):
            await session.run(BOOKS_COMPUTER_IT)

        assert session.executed == []

    @pytest.mark.asyncio
    async def test_out_of_order_warns(self, mock_page, selectors) -> None:
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            session = SearchHistorySession(mock_page, SEARCH_HISTORY, selectors)
            mock_page.set_select(FIRST_SELECT, "チケット")
            await session.run(TICKET_MUSIC_IDOL)
        finally:
            logger.remove(handler_id)

        assert any("执行顺序与分组声明不一致" in m for m in messages)

    @pytest.mark.asyncio
    async def test_empty_history(self, mock_page, selectors) -> None:
        session = SearchHistorySession(mock_page, SEARCH_HISTORY, selectors)
        mock_page.set_evaluate_result(0)

        with pytest.raises(SearchHistoryEmptyError):
            await session.check_history()
