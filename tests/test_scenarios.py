"""
@PURPOSE: 测试场景模型与内置场景目录
@OUTLINE:
  - class TestCategoryScenario: 测试三元组模型
  - class TestScenarioCatalog: 测试内置分组
@DEPENDENCIES:
  - 外部: pytest, pydantic
  - 内部: src.models.scenario, src.scenarios
"""

import pytest
from pydantic import ValidationError

from src.models.scenario import CategoryScenario, ScenarioGroup
from src.scenarios import SCENARIO_GROUPS, SEARCH_CONDITION, SEARCH_HISTORY, get_group


class TestCategoryScenario:
    """测试三元组模型."""

    def test_from_tuple_and_back(self) -> None:
        values = ("チケット", "音楽", "女性アイドル")
        scenario = CategoryScenario.from_tuple(values)
        assert scenario.first_category == "チケット"
        assert scenario.as_tuple() == values

    def test_title(self) -> None:
        scenario = CategoryScenario.from_tuple(("本・雑誌・漫画", "本", "コンピュータ・IT"))
        assert scenario.title == "本・雑誌・漫画 / 本 / コンピュータ・IT"

    def test_frozen(self) -> None:
        scenario = CategoryScenario.from_tuple(("a", "b", "c"))
        with pytest.raises(ValidationError):
            scenario.first_category = "x"

    @pytest.mark.parametrize("values", [("", "b", "c"), ("a", "  ", "c")])
    def test_rejects_empty_labels(self, values) -> None:
        with pytest.raises(ValidationError):
            CategoryScenario.from_tuple(values)

    def test_hashable_equality(self) -> None:
        a = CategoryScenario.from_tuple(("a", "b", "c"))
        b = CategoryScenario.from_tuple(("a", "b", "c"))
        assert a == b
        assert len({a, b}) == 1


class TestScenarioCatalog:
    """测试内置分组."""

    def test_search_condition_group(self) -> None:
        assert SEARCH_CONDITION.sequential is False
        assert [s.as_tuple() for s in SEARCH_CONDITION.scenarios] == [
            ("本・雑誌・漫画", "本", "コンピュータ・IT"),
        ]

    def test_search_history_group_order(self) -> None:
        """顺序组按声明顺序执行两个场景."""
        assert SEARCH_HISTORY.sequential is True
        assert [s.first_category for s in SEARCH_HISTORY.scenarios] == ["本・雑誌・漫画", "チケット"]

    def test_get_group(self) -> None:
        assert get_group("search_history") is SEARCH_HISTORY
        assert set(SCENARIO_GROUPS) == {"search_condition", "search_history"}

    def test_get_unknown_group(self) -> None:
        with pytest.raises(KeyError, match="未知的场景分组"):
            get_group("missing")

    def test_group_requires_scenarios(self) -> None:
        with pytest.raises(ValidationError):
            ScenarioGroup(name="empty", scenarios=())
