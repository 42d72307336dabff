"""
@PURPOSE: 内置场景目录(静态字面量数据)
@OUTLINE:
  - SEARCH_CONDITION: 场景1 搜索条件, 可并行
  - SEARCH_HISTORY: 场景1-2 搜索条件执行两次后检查搜索履历, 顺序执行
  - SCENARIO_GROUPS: 分组名 -> 分组
  - def get_group(): 按名称获取分组
@DEPENDENCIES:
  - 内部: src.models.scenario
"""

from __future__ import annotations

from .models.scenario import CategoryScenario, ScenarioGroup

BOOKS_COMPUTER_IT = CategoryScenario(
    first_category="本・雑誌・漫画",
    second_category="本",
    third_category="コンピュータ・IT",
)

TICKET_MUSIC_IDOL = CategoryScenario(
    first_category="チケット",
    second_category="音楽",
    third_category="女性アイドル",
)

SEARCH_CONDITION = ScenarioGroup(
    name="search_condition",
    description="Scenario 1: Search condition",
    scenarios=(BOOKS_COMPUTER_IT,),
)

SEARCH_HISTORY = ScenarioGroup(
    name="search_history",
    description="Scenario 1-2: Run search condition twice",
    scenarios=(BOOKS_COMPUTER_IT, TICKET_MUSIC_IDOL),
    sequential=True,
)

SCENARIO_GROUPS: dict[str, ScenarioGroup] = {
    group.name: group for group in (SEARCH_CONDITION, SEARCH_HISTORY)
}


def get_group(name: str) -> ScenarioGroup:
    """按名称获取场景分组.

    Raises:
        KeyError: 分组不存在
    """
    try:
        return SCENARIO_GROUPS[name]
    except KeyError:
        raise KeyError(f"未知的场景分组: {name}, 可选: {sorted(SCENARIO_GROUPS)}") from None
