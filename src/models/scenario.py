"""
@PURPOSE: 定义类目搜索场景的数据结构
@OUTLINE:
  - class CategoryScenario: (一级, 二级, 三级) 类目三元组, 不可变
  - class ScenarioGroup: 场景分组, 标记是否需要顺序执行
@DEPENDENCIES:
  - 外部: pydantic
@RELATED: src/scenarios.py, src/workflows/search_condition_workflow.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryScenario(BaseModel):
    """三级类目场景.

    三个字段都是页面上可见的日文类目名称。

    Attributes:
        first_category: 一级类目
        second_category: 二级类目
        third_category: 三级类目

    Examples:
        >>> s = CategoryScenario.from_tuple(("本・雑誌・漫画", "本", "コンピュータ・IT"))
        >>> s.title
        '本・雑誌・漫画 / 本 / コンピュータ・IT'
    """

    model_config = ConfigDict(frozen=True)

    first_category: str = Field(..., min_length=1, description="一级类目")
    second_category: str = Field(..., min_length=1, description="二级类目")
    third_category: str = Field(..., min_length=1, description="三级类目")

    @field_validator("first_category", "second_category", "third_category")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """拒绝只包含空白的名称."""
        if not v.strip():
            raise ValueError("类目名称不能为空白")
        return v

    @classmethod
    def from_tuple(cls, values: tuple[str, str, str]) -> "CategoryScenario":
        """从三元组创建场景."""
        first, second, third = values
        return cls(first_category=first, second_category=second, third_category=third)

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.first_category, self.second_category, self.third_category)

    @property
    def title(self) -> str:
        """用例标题."""
        return " / ".join(self.as_tuple())


class ScenarioGroup(BaseModel):
    """场景分组.

    Attributes:
        name: 分组名称
        description: 分组说明
        scenarios: 场景列表(按声明顺序)
        sequential: 是否必须在同一页面上按顺序执行
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="分组名称")
    description: str = Field(default="", description="分组说明")
    scenarios: tuple[CategoryScenario, ...] = Field(..., min_length=1, description="场景列表")
    sequential: bool = Field(default=False, description="是否顺序执行")
