"""
@PURPOSE: 数据模型模块，定义测试场景的数据结构
@OUTLINE:
  - CategoryScenario: 三级类目场景
  - ScenarioGroup: 场景分组
@DEPENDENCIES:
  - 外部: pydantic
"""

from .scenario import CategoryScenario, ScenarioGroup

__all__ = ["CategoryScenario", "ScenarioGroup"]
