"""
@PURPOSE: 工作流模块，组合控制器完成完整的测试场景
@OUTLINE:
  - run_search_condition: 单个搜索条件场景
  - SearchHistorySession: 顺序执行组的共享上下文
"""

from .search_condition_workflow import SearchHistorySession, run_search_condition

__all__ = ["SearchHistorySession", "run_search_condition"]
