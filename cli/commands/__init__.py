"""
@PURPOSE: CLI 命令组
@OUTLINE:
  - config_app: 配置命令组
"""

from .config import config_app

__all__ = ["config_app"]
