"""
@PURPOSE: 工具模块, 日志设置与 DOM 读取辅助
"""
