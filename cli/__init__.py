"""
@PURPOSE: 命令行工具包
"""
