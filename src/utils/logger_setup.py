"""
@PURPOSE: 日志系统设置 - 配置步骤日志、调试日志、日志轮转和浏览器 console 转发
@OUTLINE:
  - def format_detailed(): 详细格式化器
  - def format_json(): JSON格式化器
  - def format_simple(): 简单格式化器
  - def setup_logger(): 配置全局日志系统
  - def get_logger_with_context(): 获取带上下文的logger
  - def log_step(): 记录测试步骤(始终输出)
  - def log_debug(): 记录调试信息(仅 DEBUG 开启时输出)
  - def is_debug_enabled(): 当前日志系统是否处于 DEBUG 模式
  - def forward_console_debug(): 转发页面 console.debug 到日志
@GOTCHAS:
  - STEP 级别(22)高于 INFO, 步骤行始终可见
  - DEBUG 关闭时只输出 STEP 行和 WARNING 及以上, INFO/SUCCESS 被过滤
  - DEBUG 开启时 handler 级别为 LoggingConfig.level, 只增加日志行, 不影响用例结果
  - 需要在测试会话或 CLI 启动时调用 setup_logger()
@DEPENDENCIES:
  - 外部: loguru
  - 内部: config.settings
"""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional

from loguru import logger

STEP_LEVEL = "STEP"
STEP_LEVEL_NO = 22


def _ensure_step_level() -> None:
    try:
        logger.level(STEP_LEVEL)
    except ValueError:
        logger.level(STEP_LEVEL, no=STEP_LEVEL_NO, color="<magenta><bold>")


_ensure_step_level()

_WARNING_NO = logger.level("WARNING").no

# setup_logger() 最近一次生效的 DEBUG 开关, 未配置前为 None
_debug_enabled: Optional[bool] = None


# ========== 日志格式化器 ==========

def format_detailed(record: Dict[str, Any]) -> str:
    """详细格式化器（开发环境）.

    Args:
        record: 日志记录

    Returns:
        格式化后的日志字符串
    """
    extra = record["extra"]
    scenario = extra.get("scenario", "")
    step = extra.get("step", "")

    context_parts = []
    if scenario:
        context_parts.append(f"scenario={scenario}")
    if step:
        context_parts.append(f"step={step}")

    context_str = f" [{', '.join(context_parts)}]" if context_parts else ""
    # 上下文来自用例数据, 转义花括号以免被当作格式字段
    context_str = context_str.replace("{", "{{").replace("}", "}}")

    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
        f"{context_str} - "
        "<level>{message}</level>\n"
        "{exception}"
    )


def format_json(record: Dict[str, Any]) -> str:
    """JSON格式化器（CI 日志分析）.

    Args:
        record: 日志记录

    Returns:
        JSON格式的日志字符串(已转义花括号, 可直接作为 loguru 格式模板)
    """
    import json

    log_entry = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        "message": record["message"],
    }

    extra = record["extra"]
    if extra:
        context = {key: extra[key] for key in ("scenario", "step") if key in extra}
        if context:
            log_entry["context"] = context

    if record["exception"]:
        log_entry["exception"] = {
            "type": record["exception"].type.__name__,
            "value": str(record["exception"].value),
        }

    serialized = json.dumps(log_entry, ensure_ascii=False)
    return serialized.replace("{", "{{").replace("}", "}}") + "\n"


def format_simple(record: Dict[str, Any]) -> str:
    """简单格式化器.

    Args:
        record: 日志记录

    Returns:
        格式化后的日志字符串
    """
    return (
        "{time:HH:mm:ss} | "
        "{level: <8} | "
        "{message}\n"
    )


_FORMATTERS = {
    "detailed": format_detailed,
    "json": format_json,
    "simple": format_simple,
}


# ========== 日志设置 ==========

def _quiet_filter(record: Dict[str, Any]) -> bool:
    """DEBUG 关闭时只放行步骤行和警告以上."""
    level = record["level"]
    return level.name == STEP_LEVEL or level.no >= _WARNING_NO


def setup_logger(
    config: Optional[Any] = None,
    debug: Optional[bool] = None,
    force: bool = False,
) -> list[int]:
    """配置全局日志系统.

    Args:
        config: 日志配置，默认使用 settings.logging
        debug: 是否输出调试日志，默认使用 settings.debug
        force: 是否移除已有的处理器(包括 loguru 默认处理器)

    Returns:
        新增处理器的 ID 列表

    Examples:
        >>> from src.utils.logger_setup import setup_logger
        >>> setup_logger(force=True)
    """
    from config.settings import settings

    if config is None:
        config = settings.logging
    if debug is None:
        debug = settings.debug

    if force:
        logger.remove()

    global _debug_enabled
    _debug_enabled = bool(debug)

    formatter = _FORMATTERS.get(config.format, format_detailed)
    level = config.level if debug else STEP_LEVEL
    record_filter = None if debug else _quiet_filter

    handler_ids: list[int] = []

    if "console" in config.output:
        handler_ids.append(
            logger.add(
                sys.stderr,
                format=formatter,
                level=level,
                filter=record_filter,
                colorize=config.format != "json",
                backtrace=True,
                diagnose=debug,
            )
        )

    if "file" in config.output:
        log_file = settings.get_absolute_path(config.file_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler_ids.append(
            logger.add(
                str(log_file),
                format=formatter,
                level=level,
                filter=record_filter,
                rotation=config.rotation,
                retention=config.retention,
                compression="zip",
                backtrace=True,
                diagnose=debug,
                encoding="utf-8",
            )
        )

    logger.debug(
        f"日志系统已配置: level={level}, format={config.format}, output={config.output}"
    )
    return handler_ids


def get_logger_with_context(**context) -> Any:
    """获取带上下文的logger.

    Args:
        **context: 上下文键值对(scenario/step)

    Returns:
        绑定了上下文的logger

    Examples:
        >>> log = get_logger_with_context(scenario="本・雑誌・漫画 / 本 / コンピュータ・IT")
        >>> log.info("开始执行")
    """
    return logger.bind(**context)


# ========== 便捷函数 ==========

def log_step(message: str, **context) -> None:
    """记录测试步骤, 不受 DEBUG 开关影响.

    Examples:
        >>> log_step("2. 点击搜索框")
    """
    logger.bind(**context).opt(depth=1).log(STEP_LEVEL, message)


def log_debug(message: str, **context) -> None:
    """记录调试信息, 仅在 DEBUG 开启时可见."""
    logger.bind(**context).opt(depth=1).debug(f"[DEBUG] {message}")


def is_debug_enabled() -> bool:
    """当前日志系统是否处于 DEBUG 模式.

    以最近一次 setup_logger() 的开关为准, 未配置时回退到 settings.debug。
    """
    if _debug_enabled is not None:
        return _debug_enabled

    from config.settings import settings

    return settings.debug


def forward_console_debug(page: Any) -> None:
    """将页面上的 console.debug 消息转发到日志(调试级别).

    Args:
        page: Playwright 页面对象
    """

    def _on_console(msg: Any) -> None:
        if msg.type == "debug":
            logger.debug(f"[DEBUG] [browser] {msg.text}")

    page.on("console", _on_console)

