"""
@PURPOSE: E2E 测试配置管理，使用 Pydantic Settings 管理配置，支持多环境和从 YAML 加载
@OUTLINE:
  - class LoggingConfig: 日志配置
  - class BrowserConfig: 浏览器配置
  - class Settings: 应用配置主类
  - def load_environment_config(): 加载环境配置(支持别名)
  - def create_settings(): 创建配置实例
@GOTCHAS:
  - 优先级: 环境变量 > .env > YAML > 默认值
  - DEBUG 环境变量只要非空且不是 0/false/no/off 即视为开启
  - 嵌套字段通过双下划线覆盖, 例如 BROWSER__HEADLESS=false
@DEPENDENCIES:
  - 外部: pydantic, pydantic_settings, pyyaml
@RELATED: __init__.py, environments/*.yaml
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_ENVIRONMENTS = ["development", "ci", "staging"]

_FALSY_STRINGS = {"", "0", "false", "no", "off"}


# ========== 子配置类 ==========

class LoggingConfig(BaseModel):
    """日志配置.

    Attributes:
        level: DEBUG 开启时的日志级别(关闭时只输出 STEP 行和警告以上)
        format: 日志格式(detailed/simple/json)
        output: 输出目标列表(console/file)
        file_path: 文件路径
        rotation: 轮转大小
        retention: 保留时间
    """
    level: str = Field(default="DEBUG", description="DEBUG 开启时的日志级别")
    format: str = Field(default="detailed", description="日志格式")
    output: List[str] = Field(default=["console"], description="输出目标")
    file_path: str = Field(default="data/logs/e2e.log", description="文件路径")
    rotation: str = Field(default="10 MB", description="轮转大小")
    retention: str = Field(default="7 days", description="保留时间")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """验证日志格式."""
        if v not in ("detailed", "simple", "json"):
            raise ValueError(f"日志格式必须是 detailed/simple/json: {v}")
        return v


class BrowserConfig(BaseModel):
    """浏览器配置.

    Attributes:
        browser_name: 浏览器类型(chromium/firefox/webkit)
        headless: 无头模式
        slow_mo: 慢速模式（毫秒）
        timeout: 默认超时（毫秒）, 作用于每个上下文
        viewport: 视口大小
        locale: 语言区域
        timezone_id: 时区
        screenshot_on_failure: 用例失败时保存整页截图
    """
    browser_name: str = Field(default="chromium", description="浏览器类型")
    headless: bool = Field(default=True, description="无头模式")
    slow_mo: int = Field(default=0, ge=0, description="慢速模式（毫秒）")
    timeout: int = Field(default=30000, ge=0, description="默认超时（毫秒）")
    viewport: Dict[str, int] = Field(
        default={"width": 1280, "height": 720},
        description="视口大小"
    )
    locale: str = Field(default="ja-JP", description="语言区域")
    timezone_id: str = Field(default="Asia/Tokyo", description="时区 ID")
    screenshot_on_failure: bool = Field(default=True, description="失败时截图")

    @field_validator("browser_name")
    @classmethod
    def validate_browser_name(cls, v: str) -> str:
        """验证浏览器类型."""
        if v not in ("chromium", "firefox", "webkit"):
            raise ValueError(f"浏览器类型必须是 chromium/firefox/webkit: {v}")
        return v


# ========== 主配置类 ==========

class Settings(BaseSettings):
    """E2E 配置主类.

    从环境变量、.env 文件和 YAML 配置文件加载配置。
    优先级：环境变量 > .env > YAML > 默认值

    Attributes:
        environment: 运行环境
        base_url: 被测站点基础 URL
        debug: 调试模式(读取 DEBUG 环境变量)
        selectors_file: 选择器契约文件
        artifacts_dir: 失败截图等产物目录
        logging: 日志配置
        browser: 浏览器配置

    Examples:
        >>> from config.settings import settings
        >>> settings.base_url
        'https://jp.mercari.com'
    """

    environment: str = Field(default="development", description="运行环境")
    base_url: str = Field(default="https://jp.mercari.com", description="被测站点基础 URL")
    debug: bool = Field(default=False, description="调试模式")

    selectors_file: str = Field(
        default="config/mercari_selectors.json",
        description="选择器契约文件"
    )
    artifacts_dir: str = Field(default="data/artifacts", description="产物目录")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",  # 支持 BROWSER__HEADLESS=false
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """环境变量优先于初始化参数(YAML)."""
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """验证环境名称."""
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"环境必须是: {VALID_ENVIRONMENTS}")
        return v

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug_flag(cls, v: Any) -> bool:
        """宽松解析 DEBUG, 任意非空值视为开启."""
        if isinstance(v, str):
            return v.strip().lower() not in _FALSY_STRINGS
        return bool(v)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url 必须以 http:// 或 https:// 开头: {v}")
        return v.rstrip("/")

    def get_absolute_path(self, relative_path: str) -> Path:
        """将相对路径转换为绝对路径.

        Args:
            relative_path: 相对路径

        Returns:
            绝对路径
        """
        path = Path(relative_path)
        if path.is_absolute():
            return path
        base_dir = Path(__file__).parent.parent
        return base_dir / path

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典."""
        return self.model_dump()


# ========== 配置加载 ==========

def load_environment_config(env: str = "development") -> Dict[str, Any]:
    """从 YAML 文件加载环境配置，支持别名引用.

    YAML 文件内容可以是字典, 也可以是指向另一个环境文件的别名字符串。

    Args:
        env: 环境名称

    Returns:
        配置字典

    Raises:
        FileNotFoundError: 环境配置文件不存在
        ValueError: 别名为空或出现循环引用
        TypeError: 文件内容既不是字典也不是字符串
    """

    config_dir = Path(__file__).parent / "environments"
    target_file = config_dir / f"{env}.yaml"

    def _load(file_path: Path, seen: set[Path]) -> Dict[str, Any]:
        if file_path in seen:
            raise ValueError(f"检测到环境配置的循环引用: {file_path}")
        seen.add(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"环境配置文件不存在: {file_path}")

        with file_path.open("r", encoding="utf-8") as handle:
            content = yaml.safe_load(handle)

        if content is None:
            return {}

        if isinstance(content, str):
            alias = content.strip()
            if not alias:
                raise ValueError(f"环境配置别名不能为空: {file_path}")

            if alias.endswith((".yaml", ".yml")):
                alias_file = file_path.parent / alias
            else:
                alias_file = file_path.parent / f"{alias}.yaml"

            return _load(alias_file, seen)

        if not isinstance(content, dict):
            raise TypeError(
                f"环境配置 {file_path} 必须是字典或别名字符串, 当前类型: {type(content).__name__}",
            )

        return content

    return _load(target_file, set())


def create_settings(env: Optional[str] = None, **overrides: Any) -> Settings:
    """创建配置实例.

    Args:
        env: 环境名称，如果为 None 则从 ENVIRONMENT 环境变量获取
        **overrides: 额外的初始化参数, 与 YAML 同级(仍低于环境变量)

    Returns:
        配置实例
    """
    if env is None:
        env = os.getenv("ENVIRONMENT", "development")

    yaml_config = load_environment_config(env)
    yaml_config.update(overrides)
    yaml_config["environment"] = env

    return Settings(**yaml_config)


# ========== 全局配置实例 ==========

_env = os.getenv("ENVIRONMENT", "development")
settings = create_settings(_env)
