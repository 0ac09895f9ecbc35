"""
运行期配置 - 读取 config/report_json_runtime.yaml

职责：
- 加载单位换算/数值格式/导出范围/日志等运行参数
- 提供环境变量覆盖机制（REPORT_JSON_ 前缀）
- 类型安全的配置访问
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from ..interfaces import ConfigError

# 宿主报表引擎的原生单位：1毫米 = 3.78 单位（96dpi 像素）
DEFAULT_UNITS_PER_MM = 3.78

DEFAULT_CONFIG_PATH = Path("config/report_json_runtime.yaml")

_PAGE_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


class UnitsConfig(BaseModel):
    """单位换算配置"""

    units_per_mm: float = DEFAULT_UNITS_PER_MM

    @field_validator("units_per_mm")
    @classmethod
    def _check_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("units_per_mm 必须大于0")
        return v


class FormatConfig(BaseModel):
    """数值格式配置"""

    float_precision: int = Field(4, ge=0, le=9)
    encoding: str = "utf-8"


class ExportConfig(BaseModel):
    """导出范围配置"""

    page_numbers: str = ""  # 空=全部页面，如 "1,3-5"
    buffer_size: int = 4096


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    units: UnitsConfig = Field(default_factory=UnitsConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "REPORT_JSON_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"配置文件解析失败: {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"配置文件顶层必须是映射: {path}")
        runtime_opts = data.get("runtime_options") or {}
        if not isinstance(runtime_opts, dict):
            raise ConfigError(f"runtime_options 必须是映射: {path}")

        try:
            return cls(
                units=UnitsConfig(**cls._extract(runtime_opts, "units")),
                format=FormatConfig(**cls._extract(runtime_opts, "format")),
                export=ExportConfig(**cls._extract(runtime_opts, "export")),
                logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
            )
        except ValueError as e:
            raise ConfigError(f"配置项无效: {path}: {e}") from e

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"配置节 {key} 必须是映射")
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def select_pages(self, page_total: int) -> list[int]:
        """
        按 export.page_numbers 选择要导出的页码

        Args:
            page_total: 文档总页数

        Returns:
            升序去重的页码列表（1起）；超出总页数的页码被忽略
        """
        return parse_page_numbers(self.export.page_numbers, page_total)


def parse_page_numbers(text: str, page_total: int) -> list[int]:
    """解析页码范围文本（"1,3-5"），空文本表示全部页面"""
    if not text or not text.strip():
        return list(range(1, page_total + 1))

    selected: set[int] = set()
    for part in text.split(","):
        if not part.strip():
            continue
        m = _PAGE_RANGE_RE.match(part)
        if not m:
            raise ConfigError(f"页码范围无效: {part.strip()!r}")
        first = int(m.group(1))
        last = int(m.group(2)) if m.group(2) else first
        if first < 1 or last < first:
            raise ConfigError(f"页码范围无效: {part.strip()!r}")
        selected.update(range(first, min(last, page_total) + 1))

    return sorted(selected)


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
