"""
配置层 - 运行期配置加载

职责：
- 加载 config/report_json_runtime.yaml（运行期参数）
- 支持 REPORT_JSON_ 环境变量覆盖
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    DEFAULT_UNITS_PER_MM,
    RuntimeConfig,
    get_config,
    parse_page_numbers,
    reload_config,
)

__all__ = [
    "DEFAULT_UNITS_PER_MM",
    "RuntimeConfig",
    "get_config",
    "parse_page_numbers",
    "reload_config",
]
