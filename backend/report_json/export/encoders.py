"""
基础编码器 - 单位换算/数值格式/颜色格式/JSON字符串转义

所有叶子值都经过这里写入流，保证输出与区域设置无关。
"""

from __future__ import annotations

import logging
import math
from typing import Any

logger = logging.getLogger(__name__)

# 控制字符 < 0x20 统一转为 \u00xx（小写），常用控制字符使用两字符转义
_ESCAPE_TABLE: dict[int, str] = {code: f"\\u{code:04x}" for code in range(0x20)}
_ESCAPE_TABLE.update({
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
})


def to_millimeters(value: float, units_per_mm: float) -> float:
    """原生单位 -> 毫米"""
    return value / units_per_mm


def format_float(value: float, precision: int = 4) -> str:
    """
    与区域设置无关的定点小数表示

    按 precision 位小数四舍五入，去掉末尾的0和小数点；-0 输出为 0。
    NaN/Infinity 无法用JSON表示，输出为 0。
    """
    value = float(value)
    if not math.isfinite(value):
        logger.warning(f"非有限数值按0输出: {value}")
        return "0"

    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_color(color: Any) -> str:
    """颜色 -> #AARRGGBB（大写十六进制，alpha在前）"""
    return f"#{color.a:02X}{color.r:02X}{color.g:02X}{color.b:02X}"


def escape_json(value: str | None) -> str:
    """JSON字符串转义（不含两侧引号），None 视为空串"""
    if not value:
        return ""
    return value.translate(_ESCAPE_TABLE)
