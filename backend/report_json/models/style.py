"""
样式模型 - 颜色/字体/对齐/边框

取值与宿主报表引擎保持一致（ARGB颜色、Regular/Bold/...字体样式、Left/Center/...对齐）
"""

from __future__ import annotations

from enum import Enum, Flag
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class Color(BaseModel):
    """ARGB颜色（各通道 0-255）"""
    a: int = Field(255, ge=0, le=255)
    r: int = Field(0, ge=0, le=255)
    g: int = Field(0, ge=0, le=255)
    b: int = Field(0, ge=0, le=255)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, value: Any) -> Any:
        """支持 "#RRGGBB" / "#AARRGGBB" / [a,r,g,b] / [r,g,b]"""
        if isinstance(value, str):
            return cls._parse_hex(value)
        if isinstance(value, (list, tuple)):
            channels = list(value)
            if len(channels) == 3:
                channels = [255, *channels]
            if len(channels) != 4:
                raise ValueError(f"颜色通道数无效: {value!r}")
            return dict(zip("argb", channels))
        return value

    @staticmethod
    def _parse_hex(text: str) -> dict[str, int]:
        digits = text.strip().lstrip("#")
        if len(digits) == 6:
            digits = "FF" + digits
        if len(digits) != 8:
            raise ValueError(f"颜色格式无效: {text!r}")
        try:
            raw = int(digits, 16)
        except ValueError as e:
            raise ValueError(f"颜色格式无效: {text!r}") from e
        return {
            "a": (raw >> 24) & 0xFF,
            "r": (raw >> 16) & 0xFF,
            "g": (raw >> 8) & 0xFF,
            "b": raw & 0xFF,
        }


BLACK = Color(a=255, r=0, g=0, b=0)
WHITE = Color(a=255, r=255, g=255, b=255)
# 宿主引擎的透明色：alpha=0 的白色
TRANSPARENT = Color(a=0, r=255, g=255, b=255)


class HorzAlign(str, Enum):
    """水平对齐"""
    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"
    JUSTIFY = "Justify"


class VertAlign(str, Enum):
    """垂直对齐"""
    TOP = "Top"
    CENTER = "Center"
    BOTTOM = "Bottom"


class FontStyle(Flag):
    """字体样式（可组合）"""
    REGULAR = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    STRIKEOUT = 8

    @classmethod
    def parse(cls, value: Any) -> FontStyle:
        """解析 int / "Bold, Italic" / ["Bold", "Italic"]"""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            value = value.replace("|", ",").split(",")
        if isinstance(value, (list, tuple)):
            style = cls.REGULAR
            for item in value:
                name = str(item).strip().upper()
                if not name:
                    continue
                try:
                    style |= cls[name]
                except KeyError as e:
                    raise ValueError(f"未知字体样式: {item!r}") from e
            return style
        raise ValueError(f"字体样式无效: {value!r}")

    def display_name(self) -> str:
        """显示名：无样式为 Regular，否则按声明顺序以 ", " 连接"""
        names = [
            member.name.capitalize()
            for member in (FontStyle.BOLD, FontStyle.ITALIC, FontStyle.UNDERLINE, FontStyle.STRIKEOUT)
            if member in self
        ]
        return ", ".join(names) if names else "Regular"


class Font(BaseModel):
    """字体"""
    name: str = "Arial"
    size: float = 10.0  # 磅值，不做单位换算
    style: FontStyle = FontStyle.REGULAR

    @field_validator("style", mode="before")
    @classmethod
    def _parse_style(cls, v: Any) -> FontStyle:
        return FontStyle.parse(v)


class Border(BaseModel):
    """边框（四边线宽 + 统一颜色）"""
    left: float = 1.0
    top: float = 1.0
    right: float = 1.0
    bottom: float = 1.0
    color: Color = BLACK
