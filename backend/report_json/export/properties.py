"""
公共属性写出 - 几何/文本/边框扩展

普通组件与表格单元格共用同一套文本与边框输出形状。
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .encoders import format_color, to_millimeters
from .stream_writer import JsonStreamWriter


def display_text(value: Any) -> str:
    """枚举/样式的显示文本（FontStyle 等提供 display_name()）"""
    if value is None:
        return ""
    display_name = getattr(value, "display_name", None)
    if callable(display_name):
        return display_name()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class PropertyWriter:
    """属性写出基类（持有写出器与单位换算系数）"""

    def __init__(self, writer: JsonStreamWriter, units_per_mm: float):
        self.writer = writer
        self.units_per_mm = units_per_mm

    def mm(self, value: float) -> float:
        return to_millimeters(value, self.units_per_mm)

    def write_mm_property(self, name: str, value: float) -> None:
        self.writer.write_number_property(name, self.mm(value))

    def write_geometry(self, obj: Any) -> None:
        """left/top/width/height（毫米）"""
        self.write_mm_property("left", obj.left)
        self.write_mm_property("top", obj.top)
        self.write_mm_property("width", obj.width)
        self.write_mm_property("height", obj.height)

    def write_text_properties(self, obj: Any) -> None:
        """文本扩展字段"""
        w = self.writer
        font = obj.font
        w.write_string_property("text", obj.text)
        w.write_string_property("horzAlign", display_text(obj.horz_align))
        w.write_string_property("vertAlign", display_text(obj.vert_align))
        w.write_string_property("fontName", font.name)
        w.write_number_property("fontSize", font.size)
        w.write_string_property("fontStyle", display_text(font.style))
        w.write_string_property("textColor", format_color(obj.text_color))
        w.write_string_property("fillColor", format_color(obj.fill_color))

    def write_border(self, border: Any) -> None:
        """border 对象；无边框时不输出该键"""
        if border is None:
            return
        w = self.writer
        w.begin_object_property("border")
        self.write_mm_property("left", border.left)
        self.write_mm_property("top", border.top)
        self.write_mm_property("right", border.right)
        self.write_mm_property("bottom", border.bottom)
        w.write_string_property("color", format_color(border.color))
        w.end_object()
