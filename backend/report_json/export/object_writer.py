"""
组件写出 - 单个组件的JSON对象与容器子组件平铺

输出顺序：
1. 公共字段 name/type/left/top/width/height
2. 文本扩展（HasText）
3. 表格扩展 "table"（HasTableGrid）
4. 边框 "border"（存在时）
5. 子组件（HasChildren）作为兄弟节点紧跟在父对象之后，深度优先

不可导出的组件连同其整个子树都不输出。
"""

from __future__ import annotations

from typing import Any

from ..interfaces import HasBorder, HasChildren, HasTableGrid, HasText
from .properties import PropertyWriter
from .stream_writer import JsonStreamWriter
from .table_writer import TableWriter


def type_tag(component: Any) -> str:
    """类型标记：组件的 type 属性，缺省为类名"""
    tag = getattr(component, "type", None)
    if isinstance(tag, str) and tag:
        return tag
    return type(component).__name__


class ObjectWriter(PropertyWriter):
    """组件写出器"""

    def __init__(self, writer: JsonStreamWriter, units_per_mm: float):
        super().__init__(writer, units_per_mm)
        self.table_writer = TableWriter(writer, units_per_mm)

    def write_component(self, component: Any) -> int:
        """
        写出组件及其可导出的子孙组件

        Args:
            component: 组件（None 或不可导出时跳过）

        Returns:
            写出的JSON对象数量
        """
        if component is None or not getattr(component, "exportable", True):
            return 0

        self._write_object(component)
        count = 1

        if isinstance(component, HasChildren):
            for child in component.get_child_objects():
                count += self.write_component(child)

        return count

    def _write_object(self, component: Any) -> None:
        w = self.writer
        w.begin_object()
        w.write_string_property("name", component.name)
        w.write_string_property("type", type_tag(component))
        self.write_geometry(component)

        if isinstance(component, HasText):
            self.write_text_properties(component)

        if isinstance(component, HasTableGrid):
            self.table_writer.write_table(component)

        if isinstance(component, HasBorder):
            self.write_border(component.border)
        w.end_object()
