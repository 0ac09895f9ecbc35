"""
导出模块 - 已布局报表的流式JSON导出

子模块：
- encoders: 单位换算/数值/颜色/字符串编码
- stream_writer: 流写出器（容器栈 + 自动分隔符）
- properties: 几何/文本/边框公共属性
- object_writer: 组件写出（容器子组件平铺）
- table_writer: 表格写出（可见性过滤 + 跨度去重）
- json_export: 文档/页面遍历状态机
"""

from .encoders import escape_json, format_color, format_float, to_millimeters
from .json_export import ExportState, JsonExport
from .object_writer import ObjectWriter, type_tag
from .stream_writer import JsonStreamWriter
from .table_writer import TableWriter

__all__ = [
    "JsonExport",
    "ExportState",
    "JsonStreamWriter",
    "ObjectWriter",
    "TableWriter",
    "type_tag",
    "escape_json",
    "format_color",
    "format_float",
    "to_millimeters",
]
