"""
数据模型层 - 导出核心消费的报表结构

导出核心只读这些模型，不做任何修改：
- Document/Page/Band: 文档、页面与区带
- ReportComponent/TextObject/ContainerObject/TableObject: 可视组件
- TableRow/TableColumn/TableCell: 表格结构
- Border/Color/Font: 样式
"""

from .components import (
    CellAddress,
    Component,
    ContainerObject,
    ReportComponent,
    TableCell,
    TableColumn,
    TableObject,
    TableRow,
    TextObject,
)
from .document import Band, Document, Margins, Page
from .style import (
    BLACK,
    TRANSPARENT,
    WHITE,
    Border,
    Color,
    Font,
    FontStyle,
    HorzAlign,
    VertAlign,
)

__all__ = [
    "Document",
    "Page",
    "Margins",
    "Band",
    "Component",
    "ReportComponent",
    "TextObject",
    "ContainerObject",
    "TableObject",
    "TableRow",
    "TableColumn",
    "TableCell",
    "CellAddress",
    "Border",
    "Color",
    "Font",
    "FontStyle",
    "HorzAlign",
    "VertAlign",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
]
