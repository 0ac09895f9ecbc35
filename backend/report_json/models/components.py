"""
报表组件模型 - 已完成布局的可视对象

所有几何值（left/top/width/height/边框线宽/行高/列宽）均为宿主引擎原生单位，
由导出核心统一换算为毫米。

组件种类：
- ReportComponent: 通用组件（图片/线条等，仅输出公共几何字段）
- TextObject: 文本组件
- ContainerObject: 容器组件（子组件按兄弟节点平铺输出）
- TableObject: 表格组件（行/列/单元格网格）
"""

from __future__ import annotations

from typing import Annotated, Any, NamedTuple, Union

from pydantic import BaseModel, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

from .style import TRANSPARENT, BLACK, Border, Color, Font, HorzAlign, VertAlign


class ReportModel(BaseModel):
    """报表模型基类（描述文件同时接受 camelCase 与 snake_case 字段名）"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class ReportComponent(ReportModel):
    """通用报表组件"""
    type: str = Field("ReportComponent", description="类型标记（输出到JSON的type字段）")
    name: str | None = ""
    left: float = Field(0.0, description="绝对左边距（原生单位）")
    top: float = Field(0.0, description="绝对上边距（原生单位）")
    width: float = 0.0
    height: float = 0.0
    border: Border | None = None
    exportable: bool = True


class TextObject(ReportComponent):
    """文本组件"""
    type: str = "TextObject"
    text: str | None = ""
    horz_align: HorzAlign = HorzAlign.LEFT
    vert_align: VertAlign = VertAlign.TOP
    font: Font = Field(default_factory=Font)
    text_color: Color = BLACK
    fill_color: Color = TRANSPARENT


class ContainerObject(ReportComponent):
    """容器组件"""
    type: str = "ContainerObject"
    objects: list[Component | None] = Field(default_factory=list)

    def get_child_objects(self) -> list[Any]:
        """返回子组件（保持声明顺序）"""
        return list(self.objects)


class CellAddress(NamedTuple):
    """单元格地址（列, 行）"""
    column: int
    row: int


class TableRow(ReportModel):
    """表格行"""
    height: float = 0.0
    visible: bool = True


class TableColumn(ReportModel):
    """表格列"""
    width: float = 0.0
    visible: bool = True


class TableCell(TextObject):
    """表格单元格（锚点地址 + 跨行/跨列）"""
    type: str = "TableCell"
    column: int = Field(..., ge=0, description="锚点列索引")
    row: int = Field(..., ge=0, description="锚点行索引")
    row_span: int = Field(1, ge=1)
    col_span: int = Field(1, ge=1)

    @property
    def address(self) -> CellAddress:
        return CellAddress(self.column, self.row)


class TableObject(ReportComponent):
    """表格组件"""
    type: str = "TableObject"
    rows: list[TableRow] = Field(default_factory=list)
    columns: list[TableColumn] = Field(default_factory=list)
    cells: list[TableCell] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def get_cell(self, column: int, row: int) -> TableCell | None:
        """
        获取占据 (column, row) 槽位的单元格

        跨行/跨列单元格占据其跨度内（裁剪到表格边界）的全部槽位，
        覆盖锚定在跨度内部的其他单元格。网格按当前 cells 现算，
        修改 cells 后立即生效。
        """
        return self._build_grid().get(CellAddress(column, row))

    def _build_grid(self) -> dict[CellAddress, TableCell]:
        grid: dict[CellAddress, TableCell] = {}
        for cell in self.cells:
            grid.setdefault(cell.address, cell)

        for cell in self.cells:
            if cell.row_span == 1 and cell.col_span == 1:
                continue
            if grid.get(cell.address) is not cell:
                continue
            last_row = min(cell.row + cell.row_span, self.row_count)
            last_column = min(cell.column + cell.col_span, self.column_count)
            for r in range(cell.row, last_row):
                for c in range(cell.column, last_column):
                    grid[CellAddress(c, r)] = cell
        return grid


# ============================================================================
# 组件联合类型（按 type 标记区分，缺省按字段形状推断）
# ============================================================================

_TYPE_TAGS = {
    "TextObject": "text",
    "TableObject": "table",
    "ContainerObject": "container",
    "ReportComponent": "generic",
}

_TEXT_KEYS = {"text", "font", "horzAlign", "horz_align", "vertAlign", "vert_align"}


def _component_kind(value: Any) -> str:
    """组件种类判别"""
    if isinstance(value, dict):
        tag = _TYPE_TAGS.get(value.get("type"))
        if tag:
            return tag
        keys = set(value)
        if keys & {"cells", "rows", "columns"}:
            return "table"
        if "objects" in keys:
            return "container"
        if keys & _TEXT_KEYS:
            return "text"
        return "generic"

    if isinstance(value, TableObject):
        return "table"
    if isinstance(value, ContainerObject):
        return "container"
    if isinstance(value, TextObject):
        return "text"
    return "generic"


Component = Annotated[
    Union[
        Annotated[TextObject, Tag("text")],
        Annotated[TableObject, Tag("table")],
        Annotated[ContainerObject, Tag("container")],
        Annotated[ReportComponent, Tag("generic")],
    ],
    Discriminator(_component_kind),
]

ContainerObject.model_rebuild()
