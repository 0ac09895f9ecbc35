"""
表格写出 - 行/列元数据与去重后的单元格列表

职责：
1. rowCount/columnCount 原样输出（不过滤）
2. rows/columns 只输出可见项，index 为原始序号（不重新编号）
3. 单元格按行优先扫描可见行×可见列，跨行/跨列单元格只在锚点输出一次

测试要点：
- test_hidden_rows_columns: 隐藏行列不输出
- test_span_dedup: 2x2跨度单元格只输出一次
- test_cell_not_exportable: 不可导出单元格跳过
"""

from __future__ import annotations

import logging
from typing import Any

from .properties import PropertyWriter

logger = logging.getLogger(__name__)


class TableWriter(PropertyWriter):
    """表格写出器"""

    def write_table(self, table: Any) -> int:
        """
        写出 "table":{...}

        Returns:
            输出的单元格数量
        """
        w = self.writer
        w.begin_object_property("table")
        w.write_int_property("rowCount", table.row_count)
        w.write_int_property("columnCount", table.column_count)
        self._write_rows(table)
        self._write_columns(table)
        count = self._write_cells(table)
        w.end_object()
        return count

    def _write_rows(self, table: Any) -> None:
        w = self.writer
        w.begin_array_property("rows")
        for index, row in enumerate(table.rows):
            if not row.visible:
                continue
            w.begin_object()
            w.write_int_property("index", index)
            self.write_mm_property("height", row.height)
            w.end_object()
        w.end_array()

    def _write_columns(self, table: Any) -> None:
        w = self.writer
        w.begin_array_property("columns")
        for index, column in enumerate(table.columns):
            if not column.visible:
                continue
            w.begin_object()
            w.write_int_property("index", index)
            self.write_mm_property("width", column.width)
            w.end_object()
        w.end_array()

    def _write_cells(self, table: Any) -> int:
        w = self.writer
        visible_rows = [i for i, row in enumerate(table.rows) if row.visible]
        visible_columns = [i for i, column in enumerate(table.columns) if column.visible]

        count = 0
        w.begin_array_property("cells")
        for row_index in visible_rows:
            for column_index in visible_columns:
                cell = table.get_cell(column_index, row_index)
                if cell is None or not cell.exportable:
                    continue
                # 延续槽位：地址指向跨度左上角
                if tuple(cell.address) != (column_index, row_index):
                    continue
                self._write_cell(cell, column_index, row_index)
                count += 1
        w.end_array()

        logger.debug(f"表格单元格输出: {count} 个")
        return count

    def _write_cell(self, cell: Any, column_index: int, row_index: int) -> None:
        w = self.writer
        w.begin_object()
        w.write_int_property("row", row_index)
        w.write_int_property("column", column_index)
        w.write_int_property("rowSpan", cell.row_span)
        w.write_int_property("colSpan", cell.col_span)
        self.write_geometry(cell)
        self.write_text_properties(cell)
        self.write_border(cell.border)
        w.end_object()
