"""
表格写出单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_table_writer.py -v
"""

from typing import Any

import pytest

from report_json.models import (
    Band,
    Border,
    Document,
    Page,
    TableCell,
    TableColumn,
    TableObject,
    TableRow,
)


def _export_table(run_export, table: TableObject) -> dict[str, Any]:
    doc = Document(pages=[Page(width=4, height=4, bands=[Band(objects=[table])])])
    return run_export(doc)["pages"][0]["objects"][0]


class TestTableMetadata:
    """行/列元数据测试"""

    def test_counts_unfiltered(self, run_export, sample_table: TableObject):
        sample_table.rows[1].visible = False
        table = _export_table(run_export, sample_table)["table"]
        assert table["rowCount"] == 3
        assert table["columnCount"] == 3

    def test_rows_and_columns(self, run_export, sample_table: TableObject):
        table = _export_table(run_export, sample_table)["table"]
        assert table["rows"] == [{"index": i, "height": 5} for i in range(3)]
        assert table["columns"] == [{"index": i, "width": 10} for i in range(3)]

    def test_hidden_rows_columns_keep_index(self, run_export, sample_table: TableObject):
        """隐藏行列不输出，index 保持原始序号"""
        sample_table.rows[0].visible = False
        sample_table.columns[1].visible = False
        table = _export_table(run_export, sample_table)["table"]
        assert [r["index"] for r in table["rows"]] == [1, 2]
        assert [c["index"] for c in table["columns"]] == [0, 2]

    def test_table_object_fields(self, run_export, sample_table: TableObject):
        obj = _export_table(run_export, sample_table)
        assert obj["type"] == "TableObject"
        assert obj["width"] == 30
        assert "text" not in obj
        assert list(obj["table"]) == ["rowCount", "columnCount", "rows", "columns", "cells"]

    def test_empty_table(self, run_export):
        table = _export_table(run_export, TableObject(name="Empty"))["table"]
        assert table == {"rowCount": 0, "columnCount": 0, "rows": [], "columns": [], "cells": []}


class TestCellScan:
    """单元格扫描测试"""

    def test_span_dedup(self, run_export, sample_table: TableObject):
        """2x2 跨度单元格只在锚点输出一次"""
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        positions = [(c["row"], c["column"]) for c in cells]
        assert positions == [(0, 0), (0, 2), (1, 2), (2, 0), (2, 1), (2, 2)]
        big = cells[0]
        assert (big["rowSpan"], big["colSpan"]) == (2, 2)
        assert [c["text"] for c in cells].count("big") == 1

    def test_cell_fields(self, run_export, sample_table: TableObject):
        sample_table.cells[1].border = Border(left=2, top=2, right=2, bottom=2, color="#FF112233")
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        cell = cells[1]
        assert cell == {
            "row": 0,
            "column": 2,
            "rowSpan": 1,
            "colSpan": 1,
            "left": 20,
            "top": 0,
            "width": 10,
            "height": 5,
            "text": "c2r0",
            "horzAlign": "Left",
            "vertAlign": "Top",
            "fontName": "Arial",
            "fontSize": 10,
            "fontStyle": "Regular",
            "textColor": "#FF000000",
            "fillColor": "#00FFFFFF",
            "border": {"left": 0.5, "top": 0.5, "right": 0.5, "bottom": 0.5, "color": "#FF112233"},
        }
        assert "border" not in cells[0]

    def test_hidden_row_excludes_cells(self, run_export, sample_table: TableObject):
        sample_table.rows[2].visible = False
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        assert all(c["row"] != 2 for c in cells)
        assert len(cells) == 3

    def test_hidden_column_excludes_cells(self, run_export, sample_table: TableObject):
        sample_table.columns[2].visible = False
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        assert [(c["row"], c["column"]) for c in cells] == [(0, 0), (2, 0), (2, 1)]

    def test_hidden_anchor_row_drops_span(self, run_export, sample_table: TableObject):
        """锚点所在行隐藏时，跨度单元格不在延续槽位补出"""
        sample_table.rows[0].visible = False
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        assert "big" not in [c["text"] for c in cells]

    def test_cell_not_exportable(self, run_export, sample_table: TableObject):
        sample_table.cells[0].exportable = False
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        assert "big" not in [c["text"] for c in cells]
        assert len(cells) == 5

    def test_cells_changed_between_exports(self, run_export, sample_table: TableObject):
        """两次导出之间修改 cells，第二次按新内容输出"""
        assert len(_export_table(run_export, sample_table)["table"]["cells"]) == 6

        sample_table.cells.pop()
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        assert len(cells) == 5
        assert "c2r2" not in [c["text"] for c in cells]

        sample_table.cells.append(TableCell(column=2, row=2, text="new"))
        cells = _export_table(run_export, sample_table)["table"]["cells"]
        assert cells[-1]["text"] == "new"

    def test_missing_cells(self, run_export):
        table = TableObject(
            rows=[TableRow(height=4), TableRow(height=4)],
            columns=[TableColumn(width=4), TableColumn(width=4)],
            cells=[TableCell(column=1, row=1, text="only")],
        )
        cells = _export_table(run_export, table)["table"]["cells"]
        assert [(c["row"], c["column"], c["text"]) for c in cells] == [(1, 1, "only")]

    @pytest.mark.parametrize("row_span,col_span,expected", [
        (1, 2, 1),
        (2, 1, 1),
        (2, 2, 1),
    ])
    def test_single_entry_per_span(self, run_export, row_span, col_span, expected):
        table = TableObject(
            rows=[TableRow(height=4) for _ in range(2)],
            columns=[TableColumn(width=4) for _ in range(2)],
            cells=[TableCell(column=0, row=0, row_span=row_span, col_span=col_span, text="span")],
        )
        cells = _export_table(run_export, table)["table"]["cells"]
        assert [c["text"] for c in cells].count("span") == expected
