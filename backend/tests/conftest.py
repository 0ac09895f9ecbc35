"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(run_export, sample_document):
        result = run_export(sample_document)
        assert result["unit"] == "mm"
"""

from __future__ import annotations

import io
import json
import tempfile
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

from report_json.config import RuntimeConfig
from report_json.config.runtime_config import UnitsConfig
from report_json.export import JsonExport
from report_json.models import (
    Band,
    Border,
    Color,
    ContainerObject,
    Document,
    Font,
    FontStyle,
    HorzAlign,
    Margins,
    Page,
    ReportComponent,
    TableCell,
    TableColumn,
    TableObject,
    TableRow,
    TextObject,
)

# 测试统一使用 4 单位/毫米，便于心算
UNITS_PER_MM = 4.0


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（4 单位/毫米）"""
    return RuntimeConfig(units=UnitsConfig(units_per_mm=UNITS_PER_MM))


@pytest.fixture
def exporter(runtime_config: RuntimeConfig) -> JsonExport:
    return JsonExport(runtime_config)


@pytest.fixture
def run_export(exporter: JsonExport) -> Callable[[Document], dict[str, Any]]:
    """导出到内存并解析结果"""
    def _run(document: Document) -> dict[str, Any]:
        buffer = io.BytesIO()
        exporter.export(document, buffer)
        return json.loads(buffer.getvalue().decode("utf-8"))
    return _run


# ============================================================================
# 数据模型 Fixtures
# ============================================================================

@pytest.fixture
def sample_text() -> TextObject:
    """示例文本组件"""
    return TextObject(
        name="Title",
        left=8,
        top=4,
        width=200,
        height=40,
        text="Hello",
        horz_align=HorzAlign.CENTER,
        font=Font(name="Tahoma", size=12, style=FontStyle.BOLD),
        text_color=Color(a=255, r=255, g=0, b=0),
        border=Border(left=4, top=4, right=8, bottom=8, color="#FF00FF00"),
    )


@pytest.fixture
def sample_table() -> TableObject:
    """
    3x3 示例表格：
    - (0,0) 跨 2 行 2 列
    - 第1列第2行各一个普通单元格
    """
    cells = [
        TableCell(column=0, row=0, row_span=2, col_span=2, left=0, top=0, width=80, height=40, text="big"),
        TableCell(column=2, row=0, left=80, top=0, width=40, height=20, text="c2r0"),
        TableCell(column=2, row=1, left=80, top=20, width=40, height=20, text="c2r1"),
        TableCell(column=0, row=2, left=0, top=40, width=40, height=20, text="c0r2"),
        TableCell(column=1, row=2, left=40, top=40, width=40, height=20, text="c1r2"),
        TableCell(column=2, row=2, left=80, top=40, width=40, height=20, text="c2r2"),
    ]
    return TableObject(
        name="Table1",
        width=120,
        height=60,
        rows=[TableRow(height=20) for _ in range(3)],
        columns=[TableColumn(width=40) for _ in range(3)],
        cells=cells,
    )


@pytest.fixture
def sample_page(sample_text: TextObject) -> Page:
    """示例页面（单区带单文本）"""
    return Page(
        width=840,
        height=1188,
        margins=Margins(left=40, top=40, right=40, bottom=40),
        bands=[Band(name="PageHeader1", objects=[sample_text])],
    )


@pytest.fixture
def sample_document(sample_page: Page, sample_table: TableObject) -> Document:
    """两页示例文档"""
    container = ContainerObject(
        name="Panel",
        width=400,
        height=100,
        objects=[
            TextObject(name="Inner1", text="a"),
            ReportComponent(type="LineObject", name="Rule", width=400),
        ],
    )
    page2 = Page(
        width=840,
        height=1188,
        bands=[Band(name="Data1", objects=[container, sample_table])],
    )
    return Document(name="doc", pages=[sample_page, page2])


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
