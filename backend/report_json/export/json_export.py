"""
JSON导出器 - 文档/页面遍历状态机

职责：
1. 写出文档包头 {"unit":"mm","pages":[ 与包尾
2. 逐页写出页面包头（序号/尺寸/边距），逐区带写出顶层组件
3. 按页码范围选择导出页面
4. 结束时补齐所有未关闭的容器，保证输出始终是完整JSON

状态：NOT_STARTED → IN_DOCUMENT → (IN_PAGE)* → FINISHED

测试要点：
- test_zero_pages: 无页面时输出合法JSON
- test_page_order: 页面/对象顺序
- test_idempotent_close: 重复 export_page_end/finish 为空操作
- test_page_selection: 页码范围选择
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from ..config import RuntimeConfig, get_config
from ..interfaces import ConfigError, ExportError, IReportExporter
from .encoders import to_millimeters
from .object_writer import ObjectWriter
from .stream_writer import JsonStreamWriter

if TYPE_CHECKING:
    from ..models import Band, Document, Page

logger = logging.getLogger(__name__)


class ExportState(str, Enum):
    """导出状态"""
    NOT_STARTED = "not_started"
    IN_DOCUMENT = "in_document"
    IN_PAGE = "in_page"
    FINISHED = "finished"


class JsonExport(IReportExporter):
    """JSON导出器实现（面向小票打印机等下游渲染器）"""

    FILE_FILTER = "Json file (*.json)|*.json"
    DEFAULT_EXTENSION = ".json"

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        units_per_mm: float | None = None,
    ):
        self.config = config or get_config()
        if units_per_mm is None:
            units_per_mm = self.config.units.units_per_mm
        self.units_per_mm = units_per_mm
        if self.units_per_mm <= 0:
            raise ConfigError(f"units_per_mm 必须大于0: {self.units_per_mm}")

        self.state = ExportState.NOT_STARTED
        self.page_index = 0
        self.object_count = 0  # 当前页已输出对象数
        self._writer: JsonStreamWriter | None = None
        self._objects: ObjectWriter | None = None

    # ========================================================================
    # 状态机
    # ========================================================================

    def start(self, stream: IO[Any]) -> None:
        """开始导出，写入文档包头"""
        if self.state in (ExportState.IN_DOCUMENT, ExportState.IN_PAGE):
            raise ExportError("导出已开始，不能重复start")

        fmt = self.config.format
        self._writer = JsonStreamWriter(
            stream,
            encoding=fmt.encoding,
            buffer_size=self.config.export.buffer_size,
            float_precision=fmt.float_precision,
        )
        self._objects = ObjectWriter(self._writer, self.units_per_mm)

        w = self._writer
        w.begin_object()
        w.write_string_property("unit", "mm")
        w.begin_array_property("pages")

        self.page_index = 0
        self.object_count = 0
        self.state = ExportState.IN_DOCUMENT
        logger.debug(f"JSON导出开始: units_per_mm={self.units_per_mm}")

    def export_page_begin(self, page: Page) -> None:
        """写出页面包头并打开 objects 数组"""
        if self._writer is None or self.state not in (ExportState.IN_DOCUMENT, ExportState.IN_PAGE):
            raise ExportError("导出尚未开始，不能写出页面")

        if self.state == ExportState.IN_PAGE:
            logger.warning(f"第{self.page_index}页未关闭，自动关闭")
            self._close_page()

        self.page_index += 1
        self.object_count = 0

        w = self._writer
        w.begin_object()
        w.write_int_property("index", self.page_index)
        w.write_number_property("width", self._mm(page.width))
        w.write_number_property("height", self._mm(page.height))

        margins = page.margins
        w.begin_object_property("margins")
        w.write_number_property("left", self._mm(margins.left))
        w.write_number_property("top", self._mm(margins.top))
        w.write_number_property("right", self._mm(margins.right))
        w.write_number_property("bottom", self._mm(margins.bottom))
        w.end_object()

        w.begin_array_property("objects")
        self.state = ExportState.IN_PAGE

    def export_band(self, band: Band | None) -> None:
        """导出区带内全部顶层组件（区带本身不输出）"""
        if band is None:
            return
        if self._objects is None or self.state != ExportState.IN_PAGE:
            raise ExportError("区带只能在页面内导出")

        for component in band.objects:
            self.object_count += self._objects.write_component(component)

    def export_page_end(self, page: Page | None = None) -> None:
        """关闭 objects 数组与页面对象"""
        if self._writer is None or self.state != ExportState.IN_PAGE:
            return
        self._close_page()

    def finish(self) -> None:
        """关闭页面数组与文档对象（含未关闭的页面），刷新并释放"""
        writer = self._writer
        if writer is None:
            return

        if self.state == ExportState.IN_PAGE:
            logger.warning(f"第{self.page_index}页未关闭，结束时自动关闭")

        # 写出失败时同样释放写出器，异常原样抛出
        try:
            writer.close_all()
        finally:
            self._writer = None
            self._objects = None
            self.state = ExportState.FINISHED
            writer.close()
        logger.info(f"JSON导出完成: {self.page_index} 页")

    # ========================================================================
    # 便捷入口
    # ========================================================================

    def export_page(self, page: Page) -> None:
        """导出单个页面（包头 + 全部区带 + 包尾）"""
        self.export_page_begin(page)
        for band in page.bands:
            self.export_band(band)
        logger.debug(f"第{self.page_index}页: {self.object_count} 个对象")
        self.export_page_end(page)

    def export(self, document: Document, stream: IO[Any]) -> int:
        """
        导出整个文档到流

        Args:
            document: 已布局文档
            stream: 输出流（文本流或二进制流），不会被关闭

        Returns:
            实际导出的页数

        Raises:
            ConfigError: 页码范围无效
            ExportError: 导出器状态错误
        """
        page_numbers = self.config.select_pages(document.page_count)
        if document.page_count and not page_numbers:
            logger.warning(f"页码范围 {self.config.export.page_numbers!r} 未选中任何页面")

        self.start(stream)
        try:
            for number in page_numbers:
                self.export_page(document.pages[number - 1])
            self.finish()
        except BaseException:
            self._abort()
            raise

        return self.page_index

    def export_to_file(self, document: Document, path: str | Path) -> Path:
        """导出到文件（自动创建父目录），返回文件路径"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            self.export(document, f)
        return path

    # ========================================================================
    # 内部
    # ========================================================================

    def _mm(self, value: float) -> float:
        return to_millimeters(value, self.units_per_mm)

    def _close_page(self) -> None:
        w = self._writer
        w.end_array()
        w.end_object()
        self.state = ExportState.IN_DOCUMENT

    def _abort(self) -> None:
        """导出失败：不再写包尾，仅释放写出器"""
        writer = self._writer
        self._writer = None
        self._objects = None
        self.state = ExportState.FINISHED
        if writer is None:
            return
        try:
            writer.close()
        except OSError as e:
            logger.warning(f"释放写出器失败: {e}")
