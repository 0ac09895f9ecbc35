"""
模块接口契约 - 定义导出核心消费的能力接口

设计原则：
1. 导出核心只依赖能力（HasText/HasTableGrid/HasChildren/HasBorder），不依赖具体类
2. 宿主报表引擎的任意对象，只要满足协议即可导出
3. 便于单元测试和mock替换

使用方式：
    from report_json.interfaces import HasText

    if isinstance(component, HasText):
        ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING, Any, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Band, Page


# ============================================================================
# 组件能力协议
# ============================================================================

@runtime_checkable
class HasBorder(Protocol):
    """带边框的组件（border 可为 None）"""

    border: Any


@runtime_checkable
class HasText(Protocol):
    """文本能力 - 文本内容、对齐、字体、颜色"""

    text: str | None
    horz_align: Any
    vert_align: Any
    font: Any
    text_color: Any
    fill_color: Any


@runtime_checkable
class HasTableGrid(Protocol):
    """表格能力 - 行/列元数据与按(列,行)寻址的单元格网格"""

    rows: Any
    columns: Any

    @property
    def row_count(self) -> int:
        ...

    @property
    def column_count(self) -> int:
        ...

    def get_cell(self, column: int, row: int) -> Any:
        """
        获取占据指定网格槽位的单元格

        Args:
            column: 列索引（0起）
            row: 行索引（0起）

        Returns:
            单元格对象；跨行/跨列的延续槽位返回锚点单元格本身；空槽位返回None
        """
        ...


@runtime_checkable
class HasChildren(Protocol):
    """容器能力 - 按顺序暴露子组件"""

    def get_child_objects(self) -> Iterable[Any]:
        """返回子组件（保持声明顺序）"""
        ...


# ============================================================================
# 导出器接口
# ============================================================================

class IReportExporter(ABC):
    """报表导出器接口 - 由页面遍历驱动的流式导出"""

    @abstractmethod
    def start(self, stream: IO[Any]) -> None:
        """
        开始导出，写入文档包头

        Args:
            stream: 输出流（文本流或二进制流），所有权仍归调用方
        """
        ...

    @abstractmethod
    def export_page_begin(self, page: Page) -> None:
        """写入页面包头（序号/尺寸/边距）并打开对象数组"""
        ...

    @abstractmethod
    def export_band(self, band: Band | None) -> None:
        """导出一个区带内的全部顶层组件"""
        ...

    @abstractmethod
    def export_page_end(self, page: Page | None = None) -> None:
        """关闭对象数组与页面对象（写出器已释放时为空操作）"""
        ...

    @abstractmethod
    def finish(self) -> None:
        """关闭页面数组与文档对象，刷新并释放写出器（重复调用为空操作）"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class ReportJsonError(Exception):
    """基础异常"""
    pass


class ConfigError(ReportJsonError):
    """配置错误"""
    pass


class DocumentLoadError(ReportJsonError):
    """报表描述文件加载错误"""
    pass


class ExportError(ReportJsonError):
    """导出错误"""
    pass


class StreamStateError(ExportError):
    """流写出器状态错误（容器嵌套不匹配/写已关闭的流）"""
    pass
