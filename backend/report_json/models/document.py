"""
文档模型 - 文档/页面/区带

Document 是导出核心的唯一输入：页面按顺序排列，页面内按区带组织顶层组件。
区带本身不输出，仅其组件出现在页面的 objects 数组中。
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import Field, ValidationError

from ..interfaces import DocumentLoadError
from .components import Component, ReportModel


class Margins(ReportModel):
    """页边距（原生单位）"""
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


class Band(ReportModel):
    """区带（顶层组件分组）"""
    name: str | None = ""
    objects: list[Component | None] = Field(default_factory=list)


class Page(ReportModel):
    """已布局页面"""
    width: float
    height: float
    margins: Margins = Field(default_factory=Margins)
    bands: list[Band | None] = Field(default_factory=list)


class Document(ReportModel):
    """已布局文档（页面有序）"""
    name: str | None = None
    pages: list[Page] = Field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @classmethod
    def from_file(cls, path: str | Path) -> Document:
        """
        从描述文件加载文档

        Args:
            path: .json / .yaml / .yml 文件路径

        Returns:
            文档对象

        Raises:
            DocumentLoadError: 文件不存在/无法解析/结构无效
        """
        path = Path(path)
        if not path.exists():
            raise DocumentLoadError(f"描述文件不存在: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise DocumentLoadError(f"描述文件解析失败: {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DocumentLoadError(f"描述文件顶层必须是对象: {path}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DocumentLoadError(f"描述文件结构无效: {path}: {e}") from e
