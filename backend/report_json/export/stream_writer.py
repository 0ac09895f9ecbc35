"""
流写出器 - 顺序追加的JSON记号输出

职责：
1. 持有输出流，逐个写出JSON记号（不在内存中拼接完整文档）
2. 维护容器栈，自动在同一容器的相邻元素/属性之间写分隔符
3. 结束时刷新并释放（二进制流解除包装，所有权仍归调用方）

测试要点：
- test_separators: 相邻元素/属性自动加逗号
- test_close_all: 一次关闭全部未关闭容器
- test_mismatched_end: 容器类型不匹配报错
- test_binary_stream: 二进制流按UTF-8无BOM写出
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, Any

from ..interfaces import StreamStateError
from .encoders import escape_json, format_float

_OBJECT = "object"
_ARRAY = "array"


@dataclass
class _Frame:
    """一个未关闭的容器"""
    kind: str
    has_item: bool = False


class JsonStreamWriter:
    """JSON流写出器"""

    def __init__(
        self,
        stream: IO[Any],
        encoding: str = "utf-8",
        buffer_size: int = 4096,
        float_precision: int = 4,
    ):
        self.float_precision = float_precision
        self._stack: list[_Frame] = []
        self._root_written = False
        self._closed = False
        self._wrapper: io.TextIOWrapper | None = None
        self._buffer: io.BufferedWriter | None = None

        if isinstance(stream, io.TextIOBase):
            self._out: IO[str] = stream
        else:
            raw = stream
            if not isinstance(raw, io.BufferedIOBase):
                self._buffer = io.BufferedWriter(raw, buffer_size)
                raw = self._buffer
            self._wrapper = io.TextIOWrapper(raw, encoding=encoding, newline="")
            self._out = self._wrapper

    # === 状态 ===

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def depth(self) -> int:
        """当前未关闭的容器层数"""
        return len(self._stack)

    # === 容器 ===

    def begin_object(self) -> None:
        self._begin_value()
        self._write("{")
        self._stack.append(_Frame(_OBJECT))

    def end_object(self) -> None:
        self._end(_OBJECT, "}")

    def begin_array(self) -> None:
        self._begin_value()
        self._write("[")
        self._stack.append(_Frame(_ARRAY))

    def end_array(self) -> None:
        self._end(_ARRAY, "]")

    def begin_object_property(self, name: str) -> None:
        """写出 "name":{ 并进入对象"""
        self._write_name(name)
        self._write("{")
        self._stack.append(_Frame(_OBJECT))

    def begin_array_property(self, name: str) -> None:
        """写出 "name":[ 并进入数组"""
        self._write_name(name)
        self._write("[")
        self._stack.append(_Frame(_ARRAY))

    def close_all(self) -> None:
        """由内向外关闭所有未关闭的容器"""
        while self._stack:
            frame = self._stack.pop()
            self._write("}" if frame.kind == _OBJECT else "]")

    # === 属性 ===

    def write_string_property(self, name: str, value: str | None) -> None:
        self._write_name(name)
        self._write_string(value)

    def write_int_property(self, name: str, value: int) -> None:
        self._write_name(name)
        self._write(str(int(value)))

    def write_number_property(self, name: str, value: float) -> None:
        self._write_name(name)
        self._write(format_float(value, self.float_precision))

    # === 数组元素/顶层值 ===

    def write_string(self, value: str | None) -> None:
        self._begin_value()
        self._write_string(value)

    def write_int(self, value: int) -> None:
        self._begin_value()
        self._write(str(int(value)))

    def write_number(self, value: float) -> None:
        self._begin_value()
        self._write(format_float(value, self.float_precision))

    def write_raw(self, token: str) -> None:
        """原样写出记号（不做分隔符处理）"""
        self._write(token)

    # === 生命周期 ===

    def flush(self) -> None:
        if not self._closed:
            self._out.flush()

    def close(self) -> None:
        """刷新并释放；不关闭调用方的流，重复调用为空操作"""
        if self._closed:
            return
        self._closed = True
        try:
            self._out.flush()
        finally:
            if self._wrapper is not None:
                self._wrapper.detach()
                self._wrapper = None
            if self._buffer is not None:
                self._buffer.detach()
                self._buffer = None

    # === 内部 ===

    def _write(self, token: str) -> None:
        if self._closed:
            raise StreamStateError("写出器已释放，不能继续写入")
        self._out.write(token)

    def _write_string(self, value: str | None) -> None:
        self._write('"')
        self._write(escape_json(value))
        self._write('"')

    def _write_name(self, name: str) -> None:
        if not self._stack or self._stack[-1].kind != _OBJECT:
            raise StreamStateError(f"属性 {name!r} 只能写在对象内")
        self._separator(self._stack[-1])
        self._write_string(name)
        self._write(":")

    def _begin_value(self) -> None:
        if not self._stack:
            if self._root_written:
                raise StreamStateError("顶层只能写出一个JSON值")
            self._root_written = True
            return
        frame = self._stack[-1]
        if frame.kind != _ARRAY:
            raise StreamStateError("对象内的值必须通过属性写出")
        self._separator(frame)

    def _separator(self, frame: _Frame) -> None:
        if frame.has_item:
            self._write(",")
        frame.has_item = True

    def _end(self, kind: str, token: str) -> None:
        if not self._stack or self._stack[-1].kind != kind:
            current = self._stack[-1].kind if self._stack else "顶层"
            raise StreamStateError(f"容器不匹配: 期望关闭{kind}，当前为{current}")
        self._stack.pop()
        self._write(token)
