"""导入与分析阶段的异常类型。

- ParseError 及其子类：致命错误，整个分析直接中止
- AnalysisWarning 及其子类：单条事件级别的异常，由聚合器吞掉并记录为警告
"""

from __future__ import annotations

from typing import Optional


class ParseError(Exception):
    """导出文件无法转换为 Corpus。stage 为 "read" 或 "decode"。"""

    stage = "parse"

    def __init__(self, message: str, *, source: Optional[str] = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        if self.source:
            return f"[{self.stage}] {self.source}: {base}"
        return f"[{self.stage}] {base}"


class SourceUnavailable(ParseError):
    """读取失败：文件不存在、无权限、超出大小限制。"""

    stage = "read"


class SchemaInvalid(ParseError):
    """解码失败：不是合法 JSON，或结构与导出格式不符。"""

    stage = "decode"


class AnalysisWarning(Exception):
    """可恢复的单事件错误；message_index 为消息在导出中的下标。"""

    def __init__(self, message: str, *, message_index: Optional[int] = None):
        super().__init__(message)
        self.message_index = message_index


class UnknownActor(AnalysisWarning):
    def __init__(self, name: str, *, role: str = "actor", message_index: Optional[int] = None):
        super().__init__(f"未知参与者 {name!r} ({role})", message_index=message_index)
        self.name = name
        self.role = role


class MalformedStickerURI(AnalysisWarning):
    def __init__(self, uri: str, *, message_index: Optional[int] = None):
        super().__init__(f"无法从贴纸地址中提取 id: {uri!r}", message_index=message_index)
        self.uri = uri


__all__ = [
    "ParseError",
    "SourceUnavailable",
    "SchemaInvalid",
    "AnalysisWarning",
    "UnknownActor",
    "MalformedStickerURI",
]
