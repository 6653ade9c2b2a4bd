"""聊天导入层。

提供一个统一入口：把 Messenger 导出的 message.json 加载为 Corpus，
并输出可供分析器使用的数据。
"""

from .errors import MalformedStickerURI, ParseError, SchemaInvalid, SourceUnavailable, UnknownActor
from .importers import parse_corpus
from .loader import load_corpus

__all__ = [
    "load_corpus",
    "parse_corpus",
    "ParseError",
    "SourceUnavailable",
    "SchemaInvalid",
    "UnknownActor",
    "MalformedStickerURI",
]
