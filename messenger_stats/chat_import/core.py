"""导入层：通用小工具。

这里聚合：
- 导出器的乱码修复（UTF-8 被当作 latin-1 转义写入）
- 时间范围计算
"""

from __future__ import annotations

from typing import Optional

from .schema import Corpus


def fix_mojibake(s: Optional[str]) -> Optional[str]:
    """还原导出器的双重编码文本。

    Messenger 导出把每个 UTF-8 字节写成一个 \\u00XX 转义，json 解码后得到的是
    latin-1 字符串。仅当文本全部落在 latin-1 范围且能按 UTF-8 解码时才转换，
    否则原样返回（已是正确文本，或本来就是 latin-1 字符）。

    该判断是有损的：真实的 latin-1 文本若恰好也是合法 UTF-8 字节序列
    （例如确实写的是 "Ã©"），也会被改写；可用 FIX_MOJIBAKE=false 关闭。
    """

    if not s or s.isascii():
        return s
    try:
        return s.encode('latin-1').decode('utf-8')
    except (UnicodeEncodeError, UnicodeDecodeError):
        return s


def compute_time_range(corpus: Corpus) -> None:
    ts = [m.timestamp_ms for m in corpus.messages if m.timestamp_ms]
    if not ts:
        corpus.time_range = None
        return
    corpus.time_range = {"startTsMs": min(ts), "endTsMs": max(ts)}
