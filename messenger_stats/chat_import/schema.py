"""聊天导出的数据模型。

目标：
- 把 Messenger 导出的 message.json 转为强类型结构，供分类器/聚合器使用
- 参与者以完整显示名为唯一标识（不截断为名字，不合并不同写法）
- 时间统一为 epoch 毫秒（timestamp_ms），仅作展示，不参与计数

说明：
- sticker / reactions 是可选字段：缺失时为 None，与“空列表”区分
- type 原样保留，未知类型不做拒绝
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Participant:
    name: str


@dataclass(frozen=True)
class Sticker:
    uri: str


@dataclass(frozen=True)
class Reaction:
    reaction: str
    actor: str


@dataclass(frozen=True)
class Message:
    sender_name: str
    timestamp_ms: int = 0
    content: str = ""
    sticker: Optional[Sticker] = None
    reactions: Optional[Tuple[Reaction, ...]] = None
    type: str = "Generic"


@dataclass
class Corpus:
    participants: List[Participant] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)

    time_range: Optional[Dict[str, int]] = None  # {startTsMs, endTsMs}

    def participant_names(self) -> List[str]:
        """按出现顺序去重的参与者名字。"""
        seen: List[str] = []
        for p in self.participants:
            if p.name not in seen:
                seen.append(p.name)
        return seen


@dataclass
class LoadResult:
    corpus: Corpus
    warnings: List[str] = field(default_factory=list)


def safe_int(value: Any) -> Optional[int]:
    try:
        if value is None or isinstance(value, bool):
            return None
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None
