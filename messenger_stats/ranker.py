"""
排行模块 - 把无序的频次表转为确定顺序的排行

排序规则：次数降序；次数相同时按 key 升序，保证结果可复现。
排行结果在分析结束时一次性生成，之后只读。
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

from .aggregator import CATEGORIES, AnalysisResult, CounterSet
from .utils import EVERYONE


class FrequencyEntry(NamedTuple):
    key: str
    count: int


def rank_table(table: Mapping[str, int]) -> Tuple[FrequencyEntry, ...]:
    return tuple(
        FrequencyEntry(k, int(v))
        for k, v in sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))
    )


@dataclass(frozen=True)
class RankedCounterSet:
    words: Tuple[FrequencyEntry, ...] = ()
    mentions: Tuple[FrequencyEntry, ...] = ()
    reactions: Tuple[FrequencyEntry, ...] = ()
    stickers: Tuple[FrequencyEntry, ...] = ()
    message_count: int = 0

    @classmethod
    def from_counter_set(cls, cs: CounterSet) -> 'RankedCounterSet':
        return cls(
            words=rank_table(cs.words),
            mentions=rank_table(cs.mentions),
            reactions=rank_table(cs.reactions),
            stickers=rank_table(cs.stickers),
            message_count=cs.message_count,
        )

    def table(self, category: str) -> Tuple[FrequencyEntry, ...]:
        if category not in CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def to_dict(self, limit: Optional[int] = None) -> Dict:
        out = {'message_count': self.message_count}
        for category in CATEGORIES:
            entries = self.table(category)
            if limit is not None:
                entries = entries[:limit]
            out[category] = [{'key': k, 'count': c} for k, c in entries]
        return out


@dataclass(frozen=True)
class RankedResult:
    overall: RankedCounterSet
    participants: Mapping[str, RankedCounterSet]
    warnings: Tuple[str, ...] = ()

    @property
    def everyone_key(self) -> str:
        """全员伪参与者的名字；与真实参与者重名时改为 "(everyone)"、"((everyone))" ..."""
        key = EVERYONE
        while key in self.participants:
            key = f"({key})"
        return key

    def participant_names(self) -> List[str]:
        """[everyone_key, 参与者...]，参与者按名单顺序"""
        return [self.everyone_key, *self.participants.keys()]

    def counter_set(self, name: str) -> RankedCounterSet:
        """真实参与者优先；name 为 everyone_key 时返回全局统计；未知名字抛 KeyError"""
        if name in self.participants:
            return self.participants[name]
        if name == self.everyone_key:
            return self.overall
        raise KeyError(name)

    def table(self, name: str, category: str, limit: Optional[int] = None) -> Tuple[FrequencyEntry, ...]:
        entries = self.counter_set(name).table(category)
        if limit is not None:
            return entries[:max(0, limit)]
        return entries

    def top_entry(self, name: str, category: str) -> Optional[FrequencyEntry]:
        entries = self.table(name, category)
        return entries[0] if entries else None

    def to_dict(self, limit: Optional[int] = None) -> Dict:
        return {
            'overall': self.overall.to_dict(limit),
            'participants': {name: cs.to_dict(limit) for name, cs in self.participants.items()},
            'warnings': list(self.warnings),
        }


def rank_analysis(result: AnalysisResult) -> RankedResult:
    participants = {
        name: RankedCounterSet.from_counter_set(cs)
        for name, cs in result.participants.items()
    }
    return RankedResult(
        overall=RankedCounterSet.from_counter_set(result.overall),
        participants=MappingProxyType(participants),
        warnings=tuple(result.warnings),
    )
