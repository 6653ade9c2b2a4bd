"""
聚合模块 - 把逐条消息的计数事件累加为全局统计与个人统计
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Union

from .chat_import.errors import AnalysisWarning, UnknownActor
from .chat_import.schema import Corpus, Message, Participant
from .classifier import ContentKind, classify, sticker_key
from .config import Config
from .tokenizer import tokenize


logger = logging.getLogger(__name__)

CATEGORIES = ('words', 'mentions', 'reactions', 'stickers')


class CounterSet:
    """一组统计：词频 / @提及 / 表情回应 / 贴纸 + 消息数"""

    def __init__(self):
        self.words: Counter = Counter()
        self.mentions: Counter = Counter()
        self.reactions: Counter = Counter()
        self.stickers: Counter = Counter()
        self.message_count = 0

    def to_dict(self) -> Dict:
        return {
            'words': dict(self.words),
            'mentions': dict(self.mentions),
            'reactions': dict(self.reactions),
            'stickers': dict(self.stickers),
            'message_count': self.message_count,
        }


class AnalysisResult:
    """一次分析的可变结果；participants 的顺序即名单顺序"""

    def __init__(self, participant_names: Iterable[str] = ()):
        self.overall = CounterSet()
        self.participants: Dict[str, CounterSet] = {}
        self.warnings: List[str] = []
        for name in participant_names:
            self.participants.setdefault(name, CounterSet())

    def to_dict(self) -> Dict:
        return {
            'overall': self.overall.to_dict(),
            'participants': {name: cs.to_dict() for name, cs in self.participants.items()},
            'warnings': list(self.warnings),
        }


class Aggregator:
    """
    消息聚合器

    先按名单为每个参与者建立全零统计，再逐条 feed 消息。
    未知参与者、无法解析的贴纸地址只丢弃对应事件并记录警告。
    """

    def __init__(self, participants: Iterable[Union[str, Participant]],
                 placeholder_sticker_id: Optional[str] = None):
        names = [p.name if isinstance(p, Participant) else str(p) for p in participants]
        self.result = AnalysisResult(names)
        self.placeholder_sticker_id = (
            Config.PLACEHOLDER_STICKER_ID if placeholder_sticker_id is None else placeholder_sticker_id
        )
        self._fed = 0

    def _lookup(self, name: str, *, role: str, index: int) -> CounterSet:
        cs = self.result.participants.get(name)
        if cs is None:
            raise UnknownActor(name, role=role, message_index=index)
        return cs

    def _warn(self, warning: AnalysisWarning) -> None:
        text = f"messages[{warning.message_index}]: {warning}"
        logger.warning(text)
        self.result.warnings.append(text)

    def feed(self, message: Message, index: Optional[int] = None) -> None:
        """处理一条消息（顺序：表情回应 -> 消息数 -> 内容分类）"""
        if index is None:
            index = self._fed
        self._fed += 1

        overall = self.result.overall

        # 1) 表情回应：与内容类型无关，按回应者计数
        for r in (message.reactions or ()):
            try:
                actor = self._lookup(r.actor, role='actor', index=index)
            except UnknownActor as e:
                self._warn(e)
                continue
            overall.reactions[r.reaction] += 1
            actor.reactions[r.reaction] += 1

        # 2) 消息数
        try:
            sender = self._lookup(message.sender_name, role='sender', index=index)
        except UnknownActor as e:
            self._warn(e)
            return
        overall.message_count += 1
        sender.message_count += 1

        # 3) 内容分类
        kind = classify(message)
        if kind in (ContentKind.PHOTO, ContentKind.ATTACHMENT):
            return

        if kind == ContentKind.STICKER:
            try:
                sid = sticker_key(message, placeholder_id=self.placeholder_sticker_id, message_index=index)
            except AnalysisWarning as e:
                self._warn(e)
                return
            if sid is not None:
                overall.stickers[sid] += 1
                sender.stickers[sid] += 1
            return

        # 4) 普通文本
        for word, mention in tokenize(message.content):
            if mention:
                overall.mentions[word] += 1
                sender.mentions[word] += 1
            overall.words[word] += 1
            sender.words[word] += 1

    def feed_all(self, messages: Iterable[Message]) -> AnalysisResult:
        for idx, m in enumerate(messages):
            self.feed(m, idx)
        return self.result


def analyze_corpus(corpus: Corpus, *, placeholder_sticker_id: Optional[str] = None) -> AnalysisResult:
    """按导出顺序处理全部消息，返回可变的分析结果"""
    aggregator = Aggregator(corpus.participant_names(), placeholder_sticker_id=placeholder_sticker_id)
    result = aggregator.feed_all(corpus.messages)
    logger.info(
        f"Analyzed {result.overall.message_count} messages for {len(result.participants)} participants "
        f"({len(result.warnings)} warnings)"
    )
    return result
