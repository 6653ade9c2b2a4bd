"""文本分词：小写化 -> 按分隔符切分 -> 长度/停用词过滤 -> 识别 @提及。"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .stop_words import STOP_WORDS
from .utils import TOKEN_SPLIT_PATTERN


def split_tokens(content: str) -> List[str]:
    """只做小写化和切分，不过滤。"""
    if not content:
        return []
    return [t for t in TOKEN_SPLIT_PATTERN.split(content.lower()) if t]


def is_countable(token: str, stop_words: Iterable[str] = STOP_WORDS) -> bool:
    if len(token) <= 1:
        return False
    return token not in stop_words


def is_mention(token: str) -> bool:
    return token.startswith('@') and len(token) > 1


def tokenize(content: str) -> List[Tuple[str, bool]]:
    """
    把一条文本转为可计数的词

    Returns:
        [(word, is_mention), ...]，按出现顺序；每个词都计入词频，
        is_mention 为 True 的同时计入 @提及
    """
    return [
        (token, is_mention(token))
        for token in split_tokens(content)
        if is_countable(token)
    ]
