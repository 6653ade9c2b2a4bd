"""消息内容分类。

一条消息只会落入一种内容状态，按规则表自上而下匹配，先命中者生效：
照片分享 -> 附件分享 -> 贴纸 -> 普通文本。
表情回应（reactions）与内容状态无关，由聚合器单独处理。
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, NamedTuple, Optional, Tuple

from .chat_import.errors import MalformedStickerURI
from .chat_import.schema import Message
from .config import Config
from .utils import ATTACHMENT_MARKER, PHOTO_MARKER, extract_sticker_id


class ContentKind(str, Enum):
    PHOTO = 'photo'
    ATTACHMENT = 'attachment'
    STICKER = 'sticker'
    TEXT = 'text'


class ContentRule(NamedTuple):
    kind: ContentKind
    matches: Callable[[Message], bool]


CONTENT_RULES: Tuple[ContentRule, ...] = (
    ContentRule(ContentKind.PHOTO, lambda m: PHOTO_MARKER in (m.content or '')),
    ContentRule(ContentKind.ATTACHMENT, lambda m: ATTACHMENT_MARKER in (m.content or '')),
    ContentRule(ContentKind.STICKER, lambda m: m.sticker is not None),
    ContentRule(ContentKind.TEXT, lambda m: True),
)


def classify(message: Message, rules: Tuple[ContentRule, ...] = CONTENT_RULES) -> ContentKind:
    for rule in rules:
        if rule.matches(message):
            return rule.kind
    return ContentKind.TEXT


def sticker_key(message: Message, *, placeholder_id: Optional[str] = None,
                message_index: Optional[int] = None) -> Optional[str]:
    """
    返回需要计数的贴纸 id；默认点赞贴纸返回 None

    Raises:
        MalformedStickerURI: 地址中找不到 "_n_" 分隔的 id
    """
    if message.sticker is None:
        return None

    if placeholder_id is None:
        placeholder_id = Config.PLACEHOLDER_STICKER_ID

    sticker_id = extract_sticker_id(message.sticker.uri)
    if sticker_id is None:
        raise MalformedStickerURI(message.sticker.uri, message_index=message_index)

    if placeholder_id and sticker_id == placeholder_id:
        return None
    return sticker_id
