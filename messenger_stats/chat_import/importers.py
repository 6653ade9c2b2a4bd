"""聊天导入层：Messenger message.json 解析。

只做结构校验，不做业务过滤：
- 缺失/类型错误的必需字段 -> SchemaInvalid
- 未知的消息 type 原样保留，由分类器按普通文本处理
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .core import fix_mojibake
from .errors import SchemaInvalid
from .schema import Corpus, Message, Participant, Reaction, Sticker, safe_int
from ..config import Config


logger = logging.getLogger(__name__)


def _identity(s):
    return s


def _require_dict(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaInvalid(f"{where} 应为对象，实际为 {type(value).__name__}")
    return value


def _require_list(value: Any, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise SchemaInvalid(f"{where} 应为数组，实际为 {type(value).__name__}")
    return value


def _require_str(obj: Dict[str, Any], key: str, where: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise SchemaInvalid(f"{where}.{key} 缺失或不是字符串")
    return value


def _optional_str(obj: Dict[str, Any], key: str, where: str, default: str) -> str:
    value = obj.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise SchemaInvalid(f"{where}.{key} 不是字符串")
    return value


def _parse_timestamp_ms(value: Any, where: str) -> int:
    """timestamp_ms：int 或纯数字字符串；缺失按 0 处理。"""

    if value is None:
        return 0
    v = safe_int(value)
    if v is None or isinstance(value, float) and not value.is_integer():
        raise SchemaInvalid(f"{where}.timestamp_ms 不是整数")
    return v


def _parse_sticker(value: Any, where: str) -> Optional[Sticker]:
    if value is None:
        return None
    obj = _require_dict(value, f"{where}.sticker")
    return Sticker(uri=_require_str(obj, "uri", f"{where}.sticker"))


def _parse_reactions(value: Any, where: str, fix: Callable[[str], str]) -> Optional[Tuple[Reaction, ...]]:
    if value is None:
        return None
    out: List[Reaction] = []
    for i, it in enumerate(_require_list(value, f"{where}.reactions")):
        rw = f"{where}.reactions[{i}]"
        obj = _require_dict(it, rw)
        out.append(
            Reaction(
                reaction=fix(_require_str(obj, "reaction", rw)),
                actor=fix(_require_str(obj, "actor", rw)),
            )
        )
    return tuple(out)


def _parse_message(value: Any, idx: int, fix: Callable[[str], str]) -> Message:
    where = f"messages[{idx}]"
    obj = _require_dict(value, where)

    return Message(
        sender_name=fix(_require_str(obj, "sender_name", where)),
        timestamp_ms=_parse_timestamp_ms(obj.get("timestamp_ms"), where),
        content=fix(_optional_str(obj, "content", where, "")),
        sticker=_parse_sticker(obj.get("sticker"), where),
        reactions=_parse_reactions(obj.get("reactions"), where, fix),
        type=_optional_str(obj, "type", where, "Generic"),
    )


def parse_corpus(raw: Union[bytes, str], *, fix_encoding: Optional[bool] = None) -> Tuple[Corpus, List[str]]:
    """把导出内容解码为 Corpus。

    返回 (corpus, warnings)。结构错误抛出 SchemaInvalid。
    """

    if fix_encoding is None:
        fix_encoding = Config.FIX_MOJIBAKE
    fix = fix_mojibake if fix_encoding else _identity

    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise SchemaInvalid(f"JSON 解析失败: {e}") from e

    root = _require_dict(data, "root")
    if "participants" not in root:
        raise SchemaInvalid("缺少 participants 字段")
    if "messages" not in root:
        raise SchemaInvalid("缺少 messages 字段")

    warnings: List[str] = []

    participants: List[Participant] = []
    seen_names = set()
    for i, it in enumerate(_require_list(root["participants"], "participants")):
        where = f"participants[{i}]"
        name = fix(_require_str(_require_dict(it, where), "name", where))
        if name in seen_names:
            warnings.append(f"参与者重复出现: {name}")
            continue
        seen_names.add(name)
        participants.append(Participant(name=name))

    messages = [
        _parse_message(it, idx, fix)
        for idx, it in enumerate(_require_list(root["messages"], "messages"))
    ]

    if not participants:
        warnings.append("participants 为空，所有消息都会被视为未知发送者")

    logger.debug(f"Decoded {len(participants)} participants, {len(messages)} messages")
    return Corpus(participants=participants, messages=messages), warnings
