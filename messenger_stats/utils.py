"""
通用工具模块 - 各分析模块共用的常量与正则

包含:
- 导出器占位文本
- 分词正则
- 贴纸 id 提取
"""

import re
from typing import Optional


# ==================== 常量定义 ====================

# 导出器为非文本分享生成的占位句（出现在 content 中）
PHOTO_MARKER = 'sent a photo.'
ATTACHMENT_MARKER = 'sent an attachment.'

# 贴纸地址形如 .../39178562_1505197616293642_5411344281094848512_n_369239263222822.png
STICKER_ID_DELIMITER = '_n_'

# 全员伪参与者（代表全局统计）
EVERYONE = 'everyone'


# ==================== 预编译正则表达式 ====================

# 分隔符：字母/数字/@/' 以外字符的最长连续段（下划线也算分隔符）
TOKEN_SPLIT_PATTERN = re.compile(r"(?:[^\w@']|_)+")


# ==================== 贴纸工具 ====================

def extract_sticker_id(uri: str) -> Optional[str]:
    """
    从贴纸资源地址中提取贴纸 id

    Args:
        uri: 贴纸地址

    Returns:
        第一个 "_n_" 之后、下一个 "." 之前的片段；地址不含分隔符或片段为空时返回 None
    """
    if not uri or STICKER_ID_DELIMITER not in uri:
        return None

    tail = uri.split(STICKER_ID_DELIMITER, 1)[1]
    sticker_id = tail.split('.', 1)[0]
    return sticker_id or None
