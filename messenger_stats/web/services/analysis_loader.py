from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Tuple

from flask import jsonify

from messenger_stats.aggregator import CATEGORIES, analyze_corpus
from messenger_stats.chat_import import SchemaInvalid, load_corpus
from messenger_stats.config import Config
from messenger_stats.ranker import RankedResult, rank_analysis


logger = logging.getLogger(__name__)

# 允许的输入文件类型
ALLOWED_SUFFIXES = {'.json'}


_RANKED_CACHE: dict[str, dict[str, Any]] = {}


def texts_dir() -> Path:
    return Path(Config.TEXTS_DIR)


def safe_texts_file_path(filename: str) -> Path:
    """把用户输入的文件名映射到 TEXTS_DIR 下，仅允许 .json。"""
    if not filename or not isinstance(filename, str):
        raise ValueError('未指定文件名')

    base = texts_dir().resolve()
    candidate = (base / filename).resolve()

    if base not in candidate.parents and candidate != base:
        raise ValueError('非法文件路径')

    if candidate.suffix.lower() not in ALLOWED_SUFFIXES:
        raise ValueError('不支持的文件类型')

    return candidate


def parse_count_query(value: Optional[str], *, default: Optional[int] = None) -> int:
    if value is None or str(value).strip() == '':
        return Config.DEFAULT_TOP_COUNT if default is None else default
    try:
        count = int(str(value).strip())
    except ValueError:
        raise ValueError(f'count 不是整数: {value}') from None
    if count < 1:
        raise ValueError('count 必须大于 0')
    return count


def parse_category_query(value: Optional[str], *, default: Optional[str] = None) -> str:
    category = (value or default or '').strip().lower()
    if not category:
        raise ValueError('未指定统计类型')
    if category not in CATEGORIES:
        raise ValueError(f'不支持的统计类型: {category}（可选: {", ".join(CATEGORIES)}）')
    return category


def resolve_name_query(value: Optional[str], ranked: RankedResult) -> str:
    """空白或缺省时指向全员；否则原样作为参与者名字（不去除首尾空格）"""
    if value is None or value.strip() == '':
        return ranked.everyone_key
    return value


def load_ranked_analysis(filename: str) -> Tuple[RankedResult, list]:
    """从 TEXTS_DIR 加载导出并返回排行结果；按文件 mtime 缓存。"""
    filepath = safe_texts_file_path(filename)
    if not filepath.exists():
        raise FileNotFoundError('文件不存在')

    cache_key = str(filepath)
    file_mtime = filepath.stat().st_mtime
    cached = _RANKED_CACHE.get(cache_key)
    if cached and cached.get('mtime') == file_mtime:
        return cached['ranked'], cached['warnings']

    result = load_corpus(filepath)
    ranked = rank_analysis(analyze_corpus(result.corpus))

    _RANKED_CACHE[cache_key] = {
        'mtime': file_mtime,
        'ranked': ranked,
        'warnings': result.warnings,
    }
    return ranked, result.warnings


def clear_cache() -> None:
    _RANKED_CACHE.clear()


def error_response(e: Exception):
    """把加载/参数异常转换为 (json, status)。"""
    if isinstance(e, FileNotFoundError):
        return jsonify({'success': False, 'error': str(e)}), 404
    if isinstance(e, SchemaInvalid):
        return jsonify({'success': False, 'error': str(e), 'stage': e.stage}), 422
    if isinstance(e, (ValueError, KeyError)):
        msg = f'未知参与者: {e.args[0]}' if isinstance(e, KeyError) else str(e)
        return jsonify({'success': False, 'error': msg}), 400
    logger.error(f"Error in analysis request: {e}")
    return jsonify({'success': False, 'error': str(e)}), 500
