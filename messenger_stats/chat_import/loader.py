"""统一加载入口。

这里是 app.py / main.py 与分析器应当使用的唯一入口：
- 读取文件（读取失败 -> SourceUnavailable）
- 解码为 Corpus（结构错误 -> SchemaInvalid）
- 计算时间范围
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core import compute_time_range
from .errors import SchemaInvalid, SourceUnavailable
from .importers import parse_corpus
from .schema import LoadResult
from ..config import Config


logger = logging.getLogger(__name__)


def read_export_bytes(file_path: Union[str, Path], *, max_size_mb: Optional[int] = None) -> bytes:
    path = Path(file_path)
    limit_mb = Config.MAX_FILE_SIZE_MB if max_size_mb is None else max_size_mb

    try:
        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > limit_mb:
            raise SourceUnavailable(f"文件过大 ({size_mb:.2f}MB > {limit_mb}MB)", source=str(path))
        return path.read_bytes()
    except OSError as e:
        raise SourceUnavailable(f"读取失败: {e.strerror or e}", source=str(path)) from e


def load_corpus(file_path: Union[str, Path], options: Optional[Dict[str, Any]] = None) -> LoadResult:
    """options:
    - fixEncoding: 覆盖 Config.FIX_MOJIBAKE
    - maxSizeMb: 覆盖 Config.MAX_FILE_SIZE_MB
    """

    options = options or {}
    raw = read_export_bytes(file_path, max_size_mb=options.get('maxSizeMb'))

    try:
        corpus, warnings = parse_corpus(raw, fix_encoding=options.get('fixEncoding'))
    except SchemaInvalid as e:
        e.source = str(file_path)
        raise

    compute_time_range(corpus)

    logger.info(
        f"Loaded {file_path}: {len(corpus.participants)} participants, {len(corpus.messages)} messages"
    )
    return LoadResult(corpus=corpus, warnings=warnings)
