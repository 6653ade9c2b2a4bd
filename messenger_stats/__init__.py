"""Messenger 聊天导出统计：词频 / @提及 / 表情回应 / 贴纸。"""

from .aggregator import Aggregator, AnalysisResult, CounterSet, analyze_corpus
from .ranker import FrequencyEntry, RankedCounterSet, RankedResult, rank_analysis, rank_table

__version__ = '1.0.0'

__all__ = [
    "Aggregator",
    "AnalysisResult",
    "CounterSet",
    "analyze_corpus",
    "FrequencyEntry",
    "RankedCounterSet",
    "RankedResult",
    "rank_analysis",
    "rank_table",
]
