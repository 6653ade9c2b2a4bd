"""命令行入口：分析一个 message.json 并打印排行，或以该文件所在目录启动 Web 服务。

用法：
    python main.py texts/message_1.json --top 10
    python main.py texts/message_1.json --name "Alice Smith"
    python main.py texts/message_1.json --serve
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from messenger_stats.aggregator import CATEGORIES, analyze_corpus
from messenger_stats.chat_import import ParseError, load_corpus
from messenger_stats.config import Config
from messenger_stats.ranker import rank_analysis


logger = logging.getLogger(__name__)


def print_message_ranking(ranked):
    print("Message count ranking:")
    rows = sorted(ranked.participants.items(), key=lambda kv: (-kv[1].message_count, kv[0]))
    for name, cs in rows:
        print(f"{name}: {cs.message_count} messages")
    print(f"{ranked.everyone_key}: {ranked.overall.message_count} messages")


def print_tables(ranked, name, top):
    for category in CATEGORIES:
        entries = ranked.table(name, category, limit=top)
        print("-"*25)
        print(f"Top {top} {category} for {name}:")
        if not entries:
            print("  (none)")
        for key, count in entries:
            print(f"  {key}: {count}")


def build_parser():
    parser = argparse.ArgumentParser(description="Messenger 聊天导出统计")
    parser.add_argument('file', help="message.json 路径")
    parser.add_argument('--top', type=int, default=Config.DEFAULT_TOP_COUNT, help="每类显示前 N 名")
    parser.add_argument('--name', default=None, help="参与者名字，默认全员（everyone）")
    parser.add_argument('--serve', action='store_true', help="以文件所在目录为 TEXTS_DIR 启动 Web 服务")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=Config.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        result = load_corpus(args.file)
    except ParseError as e:
        print(f"分析失败（{e.stage} 阶段）: {e}", file=sys.stderr)
        return 1

    for w in result.warnings:
        logger.warning(w)

    if args.serve:
        Config.TEXTS_DIR = str(Path(args.file).resolve().parent)
        from app import app
        Config.print_config_status()
        logger.info(f"Serving {Path(args.file).name} on {Config.HOST}:{Config.PORT}")
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, use_reloader=False)
        return 0

    ranked = rank_analysis(analyze_corpus(result.corpus))

    name = ranked.everyone_key if args.name is None else args.name
    if name not in ranked.participant_names():
        print(f"未知参与者: {name}", file=sys.stderr)
        print("可选: " + ", ".join(ranked.participant_names()), file=sys.stderr)
        return 2

    print_message_ranking(ranked)
    print_tables(ranked, name, max(1, args.top))
    return 0


if __name__ == "__main__":
    sys.exit(main())
