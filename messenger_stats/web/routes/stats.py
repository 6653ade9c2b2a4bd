import logging

from flask import Blueprint, jsonify, request

from messenger_stats.web.services.analysis_loader import (
    error_response,
    load_ranked_analysis,
    parse_category_query,
    parse_count_query,
    resolve_name_query,
)


logger = logging.getLogger(__name__)
bp = Blueprint('stats', __name__)


def graph_title(name: str, category: str, count: int) -> str:
    return f"Top {count} {category} for {name}"


@bp.route('/api/stats', methods=['GET'])
def get_stats():
    """单个参与者（或 everyone）某一类统计的前 N 名"""
    try:
        filename = request.args.get('file')
        if not filename:
            return jsonify({'success': False, 'error': '未指定文件'}), 400

        name = request.args.get('name')
        category = parse_category_query(request.args.get('type'))
        count = parse_count_query(request.args.get('count'))

        ranked, _warnings = load_ranked_analysis(filename)
        name = resolve_name_query(name, ranked)
        logger.info(f"Ranking {category} for {name} from {filename}")

        counter_set = ranked.counter_set(name)
        entries = ranked.table(name, category, limit=count)

        return jsonify({
            'success': True,
            'name': name,
            'type': category,
            'title': graph_title(name, category, count),
            'message_count': counter_set.message_count,
            'values': [{'label': k, 'value': c} for k, c in entries],
        })
    except Exception as e:
        return error_response(e)


@bp.route('/api/summary', methods=['GET'])
def get_summary():
    """完整排行结果（全局 + 每个参与者）"""
    try:
        filename = request.args.get('file')
        if not filename:
            return jsonify({'success': False, 'error': '未指定文件'}), 400

        limit = request.args.get('count')
        limit = parse_count_query(limit) if limit else None

        ranked, load_warnings = load_ranked_analysis(filename)
        data = ranked.to_dict(limit)
        data['load_warnings'] = list(load_warnings)

        return jsonify({'success': True, 'data': data})
    except Exception as e:
        return error_response(e)
