import logging

from flask import Blueprint, jsonify, request

from messenger_stats.config import Config
from messenger_stats.web.services.analysis_loader import (
    error_response,
    load_ranked_analysis,
    parse_category_query,
    resolve_name_query,
)


logger = logging.getLogger(__name__)
bp = Blueprint('top', __name__)


@bp.route('/api/top', methods=['GET'])
def get_top_entry():
    """某一类统计的第一名；贴纸额外返回资源地址"""
    try:
        filename = request.args.get('file')
        if not filename:
            return jsonify({'success': False, 'error': '未指定文件'}), 400

        category = parse_category_query(request.args.get('type'), default='stickers')

        ranked, _warnings = load_ranked_analysis(filename)
        name = resolve_name_query(request.args.get('name'), ranked)
        entry = ranked.top_entry(name, category)

        payload = {'success': True, 'name': name, 'type': category, 'top': None}
        if entry is not None:
            payload['top'] = {'key': entry.key, 'count': entry.count}
            if category == 'stickers':
                payload['top']['url'] = Config.STICKER_URL_TEMPLATE.format(sticker_id=entry.key)

        return jsonify(payload)
    except Exception as e:
        return error_response(e)
