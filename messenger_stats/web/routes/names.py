import logging

from flask import Blueprint, jsonify, request

from messenger_stats.web.services.analysis_loader import error_response, load_ranked_analysis


logger = logging.getLogger(__name__)
bp = Blueprint('names', __name__)


@bp.route('/api/names', methods=['GET'])
def get_names():
    """获取参与者列表（第一个为全员伪参与者，通常是 everyone）"""
    try:
        filename = request.args.get('file')
        if not filename:
            return jsonify({'success': False, 'error': '未指定文件'}), 400

        ranked, _warnings = load_ranked_analysis(filename)
        names = ranked.participant_names()

        return jsonify({'success': True, 'names': names, 'everyone': ranked.everyone_key, 'count': len(names)})
    except Exception as e:
        return error_response(e)
