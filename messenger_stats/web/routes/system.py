import logging

from flask import Blueprint, jsonify

from messenger_stats import __version__
from messenger_stats.config import Config


logger = logging.getLogger(__name__)
bp = Blueprint('system', __name__)


@bp.route('/api/system/info', methods=['GET'])
def system_info():
    """获取系统信息"""
    try:
        return jsonify({
            'success': True,
            'app_name': 'Messenger 聊天统计',
            'version': __version__,
            'flask_host': Config.HOST,
            'flask_port': Config.PORT,
            'texts_dir': str(Config.TEXTS_DIR),
            'max_file_size_mb': Config.MAX_FILE_SIZE_MB,
            'default_top_count': Config.DEFAULT_TOP_COUNT,
        })
    except Exception as e:
        logger.error(f"Error getting system info: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500
