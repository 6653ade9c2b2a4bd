import logging
from datetime import datetime

from flask import Blueprint, jsonify

from messenger_stats.web.services.analysis_loader import ALLOWED_SUFFIXES, texts_dir


logger = logging.getLogger(__name__)
bp = Blueprint('files', __name__)


@bp.route('/api/files', methods=['GET'])
def get_files():
    """获取可分析的导出文件列表（从 TEXTS_DIR 目录）"""
    try:
        base = texts_dir()
        base.mkdir(parents=True, exist_ok=True)
        candidates = []
        for ext in ALLOWED_SUFFIXES:
            candidates.extend(base.glob(f'*{ext}'))

        files = []
        for f in candidates:
            try:
                st = f.stat()
            except OSError as e:
                logger.warning(f"Skipping {f}: {e}")
                continue
            files.append({
                'name': f.name,
                'size': st.st_size,
                'modified': datetime.fromtimestamp(st.st_mtime).isoformat(),
            })

        files.sort(key=lambda x: x.get('modified', ''), reverse=True)

        return jsonify({'success': True, 'files': files, 'count': len(files)})
    except Exception as e:
        logger.error(f"Error getting files: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500
