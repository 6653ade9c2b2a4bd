"""
Flask Web应用 - Messenger 聊天记录统计
提供参与者列表、词频/@提及/表情回应/贴纸排行、第一名查询
"""

import logging

# 立即加载 .env 文件
from dotenv import load_dotenv
load_dotenv()

from flask import Flask, jsonify
from flask_cors import CORS
from messenger_stats.config import Config
from messenger_stats.web.routes import register_blueprints

# 配置日志
logging.basicConfig(
    level=Config.log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app():
    app = Flask(__name__)

    # CORS配置
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type"]
        }
    })

    # 应用配置
    app.config.from_object(Config)

    # ============ 错误处理 ============

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'success': False, 'error': '请求错误', 'message': str(error)}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'success': False, 'error': '资源不存在', 'message': str(error)}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {error}")
        return jsonify({'success': False, 'error': '服务器错误', 'message': '请稍后重试'}), 500

    @app.route('/favicon.ico')
    def favicon():
        return ('', 204)

    register_blueprints(app)
    return app


app = create_app()


# ============ 启动应用 ============

if __name__ == '__main__':
    # 打印配置状态
    Config.print_config_status()

    logger.info(f"Starting Flask app on {Config.HOST}:{Config.PORT}")

    # 启动应用
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG,
        use_reloader=False
    )
