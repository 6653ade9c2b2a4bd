"""
配置管理模块 - 读取和验证环境变量
"""

import os
from dotenv import load_dotenv

# 加载 .env 文件
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'y', 'on')


class Config:
    """应用配置类"""

    # Flask配置
    DEBUG = _env_bool('FLASK_DEBUG', 'False')
    HOST = os.getenv('FLASK_HOST', '127.0.0.1')
    PORT = int(os.getenv('FLASK_PORT', 8080))

    # 日志级别（入口 basicConfig 使用）
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').strip().upper()

    # 导出文件目录（Web 层只允许读取该目录下的 .json）
    TEXTS_DIR = os.getenv('TEXTS_DIR', 'texts')

    # 数据处理配置
    MAX_FILE_SIZE_MB = int(os.getenv('MAX_FILE_SIZE_MB', 500))
    DEFAULT_TOP_COUNT = int(os.getenv('DEFAULT_TOP_COUNT', 10))

    # 导出器把 UTF-8 文本按 latin-1 转义写入 JSON，读入后需要还原
    FIX_MOJIBAKE = _env_bool('FIX_MOJIBAKE', 'True')

    # 默认贴纸（点赞按钮）的 id：界面占位，不计入贴纸统计
    PLACEHOLDER_STICKER_ID = os.getenv('PLACEHOLDER_STICKER_ID', '369239263222822').strip()

    # 贴纸资源跳转地址
    STICKER_URL_TEMPLATE = os.getenv(
        'STICKER_URL_TEMPLATE',
        'https://messenger.com/stickers/asset/?sticker_id={sticker_id}',
    )

    @classmethod
    def validate_config(cls):
        """验证配置的有效性"""
        issues = []

        if cls.PORT <= 0 or cls.PORT > 65535:
            issues.append("❌ FLASK_PORT 必须在 1-65535 之间")

        if cls.MAX_FILE_SIZE_MB < 1:
            issues.append("❌ MAX_FILE_SIZE_MB 配置无效")

        if cls.DEFAULT_TOP_COUNT < 1:
            issues.append("❌ DEFAULT_TOP_COUNT 必须大于 0")

        if not cls.PLACEHOLDER_STICKER_ID:
            issues.append("⚠️  PLACEHOLDER_STICKER_ID 为空，默认点赞贴纸将被计入统计")

        if '{sticker_id}' not in (cls.STICKER_URL_TEMPLATE or ''):
            issues.append("❌ STICKER_URL_TEMPLATE 缺少 {sticker_id} 占位符")

        if cls.LOG_LEVEL not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            issues.append(f"⚠️  LOG_LEVEL={cls.LOG_LEVEL} 无法识别，将使用 INFO")

        return issues

    @classmethod
    def log_level(cls) -> str:
        if cls.LOG_LEVEL in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            return cls.LOG_LEVEL
        return 'INFO'

    @classmethod
    def print_config_status(cls):
        """打印配置状态"""
        print("\n" + "="*50)
        print("📋 应用配置状态")
        print("="*50)
        print(f"Flask: {cls.HOST}:{cls.PORT} (DEBUG={cls.DEBUG})")
        print(f"导出目录: {cls.TEXTS_DIR}")
        print(f"最大文件: {cls.MAX_FILE_SIZE_MB}MB")
        print(f"默认排行条数: {cls.DEFAULT_TOP_COUNT}")
        print(f"编码修复: {cls.FIX_MOJIBAKE}")
        print(f"占位贴纸: {cls.PLACEHOLDER_STICKER_ID}")

        # 验证并显示问题
        issues = cls.validate_config()
        if issues:
            print("\n⚠️  配置问题:")
            for issue in issues:
                print(f"   {issue}")
        else:
            print("\n✅ 配置全部有效")

        print("="*50 + "\n")


if __name__ == '__main__':
    Config.print_config_status()
