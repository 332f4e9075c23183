"""
API 配置文件
管理API服务器的参数配置，从环境变量读取
"""

import os

# ==================== 服务器配置 ====================
# API服务器主机地址 - 从环境变量读取，默认localhost
API_HOST = os.getenv("SMART_TRANSLATOR_API_HOST", "127.0.0.1")

# API服务器端口 - 从环境变量读取，默认8000
API_PORT = int(os.getenv("SMART_TRANSLATOR_API_PORT", "8000"))

# API服务器URL
API_BASE_URL = f"http://{API_HOST}:{API_PORT}"

# ==================== CORS配置 ====================
# 允许的源地址 - 从环境变量读取，逗号分隔
CORS_ORIGINS = os.getenv("SMART_TRANSLATOR_CORS_ORIGINS", "*").split(",")

# ==================== 请求配置 ====================
# 单次请求允许的最大原始输入长度（HTML会先提取正文再截断）
MAX_REQUEST_LENGTH = int(os.getenv("SMART_TRANSLATOR_MAX_REQUEST_LENGTH", "200000"))

# ==================== 日志配置 ====================
# 日志级别
LOG_LEVEL = os.getenv("SMART_TRANSLATOR_API_LOG_LEVEL", "INFO")
