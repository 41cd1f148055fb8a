"""运行配置 - 从环境变量读取，命令行参数可覆盖"""

import os

# HTTP 服务监听地址（原样保留字符串，由命令行解析时校验）
HOST = os.getenv("POKER_HOST", "127.0.0.1")
PORT = os.getenv("POKER_PORT", "8000")

# 日志级别（DEBUG 时输出每次牌型判定）
LOG_LEVEL = os.getenv("POKER_LOG_LEVEL", "WARNING").upper()
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# 演示用手牌
SAMPLE_HANDS = [
    "TD TC TH 7C 7D",
    "6C 6D TH TS AD",
    "5C 2D 3H AS 4D",
    "TD 2D 3D AD 4D",
    "4C 4D 4H 4S 4C",
]
