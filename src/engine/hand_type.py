"""牌型定义 - 德州扑克9种牌型，按强度从低到高声明"""

from enum import IntEnum


class Kind(IntEnum):
    """牌型枚举（声明顺序即强弱顺序）"""
    HIGH_CARD = 0        # 高牌
    PAIR = 1             # 一对
    TWO_PAIR = 2         # 两对
    THREE_OF_A_KIND = 3  # 三条
    STRAIGHT = 4         # 顺子
    FLUSH = 5            # 同花
    FULL_HOUSE = 6       # 葫芦
    FOUR_OF_A_KIND = 7   # 四条
    STRAIGHT_FLUSH = 8   # 同花顺


# 牌型中文名
KIND_NAME = {
    Kind.HIGH_CARD: "高牌",
    Kind.PAIR: "一对",
    Kind.TWO_PAIR: "两对",
    Kind.THREE_OF_A_KIND: "三条",
    Kind.STRAIGHT: "顺子",
    Kind.FLUSH: "同花",
    Kind.FULL_HOUSE: "葫芦",
    Kind.FOUR_OF_A_KIND: "四条",
    Kind.STRAIGHT_FLUSH: "同花顺",
}
