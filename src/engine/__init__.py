# 牌型引擎模块
from .card import Card, Rank, Suit, ParseError, RANK_CHARS, SUIT_SYMBOLS
from .hand_type import Kind, KIND_NAME
from .hand_detector import Hand, classify, compare_hands
