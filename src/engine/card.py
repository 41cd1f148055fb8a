"""牌的定义 - 德州扑克52张牌的数据模型与文本解析"""

from enum import IntEnum, Enum
from dataclasses import dataclass


class ParseError(ValueError):
    """牌面文本无法解析（点数/花色字符非法、长度错误、张数错误）"""

    def __init__(self, message: str, token: object = None):
        super().__init__(message)
        self.token = token


class Rank(IntEnum):
    """点数枚举（数值即序号：TWO=0 ... ACE=12，用于顺子检测）"""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(str, Enum):
    """花色枚举（无大小之分）"""
    CLUB = "C"
    DIAMOND = "D"
    HEART = "H"
    SPADE = "S"


# 点数字符映射
RANK_CHARS = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.EIGHT: "8", Rank.NINE: "9", Rank.TEN: "T",
    Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
    Rank.ACE: "A",
}

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_SUIT = {s.value: s for s in Suit}

# 终端展示用花色符号
SUIT_SYMBOLS = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}


@dataclass(frozen=True)
class Card:
    """一张扑克牌"""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, token: str) -> "Card":
        """
        从两字符文本解析一张牌，如 "TD"、"5C"。
        第一个字符为点数，第二个为花色；大小写不做转换。
        """
        if not isinstance(token, str) or len(token) != 2:
            raise ParseError(f"非法牌面: {token!r}（需要两个字符）", token)
        rank = CHAR_TO_RANK.get(token[0])
        suit = CHAR_TO_SUIT.get(token[1])
        if rank is None:
            raise ParseError(f"非法牌面: {token!r}（未知点数 {token[0]!r}）", token)
        if suit is None:
            raise ParseError(f"非法牌面: {token!r}（未知花色 {token[1]!r}）", token)
        return cls(rank=rank, suit=suit)

    @property
    def display(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_CHARS[self.rank]}"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self})"
