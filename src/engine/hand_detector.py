"""牌型检测器 - 识别五张牌的德州扑克牌型并按牌型比较大小"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Tuple

from .card import Card, Rank, Suit, ParseError
from .hand_type import Kind

logger = logging.getLogger(__name__)

HAND_SIZE = 5
_SUITS_PER_RANK = len(Suit)

# A-2-3-4-5 的点数序号（A 作最小）
_WHEEL = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


@dataclass(frozen=True)
class Hand:
    """一手五张牌（构造后不可变）"""
    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise ParseError(f"一手牌必须恰好 {HAND_SIZE} 张，实际 {len(cards)} 张", cards)
        object.__setattr__(self, "cards", cards)
        # 不校验整副牌的唯一性，重复牌照常参与检测
        if len(set(cards)) != len(cards):
            logger.warning("手牌含重复牌: %s", self)

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """
        从空格分隔的文本构造一手牌，如 "5C TD AH QS 2D"。
        张数不为5或任一牌面非法时抛出 ParseError。
        """
        if not isinstance(s, str):
            raise ParseError(f"非法手牌: {s!r}", s)
        tokens = s.split(" ")
        # 末尾多余空格产生的空串不计入张数，开头和中间的仍视为非法
        while len(tokens) > 1 and tokens[-1] == "":
            tokens.pop()
        if len(tokens) != HAND_SIZE:
            raise ParseError(
                f"非法手牌: {s!r}（需要 {HAND_SIZE} 张，实际 {len(tokens)} 张）", s
            )
        return cls(tuple(Card.parse(t) for t in tokens))

    @property
    def ranks(self) -> List[Rank]:
        return [c.rank for c in self.cards]

    @property
    def suits(self) -> List[Suit]:
        return [c.suit for c in self.cards]

    # ============================================================
    #  点数/花色计数
    # ============================================================

    def _rank_counts(self) -> Counter:
        """点数 → 张数；一个点数只有4种花色，重复牌导致的超出部分按4计"""
        counts = Counter(c.rank for c in self.cards)
        return Counter({r: min(n, _SUITS_PER_RANK) for r, n in counts.items()})

    def _suit_counts(self) -> Counter:
        return Counter(c.suit for c in self.cards)

    def has_n_kind(self, n: int) -> bool:
        """
        是否存在恰好 n 张同点数的牌。
        如 "TD TC TH 7C 7D" 对 n=2、n=3 为 True，对 n=1、n=4 为 False。
        """
        return any(count == n for count in self._rank_counts().values())

    def is_two_pair(self) -> bool:
        """恰好两个点数各出现两次"""
        pairs = [r for r, count in self._rank_counts().items() if count == 2]
        return len(pairs) == 2

    def is_straight(self) -> bool:
        """
        五张点数连续，或为 A-2-3-4-5（A 作最小）。
        从最大序号向下逐一检查是否比前一张大1，断开时仅 wheel 成立。
        """
        order = sorted(int(r) for r in self.ranks)
        i = len(order) - 1
        while i > 0:
            if order[i] == order[i - 1] + 1:
                i -= 1
            else:
                return order == _WHEEL
        return True

    def is_flush(self) -> bool:
        """五张同花色"""
        return any(count == HAND_SIZE for count in self._suit_counts().values())

    # ============================================================
    #  牌型判定
    # ============================================================

    def kind(self) -> Kind:
        """
        按固定优先级判定牌型，命中即返回。
        葫芦也满足三条，同花顺也满足同花/顺子，顺序不可调换。
        """
        if self.is_straight() and self.is_flush():
            result = Kind.STRAIGHT_FLUSH
        elif self.has_n_kind(4):
            result = Kind.FOUR_OF_A_KIND
        elif self.has_n_kind(3) and self.has_n_kind(2):
            result = Kind.FULL_HOUSE
        elif self.is_flush():
            result = Kind.FLUSH
        elif self.is_straight():
            result = Kind.STRAIGHT
        elif self.has_n_kind(3):
            result = Kind.THREE_OF_A_KIND
        elif self.is_two_pair():
            result = Kind.TWO_PAIR
        elif self.has_n_kind(2):
            result = Kind.PAIR
        else:
            result = Kind.HIGH_CARD
        logger.debug("牌型判定: %s -> %s", self, result.name)
        return result

    # ============================================================
    #  牌型比较
    # ============================================================

    def compare(self, other: "Hand") -> int:
        """
        仅按牌型比较：返回 -1 / 0 / 1。
        同牌型一律视为相等，不比较踢脚。
        """
        mine, theirs = self.kind(), other.kind()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self})"


def classify(text: str) -> Kind:
    """解析并判定牌型"""
    return Hand.from_string(text).kind()


def compare_hands(left: Hand, right: Hand) -> int:
    """比较两手牌的牌型：left 更强返回 1，更弱返回 -1，同牌型返回 0"""
    return left.compare(right)
