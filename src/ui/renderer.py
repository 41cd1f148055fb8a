"""终端渲染器 - 在终端中展示牌型判定与比较结果"""

from typing import Iterable

from src.engine.card import Card, Suit
from src.engine.hand_type import Kind, KIND_NAME
from src.engine.hand_detector import Hand


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型颜色：越强越醒目
KIND_COLOR = {
    Kind.HIGH_CARD: DIM,
    Kind.PAIR: "",
    Kind.TWO_PAIR: "",
    Kind.THREE_OF_A_KIND: CYAN,
    Kind.STRAIGHT: CYAN,
    Kind.FLUSH: GREEN,
    Kind.FULL_HOUSE: GREEN,
    Kind.FOUR_OF_A_KIND: YELLOW,
    Kind.STRAIGHT_FLUSH: RED,
}

COMPARE_TEXT = {1: "更强", 0: "同牌型（视为相等）", -1: "更弱"}


class TerminalRenderer:
    """终端渲染器"""

    def __init__(self, color: bool = True):
        self.color = color

    def _paint(self, text: str, *styles: str) -> str:
        if not self.color or not any(styles):
            return text
        return f"{''.join(styles)}{text}{RESET}"

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_cards(self, cards: Iterable[Card]) -> str:
        """将牌列表格式化为字符串（红桃/方块标红）"""
        parts = []
        for c in cards:
            if c.suit in (Suit.HEART, Suit.DIAMOND):
                parts.append(self._paint(c.display, RED))
            else:
                parts.append(c.display)
        return " ".join(parts)

    def format_kind(self, kind: Kind) -> str:
        return self._paint(f"{KIND_NAME[kind]} ({kind.name})", KIND_COLOR[kind], BOLD)

    @staticmethod
    def format_predicates(hand: Hand) -> str:
        """各检测项的结果，形如 pair=True three=False ..."""
        checks = [
            ("pair", hand.has_n_kind(2)),
            ("three", hand.has_n_kind(3)),
            ("four", hand.has_n_kind(4)),
            ("two_pair", hand.is_two_pair()),
            ("straight", hand.is_straight()),
            ("flush", hand.is_flush()),
        ]
        return " ".join(f"{name}={value}" for name, value in checks)

    # ============================================================
    #  输出
    # ============================================================

    def print_header(self, title: str) -> None:
        """打印带框的标题"""
        line = self._paint("═" * 60, YELLOW, BOLD)
        print(f"\n{line}")
        print(self._paint(f"  {title}", YELLOW, BOLD))
        print(f"{line}\n")

    def show_hand(self, index: int, hand: Hand) -> None:
        """展示一手牌的判定结果"""
        print(f"  第{index}手: {self.format_cards(hand.cards)}  [{hand}]")
        print(f"    牌型: {self.format_kind(hand.kind())}")
        print(f"    {self._paint(self.format_predicates(hand), DIM)}")

    def show_compare(self, left: Hand, right: Hand, result: int) -> None:
        """展示两手牌的比较结果"""
        print(f"  {left} ({KIND_NAME[left.kind()]}) vs {right} ({KIND_NAME[right.kind()]})")
        print(f"    compare = {result:+d} → 前者{COMPARE_TEXT[result]}")

    def show_error(self, text: str, error: Exception) -> None:
        print(f"  {self._paint('解析失败', RED, BOLD)}: {text!r} → {error}")
