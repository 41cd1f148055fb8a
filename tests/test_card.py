"""牌面解析单元测试"""

import pytest
from src.engine.card import Card, Rank, Suit, ParseError, RANK_CHARS


class TestParse:
    """Card.parse 合法输入"""

    @pytest.mark.parametrize("rank", list(Rank))
    @pytest.mark.parametrize("suit", list(Suit))
    def test_every_valid_token(self, rank, suit):
        token = RANK_CHARS[rank] + suit.value
        card = Card.parse(token)
        assert card.rank == rank
        assert card.suit == suit
        assert str(card) == token

    def test_ten_and_faces(self):
        assert Card.parse("TD").rank == Rank.TEN
        assert Card.parse("JC").rank == Rank.JACK
        assert Card.parse("QH").rank == Rank.QUEEN
        assert Card.parse("KS").rank == Rank.KING
        assert Card.parse("AS").rank == Rank.ACE

    def test_rank_ordinals(self):
        assert int(Rank.TWO) == 0
        assert int(Rank.ACE) == 12
        assert len(Rank) == 13

    def test_display(self):
        assert Card.parse("AH").display == "♥A"

    def test_equal_and_hashable(self):
        assert Card.parse("7C") == Card(Rank.SEVEN, Suit.CLUB)
        assert len({Card.parse("7C"), Card.parse("7C")}) == 1


class TestParseErrors:
    """Card.parse 非法输入"""

    @pytest.mark.parametrize("token", ["", "A", "10H", "ADX", " A", "AD "])
    def test_wrong_length(self, token):
        with pytest.raises(ParseError) as exc:
            Card.parse(token)
        assert exc.value.token == token

    @pytest.mark.parametrize("token", ["1C", "XD", "0H", "BS"])
    def test_unknown_rank(self, token):
        with pytest.raises(ParseError, match="点数"):
            Card.parse(token)

    @pytest.mark.parametrize("token", ["AX", "2c", "TZ", "K?"])
    def test_unknown_suit(self, token):
        with pytest.raises(ParseError, match="花色"):
            Card.parse(token)

    def test_lowercase_not_normalised(self):
        with pytest.raises(ParseError):
            Card.parse("td")

    def test_not_a_string(self):
        with pytest.raises(ParseError):
            Card.parse(None)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Card.parse("ZZ")


class TestOrdering:
    """牌本身不定义大小，点数比较走 Rank"""

    def test_cards_not_orderable(self):
        with pytest.raises(TypeError):
            Card.parse("2C") < Card.parse("3C")

    def test_rank_comparison(self):
        assert Card.parse("2C").rank < Card.parse("3C").rank
