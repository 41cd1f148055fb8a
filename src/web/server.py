"""HTTP 服务 - 通过 REST 接口提供牌型判定与比较"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.engine.card import ParseError
from src.engine.hand_type import Kind, KIND_NAME
from src.engine.hand_detector import Hand

logger = logging.getLogger(__name__)


# ============================================================
#  请求体
# ============================================================

class ClassifyRequest(BaseModel):
    hands: List[str]


class CompareRequest(BaseModel):
    left: str
    right: str


# ============================================================
#  序列化工具
# ============================================================

def kind_to_dict(kind: Kind) -> dict:
    return {"kind": kind.name, "kind_name": KIND_NAME[kind], "rank": int(kind)}


def hand_to_dict(hand: Hand) -> dict:
    """将 Hand 及其判定结果序列化为 dict"""
    result = {
        "cards": [str(c) for c in hand.cards],
        "display": [c.display for c in hand.cards],
        "predicates": {
            "pair": hand.has_n_kind(2),
            "three_of_a_kind": hand.has_n_kind(3),
            "four_of_a_kind": hand.has_n_kind(4),
            "two_pair": hand.is_two_pair(),
            "straight": hand.is_straight(),
            "flush": hand.is_flush(),
        },
    }
    result.update(kind_to_dict(hand.kind()))
    return result


# ============================================================
#  FastAPI 应用
# ============================================================

app = FastAPI(title="Poker Hand Classifier")


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    logger.warning("拒绝非法输入 %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/api/kinds")
def api_kinds():
    """全部牌型，按强度从低到高"""
    return [kind_to_dict(k) for k in Kind]


@app.get("/api/hand")
def api_hand(cards: str):
    """判定一手牌，如 /api/hand?cards=5C TD AH QS 2D"""
    hand = Hand.from_string(cards)
    logger.info("判定: %s", hand)
    return hand_to_dict(hand)


@app.post("/api/classify")
def api_classify(req: ClassifyRequest):
    """批量判定，任一手非法则整体返回 400"""
    hands = [Hand.from_string(s) for s in req.hands]
    logger.info("批量判定 %d 手", len(hands))
    return [hand_to_dict(h) for h in hands]


@app.post("/api/compare")
def api_compare(req: CompareRequest):
    """按牌型比较两手牌"""
    left = Hand.from_string(req.left)
    right = Hand.from_string(req.right)
    result = left.compare(right)
    logger.info("比较: %s vs %s -> %d", left, right, result)
    return {
        "left": hand_to_dict(left),
        "right": hand_to_dict(right),
        "result": result,
    }
