"""德州扑克牌型判定 - 主入口"""

import sys
import logging
import argparse
from typing import List, Optional

from src import config
from src.engine.card import ParseError
from src.engine.hand_detector import Hand
from src.ui.renderer import TerminalRenderer


def run_demo(texts: List[str], renderer: TerminalRenderer) -> int:
    """逐手判定并展示；返回退出码（有非法输入时为2）"""
    renderer.print_header("🃏 牌型判定")

    hands: List[Hand] = []
    status = 0
    for i, text in enumerate(texts, start=1):
        try:
            hand = Hand.from_string(text)
        except ParseError as e:
            renderer.show_error(text, e)
            status = 2
            continue
        renderer.show_hand(i, hand)
        hands.append(hand)

    # 第4手（同花）对比第3手（顺子），自定义输入时比较最后两手
    if len(hands) >= 2:
        renderer.print_header("⚖️ 牌型比较")
        if texts == config.SAMPLE_HANDS:
            left, right = hands[3], hands[2]
        else:
            left, right = hands[-1], hands[-2]
        renderer.show_compare(left, right, left.compare(right))

    return status


def serve(host: str, port: int) -> None:
    """启动 HTTP 服务"""
    import uvicorn

    from src.web.server import app

    print(f"Starting server at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="德州扑克五张牌牌型判定")
    parser.add_argument("hands", nargs="*", help='手牌，如 "5C TD AH QS 2D"（默认使用示例手牌）')
    parser.add_argument("--no-color", action="store_true", help="关闭终端颜色")
    parser.add_argument("--serve", action="store_true", help="启动 HTTP 服务")
    parser.add_argument("--host", default=config.HOST, help=f"监听地址 (默认{config.HOST})")
    # 字符串默认值同样经过 type 转换，环境变量取值非法时给出命令行错误
    parser.add_argument("--port", type=int, default=config.PORT, help=f"监听端口 (默认{config.PORT})")
    parser.add_argument(
        "--log-level", type=str.upper, choices=config.LOG_LEVELS,
        default=config.LOG_LEVEL, help=f"日志级别 (默认{config.LOG_LEVEL})",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """解析命令行；argparse 不校验默认值的 choices，这里补上"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in config.LOG_LEVELS:
        parser.error(f"日志级别非法: {args.log_level!r}（可选 {', '.join(config.LOG_LEVELS)}）")
    return args


def main(argv: Optional[List[str]] = None):
    """命令行入口"""
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        serve(args.host, args.port)
        return

    renderer = TerminalRenderer(color=not args.no_color and sys.stdout.isatty())
    sys.exit(run_demo(args.hands or config.SAMPLE_HANDS, renderer))


if __name__ == "__main__":
    main()
