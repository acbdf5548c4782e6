import argparse

from othello.engine.game_engine import GameEngine
from othello.cli.play import TerminalGame
from othello.protocol.constants import PASS_DELAY_SECONDS


def run_ui(args: argparse.Namespace) -> None:
    import flet as ft
    from othello.ui.app import OthelloApp
    from othello.engine.local_engine import LocalEngine

    print(f"Starting UI with board size {args.size}...")
    engine = LocalEngine(board_size=args.size)
    app = OthelloApp(engine, board_size=args.size, pass_delay=args.pass_delay)
    ft.app(target=app.main)


def run_play(args: argparse.Namespace) -> None:
    game = TerminalGame(GameEngine(board_size=args.size), pass_delay=args.pass_delay)
    status = game.run()
    if not status.is_terminal:
        print("Game abandoned.")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--size", type=int, default=8, help="Board size (default: 8)")
    parser.add_argument(
        "--pass-delay",
        type=float,
        default=PASS_DELAY_SECONDS,
        help="Seconds a pass notice stays up before play continues (default: 1.0)",
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Othello Game CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    ui_parser = subparsers.add_parser("ui", help="Start the GUI")
    _add_common_arguments(ui_parser)
    ui_parser.set_defaults(func=run_ui)

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_common_arguments(play_parser)
    play_parser.set_defaults(func=run_play)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        return
    if args.size < 4 or args.size % 2 or args.size > 26:
        parser.error("--size must be an even number between 4 and 26")
    if args.pass_delay < 0:
        parser.error("--pass-delay must not be negative")
    args.func(args)

if __name__ == "__main__":
    main()
