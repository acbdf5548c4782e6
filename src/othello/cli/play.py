from __future__ import annotations

import time
from typing import Callable, List

from othello.engine.board import Board
from othello.engine.game_engine import DRAW, GameEngine, GameStatus, TurnStatus
from othello.protocol.constants import PASS_DELAY_SECONDS

SYMBOLS = {Board.BLACK: "●", Board.WHITE: "○", Board.EMPTY: "."}


def render_board(engine: GameEngine, highlight: bool = True) -> str:
    """Text rendering of the board, marking the current player's moves with '*'."""
    size = engine.board_size
    moves = set(engine.valid_moves()) if highlight and not engine.status().is_pass else set()
    width = len(str(size))
    lines = [" " * (width + 1) + " ".join(chr(65 + c) for c in range(size))]
    for r, row in enumerate(engine.board_snapshot()):
        cells = []
        for c, piece in enumerate(row):
            cells.append("*" if (r, c) in moves else SYMBOLS[piece])
        lines.append(f"{r + 1:>{width}} " + " ".join(cells))
    black, white = engine.score()
    lines.append(f"Black {black} - {white} White")
    return "\n".join(lines)


def describe_status(status: TurnStatus) -> str:
    if status.status == GameStatus.TERMINAL:
        if status.winner == DRAW:
            return f"Game over! Draw ({status.black_count} vs {status.white_count})"
        if status.winner == Board.BLACK:
            return f"Game over! Black wins ({status.black_count} vs {status.white_count})"
        return f"Game over! White wins ({status.white_count} vs {status.black_count})"
    if status.status == GameStatus.PASS:
        return f"{status.skipped_player.capitalize()} passes. {status.next_player.capitalize()} to move."
    return f"{status.player.capitalize()} to move."


class TerminalGame:
    """Line-oriented presenter: reads coordinates like ``D3`` and prints the board.

    ``new`` restarts, also once the game is over, and ``quit`` leaves. A pass is shown, then confirmed after
    ``pass_delay`` seconds.
    """

    def __init__(
        self,
        engine: GameEngine | None = None,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        pass_delay: float = PASS_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.engine = engine or GameEngine()
        self.read_line = read_line
        self.write = write
        self.pass_delay = pass_delay
        self.sleep = sleep
        self.transcript: List[TurnStatus] = []

    def run(self) -> TurnStatus:
        status = self.engine.status()
        self._show(status)
        status = self._settle(status)

        while True:
            prompt = "Game over> " if status.is_terminal else f"{self.engine.current_player.capitalize()}> "
            try:
                line = self.read_line(prompt).strip()
            except EOFError:
                break
            if not line:
                continue
            if line.lower() == "quit":
                break
            if line.lower() == "new":
                status = self.engine.new_game()
                self._show(status)
                continue
            if status.is_terminal:
                self.write("Game over. Type 'new' to play again or 'quit' to leave.")
                continue

            try:
                r, c = Board.str_to_coord(line)
            except ValueError:
                self.write(f"Invalid coordinate format: {line}")
                continue
            if not self.engine.apply_move(r, c):
                self.write(f"Illegal move {line}")
                continue

            status = self.engine.advance_turn()
            self._show(status)
            status = self._settle(status)
        return status

    def _settle(self, status: TurnStatus) -> TurnStatus:
        if status.is_pass:
            self.sleep(self.pass_delay)
            status = self.engine.confirm_pass()
            self._show(status)
        return status

    def _show(self, status: TurnStatus):
        self.transcript.append(status)
        self.write(render_board(self.engine))
        self.write(describe_status(status))
