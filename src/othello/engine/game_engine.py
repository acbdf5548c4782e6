from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from othello.engine.board import Board, Coord

DRAW = "DRAW"


class GameStatus:
    IN_PROGRESS = "IN_PROGRESS"
    PASS = "PASS"
    TERMINAL = "TERMINAL"


@dataclass(frozen=True)
class TurnStatus:
    """Outcome of a turn transition, as reported to a presenter.

    IN_PROGRESS carries the player to move. PASS carries the skipped player
    and the player who moves after the pass is confirmed. TERMINAL carries the
    winner and the final counts.
    """

    status: str
    player: Optional[str] = None
    skipped_player: Optional[str] = None
    next_player: Optional[str] = None
    winner: Optional[str] = None
    black_count: int = 0
    white_count: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.status == GameStatus.TERMINAL

    @property
    def is_pass(self) -> bool:
        return self.status == GameStatus.PASS


class GameEngine:
    """Owns one game's board and turn state.

    A move is a two-step affair: ``apply_move`` places the disc and flips, then
    ``advance_turn`` decides who moves next. A presenter can render the placed
    disc in between. ``play`` does both at once.
    """

    def __init__(self, board_size: int = 8):
        self.board_size = board_size
        self.board = Board(size=board_size)
        self.current_player = Board.BLACK
        self._awaiting_advance = False
        self._pending_pass: TurnStatus | None = None
        self._terminal: TurnStatus | None = None
        self.new_game()

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Optional[str]]],
        current_player: str = Board.BLACK,
    ) -> "GameEngine":
        if current_player not in (Board.BLACK, Board.WHITE):
            raise ValueError(f"Unknown player {current_player!r}")
        board = Board.from_rows(rows)
        engine = cls(board_size=board.size)
        engine.board = board
        engine.current_player = current_player
        engine._classify_position()
        return engine

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def new_game(self) -> TurnStatus:
        self.board = Board(size=self.board_size)
        self.current_player = Board.BLACK
        return self._classify_position()

    def _classify_position(self) -> TurnStatus:
        """Reset the transition flags and classify the position for the current player."""
        self._awaiting_advance = False
        self._pending_pass = None
        self._terminal = None
        player = self.current_player
        opponent = Board.opponent(player)
        if self.board.has_valid_move(player):
            return self._in_progress(player)
        if self.board.has_valid_move(opponent):
            self._pending_pass = self._pass(skipped=player, next_player=opponent)
            return self._pending_pass
        self._terminal = self._final()
        return self._terminal

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def board_snapshot(self) -> Tuple[Tuple[Optional[str], ...], ...]:
        return self.board.snapshot()

    def flippable_pieces(self, r: int, c: int, player: str) -> List[Coord]:
        return self.board.flippable_pieces(r, c, player)

    def valid_moves(self, player: str | None = None) -> List[Coord]:
        return self.board.get_valid_moves(player or self.current_player)

    def score(self) -> Tuple[int, int]:
        scores = self.board.get_score()
        return scores[Board.BLACK], scores[Board.WHITE]

    def winner(self) -> str:
        black, white = self.score()
        if black > white:
            return Board.BLACK
        if white > black:
            return Board.WHITE
        return DRAW

    def status(self) -> TurnStatus:
        if self._terminal:
            return self._terminal
        if self._pending_pass:
            return self._pending_pass
        return self._in_progress(self.current_player)

    def is_over(self) -> bool:
        return self._terminal is not None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def apply_move(self, r: int, c: int) -> bool:
        """Place a disc for the current player. Returns False, with the board
        untouched, for any move that is not legal right now."""
        if self._terminal or self._pending_pass or self._awaiting_advance:
            return False
        if not self.board.place(r, c, self.current_player):
            return False
        self._awaiting_advance = True
        return True

    def advance_turn(self) -> TurnStatus:
        if not self._awaiting_advance:
            return self.status()
        self._awaiting_advance = False

        mover = self.current_player
        opponent = Board.opponent(mover)
        if self.board.has_valid_move(opponent):
            self.current_player = opponent
            return self._in_progress(opponent)
        if self.board.has_valid_move(mover):
            self._pending_pass = self._pass(skipped=opponent, next_player=mover)
            return self._pending_pass
        self._terminal = self._final()
        return self._terminal

    def confirm_pass(self) -> TurnStatus:
        if not self._pending_pass:
            return self.status()
        self.current_player = self._pending_pass.next_player
        self._pending_pass = None
        return self._in_progress(self.current_player)

    def play(self, r: int, c: int) -> TurnStatus | None:
        if not self.apply_move(r, c):
            return None
        return self.advance_turn()

    # ------------------------------------------------------------------
    # Status builders
    # ------------------------------------------------------------------
    def _in_progress(self, player: str) -> TurnStatus:
        black, white = self.score()
        return TurnStatus(GameStatus.IN_PROGRESS, player=player, black_count=black, white_count=white)

    def _pass(self, skipped: str, next_player: str) -> TurnStatus:
        black, white = self.score()
        return TurnStatus(
            GameStatus.PASS,
            player=skipped,
            skipped_player=skipped,
            next_player=next_player,
            black_count=black,
            white_count=white,
        )

    def _final(self) -> TurnStatus:
        black, white = self.score()
        return TurnStatus(
            GameStatus.TERMINAL,
            winner=self.winner(),
            black_count=black,
            white_count=white,
        )
