from othello.protocol.interface import EngineInterface
from othello.protocol.constants import Command, Response
from othello.engine.board import Board
from othello.engine.game_engine import GameEngine, GameStatus, TurnStatus


class LocalEngine(EngineInterface):
    """Runs a GameEngine in-process behind the text protocol."""

    def __init__(self, board_size: int = 8):
        super().__init__()
        self.board_size = board_size
        self.game = GameEngine(board_size=board_size)
        self._running = False

    # ------------------------------------------------------------------
    # EngineInterface lifecycle
    # ------------------------------------------------------------------
    def start(self):
        self._running = True
        self._emit(Response.READY)

    def stop(self):
        self._running = False

    # ------------------------------------------------------------------
    # Command handling
    # ------------------------------------------------------------------
    def send_command(self, command: str):
        if not self._running:
            return

        parts = command.split()
        if not parts:
            return

        cmd = parts[0].upper()

        if cmd == Command.INIT:
            self.game = GameEngine(board_size=self.board_size)
            self._emit(Response.READY)
        elif cmd == Command.NEWGAME:
            self._handle_newgame()
        elif cmd == Command.PLAY:
            self._handle_play(parts)
        elif cmd == Command.CONFIRM_PASS:
            self._handle_confirm_pass()
        elif cmd == Command.BOARD:
            self._emit_board_update()
        elif cmd == Command.VALID_MOVES:
            self._handle_valid_moves(parts)
        elif cmd == Command.SCORE:
            self._emit_score()
        elif cmd == Command.QUIT:
            self.stop()
        else:
            self._emit(f"{Response.ERROR} Unknown command {parts[0]}")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _handle_newgame(self):
        status = self.game.new_game()
        self._emit(Response.OK)
        self._emit_board_update()
        self._emit_score()
        self._emit_status(status)

    def _handle_play(self, parts):
        if len(parts) < 2:
            self._emit(f"{Response.ERROR} Missing coordinate")
            return

        coord = parts[1]
        try:
            r, c = Board.str_to_coord(coord)
        except ValueError:
            self._emit(f"{Response.ERROR} Invalid coordinate format")
            return

        if self.game.is_over():
            self._emit(f"{Response.ERROR} Game is over")
            return
        if self.game.status().is_pass:
            self._emit(f"{Response.ERROR} Pass pending for {self.game.status().skipped_player}")
            return
        if not self.game.apply_move(r, c):
            self._emit(f"{Response.ERROR} Illegal move {coord}")
            return

        status = self.game.advance_turn()
        self._emit(Response.OK)
        self._emit_board_update()
        self._emit_score()
        self._emit_status(status)

    def _handle_confirm_pass(self):
        if not self.game.status().is_pass:
            self._emit(f"{Response.ERROR} No pass pending")
            return
        status = self.game.confirm_pass()
        self._emit(Response.OK)
        self._emit_board_update()
        self._emit_status(status)

    def _handle_valid_moves(self, parts):
        color = parts[1].upper() if len(parts) > 1 else self.game.current_player
        if color not in (Board.BLACK, Board.WHITE):
            self._emit(f"{Response.ERROR} Unknown color {parts[1]}")
            return
        moves = self.game.valid_moves(color)
        moves_str = " ".join([self.game.board.coord_to_str(r, c) for r, c in moves])
        self._emit(f"{Response.VALID_MOVES} {moves_str}".rstrip())

    # ------------------------------------------------------------------
    # Emitters
    # ------------------------------------------------------------------
    def _emit_status(self, status: TurnStatus):
        if status.status == GameStatus.TERMINAL:
            self._emit(f"{Response.RESULT} {status.winner} {status.black_count} {status.white_count}")
        elif status.status == GameStatus.PASS:
            self._emit(f"{Response.PASS} {status.skipped_player} {status.next_player}")
        else:
            self._emit(f"{Response.TURN} {status.player}")

    def _emit_score(self):
        black, white = self.game.score()
        self._emit(f"{Response.INFO} SCORE {black} {white}")

    def _emit_board_update(self):
        state_str = self.game.board.state_string()
        self._emit(f"{Response.BOARD} {self.board_size} {self.game.current_player} {state_str}")
