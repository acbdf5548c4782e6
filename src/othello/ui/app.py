import asyncio
import flet as ft
from othello.protocol.interface import EngineInterface
from othello.protocol.constants import Command, Response, PASS_DELAY_SECONDS
from othello.ui.components.board import BoardComponent
from othello.ui.components.scoreboard import ScoreboardComponent
from othello.ui.components.controls import GameControlsComponent


class OthelloApp:
    def __init__(self, engine: EngineInterface, board_size: int = 8, pass_delay: float = PASS_DELAY_SECONDS):
        self.engine = engine
        self.board_size = board_size
        self.pass_delay = pass_delay
        self.engine.set_callback(self.handle_engine_message)

        self.board_component = BoardComponent(
            board_size=board_size,
            on_click_callback=self.on_board_click
        )
        self.scoreboard_component = ScoreboardComponent()
        self.controls_component = GameControlsComponent(on_new_game=self.on_new_game)

        self.log_view = ft.ListView(expand=True, spacing=4, padding=0, auto_scroll=True)
        self.page = None
        self.current_turn = "BLACK"
        self.game_started = False
        self._pass_task = None
        # Bumped on every new game so a stale pass timer never confirms
        self._game_id = 0

    def main(self, page: ft.Page):
        self.page = page
        page.title = "Othello"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.window.width = 960
        page.window.height = 720
        page.padding = 20

        sidebar = self.controls_component.create_sidebar(self.log_view)
        board_wrapper = ft.Container(
            content=self.board_component.create_board(),
            padding=24,
            border_radius=24,
            bgcolor="#145a1e",
            alignment=ft.alignment.center,
        )
        board_area = ft.Container(
            content=ft.Column(
                [self.scoreboard_component.create(), board_wrapper],
                spacing=16,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            alignment=ft.alignment.top_center,
            expand=True,
            padding=16,
            bgcolor="grey200"
        )

        page.add(
            ft.Row(
                [sidebar, ft.VerticalDivider(width=1), board_area],
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.STRETCH
            )
        )
        page.update()

        self.engine.start()
        self.log("System: Engine started")
        self.on_new_game(None)

    def log(self, message: str):
        self.log_view.controls.append(
            ft.Text(message, font_family="monospace", size=10, selectable=True)
        )
        if self.log_view.page:
            self.log_view.update()

    def handle_engine_message(self, message: str):
        self.log(f"Engine: {message}")

        parts = message.split()
        cmd = parts[0]

        if cmd == Response.BOARD:
            # BOARD <size> <current_player> <state_string>
            if len(parts) > 3:
                self.current_turn = parts[2]
                self.board_component.render_state(parts[3])

        elif cmd == Response.INFO:
            if len(parts) > 3 and parts[1] == "SCORE":
                self.scoreboard_component.update_scores(int(parts[2]), int(parts[3]))

        elif cmd == Response.VALID_MOVES:
            self.board_component.highlight_valid_moves(parts[1:])

        elif cmd == Response.TURN:
            self.current_turn = parts[1]
            self.scoreboard_component.set_status(f"{self._color_label(self.current_turn)} to move")
            self.engine.send_command(f"{Command.VALID_MOVES} {self.current_turn}")

        elif cmd == Response.PASS:
            skipped, next_player = parts[1], parts[2]
            self.board_component.highlight_valid_moves([])
            self.scoreboard_component.set_status(
                f"{self._color_label(skipped)} passes. {self._color_label(next_player)} to move."
            )
            self._schedule_pass_confirmation()

        elif cmd == Response.RESULT:
            # RESULT <winner> <black> <white>
            winner, black, white = parts[1], parts[2], parts[3]
            self.game_started = False
            self.board_component.highlight_valid_moves([])
            self.log(f"GAME OVER: Winner is {winner}")
            if winner == "DRAW":
                self.scoreboard_component.set_status(f"Draw! {black} - {white}", color="#1b5e20")
            else:
                self.scoreboard_component.set_status(
                    f"{self._color_label(winner)} wins! {black} - {white}",
                    color="#b71c1c"
                )

    def _schedule_pass_confirmation(self):
        if self.page is None:
            self.engine.send_command(Command.CONFIRM_PASS)
            return
        self._pass_task = self.page.run_task(self._confirm_pass_later, self._game_id)

    async def _confirm_pass_later(self, game_id: int):
        await asyncio.sleep(self.pass_delay)
        if game_id != self._game_id:
            return
        self._pass_task = None
        self.engine.send_command(Command.CONFIRM_PASS)

    def on_new_game(self, e):
        self.log("GUI: Starting New Game...")
        self._game_id += 1
        if self._pass_task is not None:
            self._pass_task.cancel()
            self._pass_task = None
        self.game_started = True
        self.board_component.highlight_valid_moves([])
        self.engine.send_command(Command.NEWGAME)

    def on_board_click(self, coord):
        if not self.game_started:
            return

        if not self.board_component.is_valid_move(coord):
            self.log(f"Warning: Invalid move {coord}. Please choose a highlighted cell.")
            return

        self.log(f"GUI: Clicked {coord}")
        self.board_component.highlight_valid_moves([])
        self.engine.send_command(f"{Command.PLAY} {coord}")

    def _color_label(self, color: str) -> str:
        if color == "BLACK":
            return "Black"
        if color == "WHITE":
            return "White"
        return color.capitalize()
