import flet as ft
from typing import Callable


class GameControlsComponent:
    def __init__(self, on_new_game: Callable):
        self.on_new_game = on_new_game
        self.container: ft.Container | None = None

    def create_sidebar(self, log_view: ft.Control) -> ft.Container:
        log_container = ft.Container(
            content=log_view,
            border=ft.border.all(1, "grey400"),
            border_radius=5,
            padding=5,
            expand=True,
            bgcolor="grey100"
        )

        self.container = ft.Container(
            content=ft.Column(
                [
                    ft.Text("Othello", size=30, weight=ft.FontWeight.BOLD),
                    ft.Divider(),
                    ft.ElevatedButton("New Game", on_click=self.on_new_game, width=200),
                    ft.Divider(),
                    ft.Text("Game Log", size=16, weight=ft.FontWeight.BOLD),
                    log_container
                ],
                spacing=10,
                expand=True,
            ),
            width=280,
            padding=10,
            bgcolor="grey50"
        )
        return self.container
