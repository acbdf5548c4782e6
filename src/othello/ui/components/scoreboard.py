import flet as ft


class ScoreboardComponent:
    def __init__(self, height: float = 82):
        self.height = height
        self.black_score_text = ft.Text("2", size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.white_score_text = ft.Text("2", size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.status_text = ft.Text("", size=13, color="#333333", weight=ft.FontWeight.BOLD)
        self.container = None

    def create(self) -> ft.Container:
        score_row = ft.Row(
            [
                ft.Text("Black ●", size=20, weight=ft.FontWeight.BOLD),
                self.black_score_text,
                ft.Text("-", size=20),
                self.white_score_text,
                ft.Text("○ White", size=20, weight=ft.FontWeight.BOLD),
            ],
            spacing=16,
            alignment=ft.MainAxisAlignment.CENTER,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        self.container = ft.Container(
            content=ft.Column(
                [score_row, self.status_text],
                spacing=4,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=ft.padding.symmetric(vertical=6, horizontal=14),
            bgcolor="#f9f9f9",
            border_radius=14,
            border=ft.border.all(1, "#e0e0e0"),
            height=self.height,
            alignment=ft.alignment.center,
        )
        return self.container

    def update_scores(self, black: int, white: int):
        self.black_score_text.value = str(black)
        self.white_score_text.value = str(white)
        if self.black_score_text.page:
            self.black_score_text.update()
        if self.white_score_text.page:
            self.white_score_text.update()

    def set_status(self, message: str, color: str = "#333333"):
        self.status_text.value = message
        self.status_text.color = color
        if self.status_text.page:
            self.status_text.update()
