import flet as ft

DISC_STYLES = {
    "BLACK": ("#0f0f0f", ["#2f2f2f", "#060606"], "#4f4f4f"),
    "WHITE": ("#f4f4f4", ["#ffffff", "#d5d5d5"], "#c5c5c5"),
}


class BoardComponent:
    def __init__(self, board_size: int, on_click_callback, cell_size: float = 60):
        self.board_size = board_size
        self.on_click = on_click_callback
        self.cell_size = cell_size

        self.discs = {} # coord -> disc Container
        self.markers = {} # coord -> valid-move marker
        self.board_grid = None
        self._valid_moves: set[str] = set()

    def create_board(self) -> ft.Column:
        disc_size = int(self.cell_size * 0.72)
        marker_size = max(12, int(self.cell_size * 0.3))
        rows = []
        for r in range(self.board_size):
            row_controls = []
            for c in range(self.board_size):
                coord = f"{chr(65+c)}{r+1}"
                disc = ft.Container(width=disc_size, height=disc_size, border_radius=disc_size / 2)
                marker = ft.Container(
                    width=marker_size,
                    height=marker_size,
                    border_radius=marker_size / 2,
                    bgcolor="rgba(235,235,235,0.6)",
                    opacity=0,
                    animate_opacity=200,
                )
                cell = ft.Container(
                    content=ft.Stack([disc, marker], alignment=ft.alignment.center),
                    width=self.cell_size,
                    height=self.cell_size,
                    bgcolor="#1B5E20",
                    border=ft.border.all(1, "black"),
                    on_click=lambda e, coord=coord: self.on_click(coord),
                    alignment=ft.alignment.center,
                    data=coord,
                )
                self.discs[coord] = disc
                self.markers[coord] = marker
                row_controls.append(cell)
            rows.append(ft.Row(row_controls, spacing=0, tight=True))

        self.board_grid = ft.Column(rows, spacing=0)
        return self.board_grid

    def render_state(self, state_str: str):
        """Paint every disc from a row-major B/W/. string."""
        for r in range(self.board_size):
            for c in range(self.board_size):
                char = state_str[r * self.board_size + c]
                color = "BLACK" if char == "B" else "WHITE" if char == "W" else None
                self._paint(self.discs[f"{chr(65+c)}{r+1}"], color)
        if self.board_grid and self.board_grid.page:
            self.board_grid.update()

    def _paint(self, disc: ft.Container, color: str | None):
        style = DISC_STYLES.get(color)
        if style is None:
            disc.bgcolor = None
            disc.gradient = None
            disc.border = None
            disc.shadow = None
            return
        bgcolor, gradient, border = style
        disc.bgcolor = bgcolor
        disc.gradient = ft.RadialGradient(radius=1.2, colors=gradient)
        disc.border = ft.border.all(1, border)
        disc.shadow = ft.BoxShadow(
            blur_radius=16,
            spread_radius=1,
            color="rgba(0,0,0,0.45)",
            offset=ft.Offset(0, 4),
        )

    def highlight_valid_moves(self, moves: list[str]):
        self._valid_moves = set(moves)
        for coord, marker in self.markers.items():
            marker.opacity = 1 if coord in self._valid_moves else 0
        if self.board_grid and self.board_grid.page:
            self.board_grid.update()

    def is_valid_move(self, coord: str) -> bool:
        return coord in self._valid_moves
