from typing import List, Optional, Sequence, Tuple

Coord = Tuple[int, int]


class Board:
    BLACK = "BLACK"
    WHITE = "WHITE"
    EMPTY = None

    # up, down, left, right, up-left, up-right, down-left, down-right
    DIRECTIONS = [
        (-1, 0), (1, 0), (0, -1), (0, 1),
        (-1, -1), (-1, 1), (1, -1), (1, 1),
    ]

    _CELL_CHARS = {"B": BLACK, "W": WHITE, ".": EMPTY}

    def __init__(self, size: int = 8):
        if size < 4 or size % 2:
            raise ValueError(f"Board size must be an even number >= 4, got {size}")
        self.size = size
        self.grid: List[List[Optional[str]]] = [[self.EMPTY for _ in range(size)] for _ in range(size)]
        self._init_board()

    def _init_board(self):
        """Place the four starting discs on the centre diagonals."""
        mid = self.size // 2
        # D4 (3,3), E5 (4,4) -> WHITE
        # E4 (3,4), D5 (4,3) -> BLACK
        self.grid[mid-1][mid-1] = self.WHITE
        self.grid[mid][mid] = self.WHITE
        self.grid[mid-1][mid] = self.BLACK
        self.grid[mid][mid-1] = self.BLACK

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> "Board":
        """Build a board from explicit rows of "B"/"W"/"." or cell constants."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid")
        board = cls(size)
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                board.grid[r][c] = cls._parse_cell(cell)
        return board

    @classmethod
    def _parse_cell(cls, cell: Optional[str]) -> Optional[str]:
        if cell in (cls.BLACK, cls.WHITE, cls.EMPTY):
            return cell
        if cell in cls._CELL_CHARS:
            return cls._CELL_CHARS[cell]
        raise ValueError(f"Unknown cell value {cell!r}")

    @staticmethod
    def opponent(player: str) -> str:
        if player == Board.BLACK:
            return Board.WHITE
        if player == Board.WHITE:
            return Board.BLACK
        raise ValueError(f"Unknown player {player!r}")

    def is_on_board(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def get_piece(self, r: int, c: int) -> Optional[str]:
        if self.is_on_board(r, c):
            return self.grid[r][c]
        return None

    def flippable_pieces(self, r: int, c: int, player: str) -> List[Coord]:
        """Return the opponent discs a disc at (r, c) would flip, nearest first
        within each direction. An empty list means the move is illegal."""
        opponent = self.opponent(player)
        if not isinstance(r, int) or not isinstance(c, int):
            return []
        if not self.is_on_board(r, c) or self.grid[r][c] is not self.EMPTY:
            return []

        flippable: List[Coord] = []
        for dr, dc in self.DIRECTIONS:
            line: List[Coord] = []
            nr, nc = r + dr, c + dc
            while self.is_on_board(nr, nc):
                piece = self.grid[nr][nc]
                if piece == opponent:
                    line.append((nr, nc))
                elif piece == player:
                    flippable.extend(line)
                    break
                else:
                    break
                nr += dr
                nc += dc
        return flippable

    def get_valid_moves(self, player: str) -> List[Coord]:
        """Return a list of (row, col) tuples for valid moves, row-major."""
        valid_moves = []
        for r in range(self.size):
            for c in range(self.size):
                if self.flippable_pieces(r, c, player):
                    valid_moves.append((r, c))
        return valid_moves

    def has_valid_move(self, player: str) -> bool:
        for r in range(self.size):
            for c in range(self.size):
                if self.flippable_pieces(r, c, player):
                    return True
        return False

    def place(self, r: int, c: int, player: str) -> bool:
        """Place a disc and flip the bracketed discs. Returns True if successful."""
        flips = self.flippable_pieces(r, c, player)
        if not flips:
            return False
        self.grid[r][c] = player
        for fr, fc in flips:
            self.grid[fr][fc] = player
        return True

    def get_score(self):
        black_score = 0
        white_score = 0
        for row in self.grid:
            for piece in row:
                if piece == self.BLACK:
                    black_score += 1
                elif piece == self.WHITE:
                    white_score += 1
        return {self.BLACK: black_score, self.WHITE: white_score}

    def snapshot(self) -> Tuple[Tuple[Optional[str], ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def state_string(self) -> str:
        """Row-major cells as B, W and '.'."""
        chars = []
        for row in self.grid:
            for piece in row:
                if piece == self.BLACK:
                    chars.append("B")
                elif piece == self.WHITE:
                    chars.append("W")
                else:
                    chars.append(".")
        return "".join(chars)

    def coord_to_str(self, r: int, c: int) -> str:
        return f"{chr(65+c)}{r+1}"

    @staticmethod
    def str_to_coord(coord: str) -> Coord:
        if len(coord) < 2 or not coord[0].isalpha():
            raise ValueError(f"Invalid coordinate {coord!r}")
        c = ord(coord[0].upper()) - 65
        r = int(coord[1:]) - 1
        return r, c
