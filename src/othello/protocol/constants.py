class Command:
    INIT = "INIT"
    NEWGAME = "NEWGAME"
    PLAY = "PLAY"       # PLAY <coord> (e.g., PLAY D3)
    CONFIRM_PASS = "CONFIRM_PASS"
    BOARD = "BOARD"     # Request board state
    VALID_MOVES = "VALID_MOVES" # VALID_MOVES [color]
    SCORE = "SCORE"
    QUIT = "QUIT"

class Response:
    READY = "READY"
    OK = "OK"
    TURN = "TURN"       # TURN <player>
    PASS = "PASS"       # PASS <skipped> <next>
    BOARD = "BOARD"     # BOARD <size> <current_player> <state_string>
    VALID_MOVES = "VALID_MOVES" # VALID_MOVES <coord1> <coord2> ...
    ERROR = "ERROR"     # ERROR <msg>
    INFO = "INFO"       # INFO <key> <value...> (e.g., INFO SCORE 2 2)
    RESULT = "RESULT"   # RESULT <winner> <black> <white>

# Seconds a presenter shows a pass notice before sending CONFIRM_PASS
PASS_DELAY_SECONDS = 1.0
