from abc import ABC, abstractmethod
from typing import Callable, Optional


class EngineInterface(ABC):
    """
    Text channel between a presenter and an Othello game.

    The presenter sends commands from ``Command`` through ``send_command``
    and receives every reply through the callback. A move produces
    ``OK``, ``BOARD``, ``INFO SCORE`` and then exactly one status line:
    ``TURN <player>``, ``PASS <skipped> <next>`` or
    ``RESULT <winner> <black> <white>``. After ``PASS`` the presenter waits
    its pass delay and sends ``CONFIRM_PASS``. After ``RESULT`` only
    ``NEWGAME`` brings the board back into play.
    """

    def __init__(self):
        self.on_message: Optional[Callable[[str], None]] = None

    def set_callback(self, callback: Callable[[str], None]):
        """Register the presenter's handler for reply lines."""
        self.on_message = callback

    @abstractmethod
    def start(self):
        """Begin accepting commands and announce ``READY``."""

    @abstractmethod
    def send_command(self, command: str):
        """Run one command line. Malformed commands reply ``ERROR <msg>``."""

    @abstractmethod
    def stop(self):
        """Ignore further commands."""

    def _emit(self, message: str):
        if self.on_message:
            self.on_message(message)
