"""
reporting.py: Ports for handing a finished run's score to the outside world.
"""

import json
import logging
import socket
from typing import List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class ScoreReporter(Protocol):
    def report(self, final_score: int) -> None:
        ...


class NullScoreReporter:
    """Discards scores."""

    def report(self, final_score: int) -> None:
        return None


class RecordingScoreReporter:
    """Keeps every reported score in memory."""

    def __init__(self):
        self.scores: List[int] = []

    def report(self, final_score: int) -> None:
        self.scores.append(final_score)


class UdpScoreReporter:
    """
    Sends each final score as one JSON datagram. Delivery is best effort:
    send errors are logged and dropped, the game never waits on them.
    """

    def __init__(self, address: Tuple[str, int], player: str,
                 sock: Optional[socket.socket] = None):
        self.address = address
        self.player = player
        self.sock = sock if sock is not None else socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def report(self, final_score: int) -> None:
        message = json.dumps({
            "type": "score",
            "player": self.player,
            "score": final_score,
        }).encode('utf-8')
        try:
            self.sock.sendto(message, self.address)
        except OSError as e:
            logger.warning("Could not report score %d to %s: %s", final_score, self.address, e)

    def close(self):
        self.sock.close()


def parse_address(value: str) -> Tuple[str, int]:
    """Parses HOST:PORT."""
    host, sep, port = value.rpartition(":")
    if not sep or not host:
        raise ValueError(f"Expected HOST:PORT, got {value!r}")
    return host, int(port)
