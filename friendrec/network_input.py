"""
Network description input.

Parses the whitespace-delimited token format read by the command-line driver:

    <users> <max_distance> <connections> <a1> <b1> <a2> <b2> ...

Line breaks carry no meaning.
"""

import logging
from typing import List, Tuple, Iterable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class NetworkInputError(ValueError):
    """Raised when a network description cannot be parsed."""


@dataclass
class NetworkDescription:
    """A parsed network: user count, hop bound and connection pairs."""
    user_count: int
    max_distance: int
    connections: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def user_ids(self) -> range:
        """Users created up front, numbered from zero."""
        return range(self.user_count)


def _read_int(tokens: List[str], position: int, what: str) -> int:
    if position >= len(tokens):
        raise NetworkInputError(f"Unexpected end of input while reading {what}")

    token = tokens[position]
    try:
        return int(token)
    except ValueError:
        raise NetworkInputError(f"Expected integer for {what}, got '{token}'") from None


def _read_count(tokens: List[str], position: int, what: str) -> int:
    value = _read_int(tokens, position, what)
    if value < 0:
        raise NetworkInputError(f"{what} must be >= 0, got {value}")
    return value


def parse_tokens(tokens: Iterable[str]) -> NetworkDescription:
    """
    Parse a network description from a token sequence.

    Args:
        tokens: Whitespace-separated tokens

    Returns:
        NetworkDescription

    Raises:
        NetworkInputError: If a token is missing, not an integer, or a count
            is negative
    """
    tokens = list(tokens)

    user_count = _read_count(tokens, 0, "user count")
    max_distance = _read_count(tokens, 1, "max distance")
    connection_count = _read_count(tokens, 2, "connection count")

    connections = []
    position = 3
    for i in range(connection_count):
        a = _read_int(tokens, position, f"connection {i + 1}")
        b = _read_int(tokens, position + 1, f"connection {i + 1}")
        connections.append((a, b))
        position += 2

    if position < len(tokens):
        logger.warning(f"Ignoring {len(tokens) - position} trailing token(s)")

    return NetworkDescription(
        user_count=user_count,
        max_distance=max_distance,
        connections=connections
    )


def parse_network(text: str) -> NetworkDescription:
    """Parse a network description from text."""
    return parse_tokens(text.split())
