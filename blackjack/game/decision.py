"""Player decisions and how raw input maps onto them."""

from enum import Enum


class Decision(Enum):
    """What the player chose to do on their turn."""

    HIT = "hit"
    STAND = "stand"


def parse_decision(raw: str) -> Decision | None:
    """
    Parse what the player typed.

    Matching is by first letter only, so "Stand", "s" and "spaghetti" all
    stand and anything starting with "h" hits. Returns None for anything
    else, including empty input and input with leading whitespace.
    """
    choice = raw.lower()
    if choice.startswith("s"):
        return Decision.STAND
    if choice.startswith("h"):
        return Decision.HIT
    return None
