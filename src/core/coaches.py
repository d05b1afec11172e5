"""
Coach beans.

A coach is the smallest possible managed object: the container builds it,
runs its lifecycle hooks, and hands the same instance to everyone who asks.
The print statements are the point of the demo; they show when the container
calls into the object.
"""

import logging
from typing import Protocol


logger = logging.getLogger(__name__)


class Coach(Protocol):
    """Anything that can hand out a daily workout."""

    def get_daily_workout(self) -> str: ...


class BaseballCoach:
    """Coach with a fixed batting workout and visible lifecycle hooks."""

    def __init__(self) -> None:
        print(f"In constructor: {type(self).__name__}")

    def do_my_startup_stuff(self) -> None:
        """Runs once after construction, before the coach is handed out."""
        print(f"In do_my_startup_stuff(): {type(self).__name__}")
        logger.debug("Coach started", extra={"coach": type(self).__name__})

    def do_my_cleanup_stuff(self) -> None:
        """Runs once when the container shuts its resources down."""
        print(f"In do_my_cleanup_stuff(): {type(self).__name__}")
        logger.debug("Coach cleaned up", extra={"coach": type(self).__name__})

    def get_daily_workout(self) -> str:
        return "Spend 30 minutes batting practice"
