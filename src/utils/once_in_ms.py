"""
Timing utility for throttling execution in game loops
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Use this to limit how often expensive operations run in the game loop,
    even though the loop itself runs every frame (e.g., 20ms).

    Example:
        # In __init__:
        self.memory_monitor = OnceInMs(60000)  # Once per minute

        # In update loop (runs every 20ms):
        if self.memory_monitor.should_execute():
            self.log_memory_usage()  # Only executes once per minute
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.time):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Time source in seconds
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self.clock = clock
        self.last_execution = None  # First check always executes

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and update timer if so.

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = self.clock()
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self):
        """Force next should_execute() call to return True"""
        self.last_execution = None
