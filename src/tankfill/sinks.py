"""
Output sinks and sleepers used by the simulation driver.

A sink is any callable taking a single line of text. A sleeper is any callable
taking a delay in seconds, ``time.sleep`` being the real-time one.
"""

import sys

from loguru import logger


class StreamSink:
    """Writes each line to a text stream and flushes it right away."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, line):
        self.stream.write(line + "\n")
        self.stream.flush()


class ListSink:
    """Collects lines in memory."""

    def __init__(self):
        self.lines = []

    def __call__(self, line):
        self.lines.append(line)

    def text(self):
        return "\n".join(self.lines) + "\n" if self.lines else ""


class LoggerSink:
    """Forwards lines to the loguru logger at the given level."""

    def __init__(self, level="INFO"):
        self.level = level

    def __call__(self, line):
        logger.log(self.level, line)


def no_sleep(seconds):
    """Sleeper that returns immediately, so runs go faster than real time."""
    return None


class RecordingSleeper:
    """Sleeper that records requested delays without waiting."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)
