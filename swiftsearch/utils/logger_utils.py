# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import os
import time
from datetime import datetime
from typing import Optional

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight logger for writing messages and tracking metrics.
    path=None keeps nothing on disk; echo=False keeps the console quiet.
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        use_color: bool = True,
        echo: bool = False,
        level: str = "INFO",
    ):
        self.path = path
        self.use_color = use_color
        self.echo = echo
        self.set_level(level)

    def set_level(self, level: str) -> None:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        self.level = level

    def write(self, level: str, msg: str) -> Optional[str]:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Returns the formatted line, or None when filtered out.
        """
        if LEVELS.get(level, 0) < LEVELS[self.level]:
            return None
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            self._append(self.path, line)

        # print to console (color enabled etc)
        if self.echo:
            if self.use_color and level in self.COLORS:
                print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
            else:
                print(line)
        return line

    @staticmethod
    def _append(path: str, line: str) -> None:
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)  # create the folder on first write
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        return self.write("DEBUG", msg)

    def info(self, msg: str):
        return self.write("INFO", msg)

    def warning(self, msg: str):
        return self.write("WARNING", msg)

    def error(self, msg: str):
        return self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: [12:45:02] query latency: 0.123ms
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        if self.echo:
            print(line)
        if self.path:
            self._append(self.path, line)
        return line

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("bulk_load"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        # nothing special to do on enter, just return self
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed * 1000, 3), "ms")
