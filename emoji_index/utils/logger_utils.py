# logger_utils.py - for logging messages and performance metrics, timestamps etc

from __future__ import annotations

import os
import time
from datetime import datetime
from typing import Optional

# Directory where all log files will be stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden with Log.configure()
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "emoji_index.log")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """
    Lightweight logger for writing messages and tracking metrics.
    Used as a class (Log.info(...)), there is one log per process.
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path: Optional[str] = DEFAULT_LOG_PATH
    use_color: bool = True
    echo: bool = True
    min_level: str = "DEBUG"

    @classmethod
    def configure(
        cls,
        path: Optional[str] = None,
        *,
        use_color: Optional[bool] = None,
        echo: Optional[bool] = None,
        min_level: Optional[str] = None,
        to_file: bool = True,
    ) -> None:
        """
        Change where and how lines are written.
        to_file=False disables the log file entirely (console only).
        """
        if not to_file:
            cls.path = None
        elif path is not None:
            cls.path = path
        if use_color is not None:
            cls.use_color = use_color
        if echo is not None:
            cls.echo = echo
        if min_level is not None:
            level = min_level.upper()
            if level not in LEVELS:
                raise ValueError(f"unknown log level: {min_level}")
            cls.min_level = level

    @classmethod
    def write(cls, msg: str, level: str = "INFO") -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        level = level.upper()
        if LEVELS.index(level) < LEVELS.index(cls.min_level):
            return

        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        cls._append(line)

        # print to console (color enabled etc)
        if not cls.echo:
            return
        if cls.use_color and level in cls.COLORS:
            print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
        else:
            print(line)

    @classmethod
    def _append(cls, line: str) -> None:
        if not cls.path:
            return
        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)  # create lazily, first write only
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    # Public logging methods
    @classmethod
    def debug(cls, msg: str) -> None:
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str) -> None:
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str) -> None:
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str) -> None:
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (like timing, counts, or performance stats).
        Example: [12:45:02] initialize done: 0.123s
        """
        if LEVELS.index(cls.min_level) > LEVELS.index("INFO"):
            return
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        if cls.echo:
            print(line)
        cls._append(line)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load dataset"):
                index.initialize(data)
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
