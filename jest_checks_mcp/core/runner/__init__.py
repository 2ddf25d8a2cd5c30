"""Test runner module - invokes Jest so it writes a JSON result file."""

from .executor import JestRun, JestRunner, build_jest_command, run_jest

__all__ = [
    "JestRunner",
    "JestRun",
    "build_jest_command",
    "run_jest",
]
