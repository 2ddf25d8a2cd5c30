"""Core domain logic: Jest results in, check payload and coverage table out."""


from .checks import Annotation, CheckPayload, build_annotations, build_check_payload
from .coverage import get_coverage_table
from .results import Result, parse_results
from .runner import JestRun, build_jest_command, run_jest

__all__ = [
    # Results
    "parse_results",
    "Result",
    # Coverage
    "get_coverage_table",
    # Checks
    "build_annotations",
    "build_check_payload",
    "Annotation",
    "CheckPayload",
    # Runner
    "build_jest_command",
    "run_jest",
    "JestRun",
]
