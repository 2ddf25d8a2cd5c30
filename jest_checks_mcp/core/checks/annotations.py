"""Annotation Builder - one check annotation per failed assertion."""

from dataclasses import dataclass

from ..paths import strip_base_dir
from ..results import Result
from .ansi import strip_ansi


@dataclass(frozen=True)
class Annotation:
    """A file/line scoped failure shown on the check run."""
    path: str
    start_line: int
    end_line: int
    title: str
    message: str
    annotation_level: str = "failure"

    def to_dict(self) -> dict:
        """GitHub check run annotation shape."""
        return {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level,
            "title": self.title,
            "message": self.message,
        }


def build_annotations(result: Result, base_dir: str) -> list[Annotation]:
    """Annotate every failed assertion, in file order then assertion order.

    A passing run gets no annotations. Assertions without a location are
    pinned to line 0.
    """
    if result.success:
        return []

    annotations = []

    for file_result in result.test_results:
        path = strip_base_dir(file_result.file_path, base_dir)

        for assertion in file_result.failed_assertions:
            line = assertion.location.line if assertion.location else 0
            annotations.append(Annotation(
                path=path,
                start_line=line,
                end_line=line,
                title=assertion.full_title,
                message=strip_ansi("\n\n".join(assertion.failure_messages)),
            ))

    return annotations
