"""Path helpers shared by annotations and the coverage table."""

import os


def strip_base_dir(path: str, base_dir: str) -> str:
    """Turn an absolute path reported by Jest into a repo-relative one.

    Paths outside `base_dir` are returned unchanged.
    """
    if not base_dir:
        return path

    prefix = base_dir if base_dir.endswith(("/", os.sep)) else base_dir + os.sep
    if path.startswith(prefix):
        return path[len(prefix):]
    return path
