import os
import re

from .errors import CorruptError

PART_PREFIX = "part_"
_PART_RE = re.compile(re.escape(PART_PREFIX) + r"([0-9]+)")


def part_name(index):
    return f"{PART_PREFIX}{index}"


def part_path(directory, index):
    return os.path.join(directory, part_name(index))


def parse_part_index(name):
    """Return the index encoded in a part file name, or None if it is not a part."""
    match = _PART_RE.fullmatch(name)
    return int(match.group(1)) if match else None


def order_parts(names, directory=None):
    """
    Sorts part file names by their embedded index.

    Names that are not parts are ignored. The remaining indices must run
    0..n-1 with no gap and no duplicate.

    Args:
        names (Iterable[str]): File names found in the part directory.
        directory (str): Used only for error details.

    Returns:
        List[Tuple[int, str]]: (index, name) pairs in index order.
    """
    parts = []
    for name in names:
        index = parse_part_index(name)
        if index is not None:
            parts.append((index, name))

    if not parts:
        raise CorruptError("No part files found", path=directory)

    parts.sort(key=lambda item: item[0])

    seen = {}
    for index, name in parts:
        if index in seen:
            raise CorruptError(
                f"Duplicate part index {index}",
                path=directory,
                details={"names": f"{seen[index]},{name}"},
            )
        seen[index] = name

    # sorted and unique, so the set is contiguous iff the last index is n-1
    last = parts[-1][0]
    if last != len(parts) - 1:
        first_missing = next(i for i, (index, _) in enumerate(parts) if index != i)
        raise CorruptError(
            f"Missing part index {first_missing}",
            path=directory,
            details={"missing": [first_missing], "highest": last},
        )

    return parts
