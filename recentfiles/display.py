"""Shortest unique display labels for recent-file paths.

Files with a unique basename are shown by basename alone. Files sharing a
basename get just enough trailing directories to tell them apart.
"""

from __future__ import annotations

from collections.abc import Sequence


def basename(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def _suffix(parts: list[str], count: int) -> str:
    """Join the last ``count`` segments (all of them when ``count`` exceeds the length)."""
    return "/".join(parts[-count:])


def _unique_label(index: int, group: list[int], split_paths: list[list[str]], full_path: str) -> str:
    """Grow the suffix of ``split_paths[index]`` until no other group member shares it.

    Each candidate is compared against the other members' suffixes of the
    same segment count, so paths that agree segment by segment advance in
    lock-step until one diverges.
    """
    parts = split_paths[index]
    for count in range(2, len(parts) + 1):
        candidate = _suffix(parts, count)
        if all(
            _suffix(split_paths[other], count) != candidate
            for other in group
            if other != index
        ):
            return candidate
    return full_path


def display_labels(paths: Sequence[str]) -> list[str]:
    """Return one label per path, in input order."""
    if len(paths) <= 1:
        return [basename(path) for path in paths]

    groups: dict[str, list[int]] = {}
    for index, path in enumerate(paths):
        groups.setdefault(basename(path), []).append(index)

    split_paths = [path.split("/") for path in paths]
    labels = [""] * len(paths)
    for name, group in groups.items():
        if len(group) == 1:
            labels[group[0]] = name
            continue
        for index in group:
            labels[index] = _unique_label(index, group, split_paths, paths[index])
    return labels
