"""
Edge-list text loader.

One edge per line: "<source> <target> [<weight>]", fields separated by
single spaces. A missing weight defaults to 1.0. Lines with fewer than two
fields, or an empty source or target token, are skipped.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from graph import EdgeSink

logger = logging.getLogger(__name__)


class EdgeListFormatError(ValueError):
    """A weight field that does not parse as a float."""

    def __init__(self, line_number: int, token: str) -> None:
        super().__init__(f"line {line_number}: invalid weight {token!r}")
        self.line_number = line_number
        self.token = token


def load_edges(lines: Iterable[str], sink: EdgeSink) -> int:
    """
    Feed each edge line into sink.add_edge and return the number of edges added.

    Loading stops at the first malformed weight; edges from earlier lines
    stay in the sink.

    Raises:
        EdgeListFormatError: a weight field is not a float.
    """
    added = 0
    for line_number, line in enumerate(lines, start=1):
        parts = line.rstrip("\r\n").split(" ")
        if len(parts) < 2:
            continue

        src, tgt = parts[0], parts[1]
        if not src or not tgt:
            continue

        if len(parts) == 2:
            sink.add_edge(src, tgt)
        else:
            try:
                weight = float(parts[2])
            except ValueError:
                raise EdgeListFormatError(line_number, parts[2]) from None
            sink.add_edge(src, tgt, weight)
        added += 1

    return added


def load_graph_from_file(path: Union[str, Path], sink: EdgeSink) -> int:
    """
    Read an edge-list file into sink. Errors opening the file propagate.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        added = load_edges(f, sink)
    logger.debug("loaded %d edges from %s", added, path)
    return added
