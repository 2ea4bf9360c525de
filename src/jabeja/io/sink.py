"""
Result sinks: where per-round records go.

TabularFileSink writes the classic result file:

    # Migration is number of nodes that have changed color.

    Round   Edge-Cut    Swaps   Migrations
    0       412         97      97
    ...

The file (and its directory) is created lazily on the first record, so a
run that never completes a round leaves nothing behind.
"""

from __future__ import annotations
import csv
from pathlib import Path
from typing import Protocol, TYPE_CHECKING

from jabeja.core.errors import SinkFailure

if TYPE_CHECKING:
    from jabeja.core.metrics import RoundReport

HEADER_COMMENT = "# Migration is number of nodes that have changed color."
COLUMNS = ("Round", "Edge-Cut", "Swaps", "Migrations")


class ResultSink(Protocol):
    """Append-only destination for round records."""

    def write(self, report: "RoundReport") -> None:
        ...


class MemorySink:
    """Keeps records in memory."""

    def __init__(self):
        self.reports: list["RoundReport"] = []

    def write(self, report: "RoundReport") -> None:
        self.reports.append(report)


class TabularFileSink:
    """Delimited text file with a header written once per run."""

    def __init__(self, path: str | Path, delimiter: str = "\t"):
        self.path = Path(path)
        self.delimiter = delimiter
        self._created = False

    def write(self, report: "RoundReport") -> None:
        try:
            if not self._created:
                self._create()
            with self.path.open("a", newline="") as fh:
                csv.writer(fh, delimiter=self.delimiter, lineterminator="\n").writerow(report.as_row())
        except OSError as exc:
            raise SinkFailure(f"cannot write results to {self.path}: {exc}") from exc

    def _create(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", newline="") as fh:
            fh.write(HEADER_COMMENT + "\n\n")
            csv.writer(fh, delimiter=self.delimiter, lineterminator="\n").writerow(COLUMNS)
        self._created = True
