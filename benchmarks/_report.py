import statistics
from collections.abc import Iterable

from rich.table import Table

import pyoseq as ps

from ._registery import CALLS_BY_RUN, Row


def _key(row: Row) -> tuple[str, str, int]:
    return row.category, row.name, row.size


def summarize(rows: Iterable[Row]) -> Table:
    """Render the median time per call of each benchmark variant.

    Rows of one variant are contiguous, so they are grouped with `pyoseq.groupby`.
    """
    table = Table(title="pyoseq benchmarks")
    for column in ("category", "name", "size", "runs", "median (µs/call)"):
        table.add_column(column, justify="right" if column != "name" else "left")
    for group in ps.groupby(rows, _key):
        category, name, size = _key(group[0])
        median = statistics.median(row.time for row in group) / CALLS_BY_RUN
        table.add_row(category, name, str(size), str(len(group)), f"{median * 1e6:.2f}")
    return table
