"""Farm grid model.

A fixed-size, row-major sequence of plots. Cells are immutable values; the
grid swaps a cell for its successor through ``replace``. Only same-row
neighbours are ever addressed: no tool reaches diagonally or vertically.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

from harvest_valley.core.constants import GRID_SIZE, GRID_WIDTH
from harvest_valley.core.exceptions import PlotNotFoundError
from harvest_valley.models.enums import PlotStatus
from harvest_valley.models.plot import EmptyPlot, PlantedPlot, Plot, TilledPlot


class FarmGrid:
    """Ordered collection of the farm's plots.

    Attributes:
        width: Plots per row.
        size: Total number of plots.
    """

    def __init__(self, plots: list[Plot], *, width: int = GRID_WIDTH) -> None:
        """Initialize from an existing list of plots.

        Args:
            plots: Plots in row-major order; ``plots[i].id`` must equal ``i``.
            width: Plots per row.

        Raises:
            PlotNotFoundError: If a plot's id does not match its position.
        """
        for index, plot in enumerate(plots):
            if plot.id != index:
                raise PlotNotFoundError(
                    "Plot ids must match their row-major position",
                    plot_id=plot.id,
                    details={"position": index},
                )
        self._plots: list[Plot] = list(plots)
        self.width = width

    @classmethod
    def create(cls, size: int = GRID_SIZE, *, width: int = GRID_WIDTH) -> "FarmGrid":
        """Create a grid of empty plots."""
        return cls([EmptyPlot(id=i) for i in range(size)], width=width)

    @property
    def size(self) -> int:
        return len(self._plots)

    def __len__(self) -> int:
        return len(self._plots)

    def __iter__(self) -> Iterator[Plot]:
        return iter(tuple(self._plots))

    def contains(self, plot_id: int) -> bool:
        """Check whether ``plot_id`` addresses a cell of this grid."""
        return 0 <= plot_id < len(self._plots)

    def get(self, plot_id: int) -> Plot:
        """Look up a plot by id.

        Raises:
            PlotNotFoundError: If the id is outside the grid.
        """
        if not self.contains(plot_id):
            raise PlotNotFoundError("Plot does not exist", plot_id=plot_id)
        return self._plots[plot_id]

    def replace(self, plot: Plot) -> None:
        """Swap in the successor value of the cell with the same id.

        Raises:
            PlotNotFoundError: If the plot's id is outside the grid.
        """
        if not self.contains(plot.id):
            raise PlotNotFoundError("Plot does not exist", plot_id=plot.id)
        self._plots[plot.id] = plot

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def row_of(self, plot_id: int) -> int:
        return plot_id // self.width

    def col_of(self, plot_id: int) -> int:
        return plot_id % self.width

    def left_of(self, plot_id: int) -> int | None:
        """Id of the plot to the left in the same row, if any."""
        if self.col_of(plot_id) > 0:
            return plot_id - 1
        return None

    def right_of(self, plot_id: int) -> int | None:
        """Id of the plot to the right in the same row, if any."""
        if self.col_of(plot_id) < self.width - 1 and plot_id + 1 < len(self._plots):
            return plot_id + 1
        return None

    def watering_targets(self, plot_id: int) -> list[int]:
        """Plots a watering can swing covers: target, then left, then right.

        Neighbours are clamped to the target's row and never wrap.
        """
        targets = [plot_id]
        for neighbour in (self.left_of(plot_id), self.right_of(plot_id)):
            if neighbour is not None:
                targets.append(neighbour)
        return targets

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def snapshot(self) -> tuple[Plot, ...]:
        """Immutable copy of every plot, in id order."""
        return tuple(self._plots)

    def rows(self) -> list[tuple[Plot, ...]]:
        """Plots grouped by row, for rendering."""
        return [
            tuple(self._plots[start:start + self.width])
            for start in range(0, len(self._plots), self.width)
        ]

    def planted(self) -> list[PlantedPlot]:
        return [p for p in self._plots if isinstance(p, PlantedPlot)]

    def tilled(self) -> list[TilledPlot]:
        return [p for p in self._plots if isinstance(p, TilledPlot)]

    def count_by_status(self) -> dict[PlotStatus, int]:
        """Number of plots in each status."""
        counts = Counter(p.status for p in self._plots)
        return {status: counts.get(status, 0) for status in PlotStatus}


__all__ = [
    "FarmGrid",
]
