"""Pretty-print helpers for letter grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid
    from ..engine.placer import PlacementResult


EMPTY_SYMBOL = "."


def format_grid(grid: LetterGrid) -> str:
    width = grid.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.rows):
        row_cells = [grid.letter_at(r, c) or EMPTY_SYMBOL for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_placement_stats(result: PlacementResult, *, stream=None) -> None:
    """Print grid + stats for a settled placement run."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    grid = result.grid
    total_cells = grid.rows * grid.cols
    letter_cells = grid.occupied_count

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.rows} x {grid.cols} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)

    placed = result.placed_words
    orientations = Counter(p.orientation.value for p in placed)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(placed)} ({orientations['across']} across, {orientations['down']} down)", file=stream)
    for p in placed:
        print(f"    {p.id}  {p.word:<12} ({p.start_row},{p.start_col}) {p.orientation.value}", file=stream)
    print(f"  Dropped:       {len(result.unplaced_words)}", file=stream)
    if result.unplaced_words:
        print(f"    {' '.join(result.unplaced_words)}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
