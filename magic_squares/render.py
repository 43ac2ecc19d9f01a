"""Matplotlib rendering of a square."""
from __future__ import annotations

import matplotlib
import matplotlib.pyplot as plt

from .square import Square


def plot_square(square: Square, ax=None):
    """Draw ``square`` as a coloured table and return the figure."""
    n = square.order
    if ax is None:
        side = max(3.0, 0.5 * n)
        fig, ax = plt.subplots(figsize=(side, side))
    else:
        fig = ax.figure

    board = square.as_array()
    norm = board.astype(float) / (n * n)
    colours = matplotlib.colormaps["YlGnBu"](norm)

    tbl = ax.table(cellText=[[str(v) for v in row] for row in square.rows()],
                   cellColours=colours,
                   cellLoc="center",
                   loc="center")
    tbl.auto_set_font_size(False)
    tbl.set_fontsize(max(6, 14 - n // 2))
    tbl.scale(1, 1.5)
    ax.set_title(f"Order {n} | Magic constant {square.magic_constant}")
    ax.axis("off")
    return fig
