import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import matplotlib.pyplot as plt
import numpy as np

from pytabfunc.core.interfaces import TabulatedFunction
from pytabfunc.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class TabulatedFunctionVisualizer:
    """Plots tabulated functions: knots as markers, the interpolant as a line."""

    def __init__(self, output_dir: Union[str, Path] = "pytabfunc_plots") -> None:
        self.plot_directory = Path(output_dir)
        self.plotted_functions = []
        self.setup_style()
        logger.debug("TabulatedFunctionVisualizer initialized, output: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.dpi': 150,
        })

    @staticmethod
    def sample_range(function: TabulatedFunction,
                     padding_factor: float = ProcessingConstants.PLOT_PADDING_FACTOR,
                     num_points: int = ProcessingConstants.DEFAULT_PLOT_POINTS) -> np.ndarray:
        """Evaluation grid covering the table plus a padded extrapolation margin on each side."""
        left, right = function.left_bound(), function.right_bound()
        padding = (right - left) * padding_factor
        if padding == 0:
            padding = max(abs(left) * padding_factor, 1.0)
        return np.linspace(left - padding, right + padding, num_points)

    def plot(self, function: TabulatedFunction, name: str,
             num_points: int = ProcessingConstants.DEFAULT_PLOT_POINTS,
             x_label: str = "x", y_label: str = "y",
             extra: Optional[Iterable] = None) -> Path:
        """
        Plot ``function`` and save it as ``<name>.png`` in the output directory.

        Args:
            function: Table to plot.
            name: File stem and plot title.
            num_points: Number of samples for the interpolant line.
            x_label: Label of the horizontal axis.
            y_label: Label of the vertical axis.
            extra: Optional further ``(label, MathFunction)`` pairs drawn on the same axes.
        Returns:
            Path of the written PNG file.
        """
        logger.info("Plotting %s (%d knots)", name, function.get_count())
        grid = self.sample_range(function, num_points=num_points)
        fig, ax = plt.subplots(figsize=(8, 5))
        try:
            ax.plot(grid, [function(float(x)) for x in grid], '-', linewidth=1.5, label='interpolant')
            ax.plot(function.x_values, function.y_values, 'o', markersize=5, label='knots')
            for label, other in extra or ():
                ax.plot(grid, [other(float(x)) for x in grid], '--', linewidth=1.0, label=label)
            ax.axvspan(function.left_bound(), function.right_bound(), alpha=0.05, color='gray')
            ax.set_xlabel(x_label)
            ax.set_ylabel(y_label)
            ax.set_title(f"{name} ({type(function).__name__}, {function.get_count()} points)")
            ax.legend(loc='best')
            self.plot_directory.mkdir(parents=True, exist_ok=True)
            filepath = self.plot_directory / f"{name.replace(' ', '_')}.png"
            fig.savefig(str(filepath), bbox_inches="tight")
        finally:
            plt.close(fig)
        self.plotted_functions.append(name)
        logger.info("Plot saved to %s", filepath)
        return filepath
