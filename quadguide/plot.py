"""Collect time series during a run and show them with matplotlib."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from quadguide.timing import get_system_time


@dataclass
class Curve:
    """One series of ``(x, y)`` points."""

    x: list = field(default_factory=list)
    y: list = field(default_factory=list)

    def points_after(self, x_rough, point_num):
        """The first ``point_num`` points whose x lies beyond ``x_rough``."""
        for i, xi in enumerate(self.x):
            if x_rough < xi:
                return list(zip(self.x[i : i + point_num], self.y[i : i + point_num]))
        return []


@dataclass
class Plot:
    """A named figure holding several labelled curves."""

    name: str
    labels: list
    curves: list = field(default_factory=list)

    def __post_init__(self):
        self.labels = list(self.labels)
        if not self.curves:
            self.curves = [Curve() for _ in self.labels]
        self.curve_ids = {label: i for i, label in enumerate(self.labels)}

    @property
    def curve_count(self):
        return len(self.curves)

    def curve(self, curve_name):
        """The curve with the given label."""
        try:
            return self.curves[self.curve_ids[curve_name]]
        except KeyError:
            raise KeyError(f"Plot {self.name} has no curve {curve_name}") from None


class PyPlot:
    """A set of named plots that frames are appended to."""

    def __init__(self):
        self._plots = {}
        self._start_time = None

    @property
    def plots(self):
        """The plots in the order they were added."""
        return list(self._plots.values())

    def _get_plot(self, plot_name):
        try:
            return self._plots[plot_name]
        except KeyError:
            raise KeyError(f"Plot {plot_name} does not exist") from None

    def _elapsed(self):
        if self._start_time is None:
            self._start_time = get_system_time()
        return (get_system_time() - self._start_time) * 1e-6

    def add_plot(self, plot_name, curve_count, labels=None):
        """Create a plot with ``curve_count`` curves, labelled ``1..n`` by default."""
        if plot_name in self._plots:
            raise ValueError(f"Already has same Plot: {plot_name}")
        if labels is None:
            labels = [str(i + 1) for i in range(curve_count)]
        labels = list(labels)
        if len(labels) < curve_count:
            raise ValueError("fewer labels than curves")
        self._plots[plot_name] = Plot(plot_name, labels[:curve_count])

    def add_frame(self, plot_name, value, x=None):
        """Append one frame; ``x`` defaults to seconds since the first timed frame.

        A scalar goes to the first curve; a sequence gives one value per curve.
        """
        plot = self._get_plot(plot_name)
        if x is None:
            x = self._elapsed()
        if np.ndim(value) == 0:
            plot.curves[0].x.append(x)
            plot.curves[0].y.append(float(value))
            return
        values = np.asarray(value, dtype=float).reshape(-1)
        if values.shape[0] < plot.curve_count:
            raise ValueError(
                f"plot {plot_name} has {plot.curve_count} curves, got {values.shape[0]} values"
            )
        for curve, v in zip(plot.curves, values):
            curve.x.append(x)
            curve.y.append(float(v))

    def print_xy(self, plot_name, curve_name, x_rough, point_num=1):
        """Print the points of a curve just after ``x_rough`` and return them."""
        plot = self._get_plot(plot_name)
        points = plot.curve(curve_name).points_after(x_rough, point_num)
        print(f"[DEBUG] Plot: {plot_name}, Curve: {curve_name}")
        for px, py in points:
            print(f"  X: {px:g}, Y: {py:g}")
        return points

    @staticmethod
    def _draw(plot):
        import matplotlib.pyplot as plt

        plt.figure()
        plt.title(plot.name)
        for label, curve in zip(plot.labels, plot.curves):
            plt.plot(curve.x, curve.y, label=label)
        plt.legend()

    def show_plot(self, *args):
        """Show the named plots; names may be given singly or as one sequence."""
        import matplotlib.pyplot as plt

        names = []
        for arg in args:
            if isinstance(arg, str):
                names.append(arg)
            else:
                names.extend(arg)
        selected = [self._get_plot(name) for name in names]
        for plot in selected:
            self._draw(plot)
        plt.show()

    def show_plot_all(self):
        """Show every plot."""
        import matplotlib.pyplot as plt

        for plot in self._plots.values():
            self._draw(plot)
        plt.show()