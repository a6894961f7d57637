"""Visualization module for planned paths."""

from .path_plot import plot_planned_path

__all__ = ['plot_planned_path']
