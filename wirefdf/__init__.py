"""Read FdF height maps, plot their grid points and show them in a window."""

__version__ = "0.1.0"