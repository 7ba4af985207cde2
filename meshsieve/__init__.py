"""Per-point mesh data storage, slice refinement and assembly, and graph partitioning."""

__version__ = "1.1.5"