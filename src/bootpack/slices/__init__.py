"""Slice system for artifact layering."""

from bootpack.slices.slicer import SLICE_ORDER, Slice, Slicer, compute_slices, iter_files

__all__ = ["SLICE_ORDER", "Slice", "Slicer", "compute_slices", "iter_files"]
