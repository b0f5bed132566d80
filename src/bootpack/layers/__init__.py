"""Layer, launch metadata and plan persistence."""

from bootpack.layers.layers import BUILD, CACHE, LAUNCH, Layer, Layers, LaunchMetadata, Process
from bootpack.layers.plan import Plan, Plans

__all__ = [
    "BUILD", "CACHE", "LAUNCH",
    "Layer", "Layers", "LaunchMetadata", "Process",
    "Plan", "Plans",
]
