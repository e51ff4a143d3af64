"""Built-in affinity factors. Importing this package registers them."""

from inkgroup.engine.factors import behavior, geometry, spatial, temporal

__all__ = ["behavior", "geometry", "spatial", "temporal"]
