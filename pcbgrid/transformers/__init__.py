"""Transformers: raw centroid rows to classified component records."""

from .coordinates import normalize_coordinate, strip_unit_suffixes
from .placement_transformer import PlacementTransformer

__all__ = ['PlacementTransformer', 'normalize_coordinate', 'strip_unit_suffixes']
