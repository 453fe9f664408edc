"""Zone classification."""

from .zone_classifier import ZoneClassifier, classify_zone

__all__ = ['ZoneClassifier', 'classify_zone']
