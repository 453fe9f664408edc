"""
Mapped component schema.

One record per designator. Records are built by the placement transformer
after zone classification and are never modified afterwards.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .zone import ZoneLabel


def normalize_key(designator: str) -> str:
    """Canonical registry key for a designator ('c102 ' -> 'C102')."""
    return str(designator).strip().upper()


class ComponentRecord(BaseModel):
    """
    A placed component with its canonical center point and assigned zone.

    Coordinates are in millimeters as read from the file (after unit
    conversion). The zone is derived by the zone classifier.
    """

    model_config = ConfigDict(frozen=True)

    designator: str = Field(min_length=1, description="Reference designator (e.g., C102)")
    x: float = Field(description="Center X in millimeters")
    y: float = Field(description="Center Y in millimeters")
    layer: str = Field(default='', description="Side/layer label (e.g., TopLayer)")
    zone: ZoneLabel = Field(description="Assigned two-tier zone")

    @property
    def key(self) -> str:
        """Case-insensitive registry key."""
        return normalize_key(self.designator)

    def to_dict(self) -> Dict[str, Any]:
        """Flat representation for export."""
        return {
            'designator': self.designator,
            'layer': self.layer,
            'x_mm': self.x,
            'y_mm': self.y,
            'zone': self.zone.label,
            'primary_zone': self.zone.primary,
            'secondary_zone': self.zone.secondary,
        }
