"""
Reinforcement specifications for columns and footings.

Bar diameters, covers, spacings and lengths are in millimetres.
"""

import numpy as np
from pydantic import BaseModel, Field


class MainBars(BaseModel):
    """Column longitudinal bars."""
    count: int = Field(default=8, description="Number of bars")
    diameter: float = Field(default=16.0, description="Bar diameter (mm)")
    cover: float = Field(default=40.0, description="Clear cover (mm)")
    development_length: float = Field(default=600.0, description="Development length (mm)")

    class Config:
        frozen = True

    @property
    def area(self) -> float:
        """Total steel area As (mm²)."""
        return self.count * np.pi * (self.diameter / 2) ** 2


class Stirrups(BaseModel):
    """Column transverse ties."""
    shape: str = Field(default="rectangular", description="Tie shape")
    diameter: float = Field(default=8.0, description="Bar diameter (mm)")
    spacing: float = Field(default=150.0, description="Centre spacing (mm)")
    hook_type: str = Field(default="135", description="Hook angle")
    hook_length: float = Field(default=75.0, description="Hook length (mm)")
    number_of_legs: int = Field(default=4, description="Legs per tie")

    class Config:
        frozen = True


class ColumnReinforcement(BaseModel):
    """
    Column reinforcement: main bars plus stirrups.

    Example:
        >>> rf = ColumnReinforcement()
        >>> rf.main_bars.count, rf.stirrups.spacing
        (8, 150.0)
    """
    main_bars: MainBars = Field(default_factory=MainBars)
    stirrups: Stirrups = Field(default_factory=Stirrups)

    class Config:
        frozen = True


class BarLayer(BaseModel):
    """A layer of parallel footing bars in one direction."""
    count: int = Field(default=12, description="Number of bars")
    diameter: float = Field(default=12.0, description="Bar diameter (mm)")
    spacing: float = Field(default=150.0, description="Centre spacing (mm)")

    class Config:
        frozen = True


class TopBars(BarLayer):
    """Optional top layer."""
    enabled: bool = Field(default=False, description="Top bars provided")
    count: int = 8
    diameter: float = 10.0
    spacing: float = 200.0


class Mesh(BaseModel):
    """Optional welded/tied mesh."""
    enabled: bool = Field(default=False, description="Mesh provided")
    mesh_size: float = Field(default=150.0, description="Mesh opening (mm)")
    bar_size: float = Field(default=8.0, description="Mesh wire diameter (mm)")

    class Config:
        frozen = True


class FootingReinforcement(BaseModel):
    """Footing reinforcement: bottom bars in X and Y, optional top bars and mesh."""
    bottom_bars_x: BarLayer = Field(default_factory=BarLayer)
    bottom_bars_y: BarLayer = Field(default_factory=BarLayer)
    top_bars: TopBars = Field(default_factory=TopBars)
    mesh: Mesh = Field(default_factory=Mesh)

    class Config:
        frozen = True
