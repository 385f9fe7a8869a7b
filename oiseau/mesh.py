"""A mesh: topology together with geometry."""

from __future__ import annotations

from dataclasses import dataclass, field

from oiseau.geometry import Geometry
from oiseau.topology import Topology


@dataclass
class Mesh:
    """Cells and the coordinates of their vertices."""

    topology: Topology = field(default_factory=Topology)
    geometry: Geometry = field(default_factory=Geometry)