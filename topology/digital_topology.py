"""
Digital topologies: a foreground and a background adjacency.

The foreground adjacency connects the points of an object, the background
adjacency connects the points of its complement. Classical pairs such as
(4, 8) or (8, 4) in 2D and (6, 18) or (18, 6) in 3D satisfy a digital Jordan
theorem; the consistency tag records what the caller knows about it.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from decomposition.connectivity import Adjacency


class DigitalTopologyProperties(StrEnum):
    """What is known about the pair of adjacencies."""

    UNKNOWN = "unknown"
    JORDAN = "jordan"
    NOT_JORDAN = "not_jordan"


@dataclass(frozen=True)
class DigitalTopology:
    """
    Immutable pair of adjacencies.

    Topologies are shared by reference between objects: nothing in them can
    change, so they never need copy-on-write.
    """

    foreground: Adjacency
    background: Adjacency
    properties: DigitalTopologyProperties = field(
        default=DigitalTopologyProperties.UNKNOWN
    )

    def __post_init__(self) -> None:
        if self.foreground.dimension != self.background.dimension:
            raise ValueError(
                f"Foreground adjacency of dimension {self.foreground.dimension} "
                f"does not match background adjacency of dimension "
                f"{self.background.dimension}"
            )

    @property
    def dimension(self) -> int:
        return self.foreground.dimension

    def reverse_topology(self) -> "DigitalTopology":
        """Same topology with foreground and background swapped."""
        return DigitalTopology(self.background, self.foreground, self.properties)

    def __str__(self) -> str:
        return (
            f"DigitalTopology(fg={self.foreground}, bg={self.background}, "
            f"{self.properties.value})"
        )
