"""
Digital topology on top of the kernel.

**DigitalTopology** (digital_topology.py)
    Foreground/background adjacency pair with its consistency tag.

**Object** (object.py)
    Point set + topology: neighborhoods, border, connected components.
    Copies share their points until one of them is modified.

**Expander** (expander.py)
    Breadth-first expansion of an object, one layer at a time.
"""

from .digital_topology import DigitalTopology, DigitalTopologyProperties
from .expander import Expander
from .object import Object, ObjectSink

__all__ = [
    "DigitalTopology",
    "DigitalTopologyProperties",
    "Object",
    "ObjectSink",
    "Expander",
]
