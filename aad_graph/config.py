"""
Writer configuration.

Styling and number formatting used by aad_graph.export.dot. The defaults
reproduce the Graphviz header of the reference graphs.
"""

from dataclasses import dataclass
from typing import Optional


_RANKDIRS = ("LR", "RL", "TB", "BT")


@dataclass
class DotConfig:
    """Configuration for DOT output."""
    fontname: str = "Helvetica,Arial,sans-serif"
    rankdir: str = "LR"
    node_shape: str = "Mrecord"
    precision: Optional[int] = 6  # significant digits; None -> str(float(x))

    def __post_init__(self):
        if self.rankdir not in _RANKDIRS:
            raise ValueError(f"rankdir must be one of {_RANKDIRS}, got {self.rankdir!r}")
        if self.precision is not None and self.precision < 1:
            raise ValueError(f"precision must be >= 1 or None, got {self.precision}")

    def format_number(self, x) -> str:
        if self.precision is None:
            return str(float(x))
        return f"{float(x):.{self.precision}g}"
