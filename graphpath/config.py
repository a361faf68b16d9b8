"""Configuration classes for graphpath text rendering."""

from dataclasses import dataclass


@dataclass
class PathDisplayConfig:
    """Controls how paths and adjacency lists are rendered as text."""

    # Number of leading (and trailing) vertices shown before a long path is elided
    display_cut: int = 10

    # Decimal places used for the weight in a path's text form
    weight_precision: int = 2

    # First line of format_adjacency_list() output
    adjacency_header: str = "Graph adjacency list:"

    def hidden_positions(self, length: int) -> range:
        """Return the index range of vertices hidden behind the ellipsis.

        The range is empty when a path of ``length`` vertices fits entirely.
        """
        tail_start = max(length - self.display_cut, self.display_cut)
        return range(self.display_cut, tail_start)


# Global configuration instance
DISPLAY_CONFIG = PathDisplayConfig()
