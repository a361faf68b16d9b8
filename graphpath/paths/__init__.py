"""Path primitives for search results.

``Path`` records a route as an ordered vertex sequence together with its
accumulated weight and the set of vertices the producing search examined.
"""

from graphpath.paths.path import Path

__all__ = ["Path"]
