"""tilegrid — grid-snapping tile layout engine for dashboard panels.

Subpackages:
  layout   Pure placement engine (sizes, grid mapping, collision, search,
           container sizing, auto-arrangement, validation).
  web      FastAPI surface that exposes the engine to a host UI.
"""

__version__ = "0.1.0"
