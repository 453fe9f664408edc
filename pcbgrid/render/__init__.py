"""Grid rendering: structured grid views and their text/terminal forms."""

from .grid_renderer import GridCell, GridRenderer, GridView

__all__ = ['GridCell', 'GridRenderer', 'GridView']
