"""UI."""

from dmget.ui.reporter import Reporter, display_path

__all__ = ["Reporter", "display_path"]
