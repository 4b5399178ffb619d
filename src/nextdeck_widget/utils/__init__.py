"""Utility helpers for nextdeck-widget."""

from nextdeck_widget.utils.project import find_project_root, get_project_dir

__all__ = ["find_project_root", "get_project_dir"]
