"""Project skeleton package."""

from .layout import ProjectScaffolder, ScaffoldLayout, ScaffoldResult, scaffold_project

__all__ = ["ProjectScaffolder", "ScaffoldLayout", "ScaffoldResult", "scaffold_project"]
