"""
Screen controllers.

Thin wrappers that connect UI callbacks to planner/. They hold no rendering
logic; errors come back as PlannerError values for the view to display.
"""

__all__: list[str] = []
