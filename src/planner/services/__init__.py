"""
Business services for the trip planner.

- date_range.py: calendar day picks to a normalized start/end range
- roster.py: guest e-mail validation and deduplication
- wizard.py: two-step trip-creation state machine
- orchestrator.py: create-trip transaction and local persistence
- links.py: trip link form validation
"""

__all__: list[str] = []
