"""
Core trip-planning logic for the plann.er client.

The trip-creation wizard, the remote Trip Service clients and local
persistence live here. Screen controllers in src/screens/ are thin
wrappers that call into planner/.
"""

__all__: list[str] = []
