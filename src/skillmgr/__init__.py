"""skillmgr — skill, project, and employee records with JSON snapshots."""

__version__ = "0.1.0"
