"""Infrastructure layer — entity stores, JSON snapshots, the workspace.

Stores hold domain records; the service layer composes them.
It must never import from services, commands, output, or http.
"""
