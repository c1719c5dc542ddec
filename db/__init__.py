"""
db/ - Database Layer
====================
Handles the PostgreSQL connection descriptor, URL normalization and
per-operation connection handling.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
