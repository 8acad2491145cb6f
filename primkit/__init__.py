"""
primkit - small, dependency-light utility functions grouped into components.

Components live under primkit.components and are imported by name, e.g.

    from primkit.components.numeric import clamp
"""

__version__ = "0.1.0"
