"""
errors.py: Exceptions raised by the simulation core.
"""


class ConfigurationError(ValueError):
    """Supplied constants describe a geometrically infeasible game world."""
