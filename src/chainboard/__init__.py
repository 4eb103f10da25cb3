"""
chainboard - registry of Cosmos chain configurations for the explorer dashboard
"""

__version__ = "0.1.0"
