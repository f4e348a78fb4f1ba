"""
Adventure Board: read-only API and polling client for a tabletop-RPG bot's
adventures, parties and characters.
"""

__version__ = "0.1.0"
