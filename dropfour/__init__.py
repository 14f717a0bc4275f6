"""
dropfour - Connect Four game engine

Grid and drop mechanics, four-in-a-row detection, a one-ply heuristic
computer opponent and the game session that runs a match between two
players. User interfaces live in dropfour.interfaces.
"""

__version__ = '0.1.0'
