"""
dropfour.ai - Computer opponents for Connect Four

heuristic: column scoring used by the hard computer player
players:   human and computer move sources
"""

# Don't import anything here to avoid circular imports with dropfour.game
__all__ = []
