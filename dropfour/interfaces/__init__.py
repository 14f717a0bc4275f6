"""
dropfour.interfaces - User interfaces for Connect Four

Console front end built on top of the engine in dropfour.game and
dropfour.ai.
"""

# Don't import anything here to avoid circular imports
__all__ = []
