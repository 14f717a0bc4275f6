"""
dropfour.game - Core game mechanics for Connect Four

Grid representation and win detection. The session lives in
dropfour.game.session and is not imported here because it depends on
dropfour.ai, which in turn depends on this package.
"""

from dropfour.game.board import Grid
from dropfour.game.rules import has_four_in_a_row, winning_line

__all__ = ['Grid', 'has_four_in_a_row', 'winning_line']
