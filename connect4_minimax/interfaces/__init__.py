"""
connect4_minimax.interfaces - User interfaces for the game
"""

# Don't import anything here to avoid circular imports
__all__ = []
