"""
Lists feature: lists of cards inside a board.
"""
