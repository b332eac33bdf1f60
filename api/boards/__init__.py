"""
Boards feature: boards and their admin links (board_users).
"""
