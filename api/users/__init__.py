"""
Users feature: user records referenced by boards and cards.
"""
