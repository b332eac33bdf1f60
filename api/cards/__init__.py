"""
Cards feature: cards inside lists and the users linked to them (card_users).
"""
