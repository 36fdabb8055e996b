"""NHL results: did your team win today?"""
