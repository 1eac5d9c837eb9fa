"""
Runtime services that drive a game session.
"""
