"""
security/ - Handler middleware (rate limiting).
"""
