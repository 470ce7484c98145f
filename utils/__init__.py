"""
utils/ - Shared helpers used by every layer.
"""
