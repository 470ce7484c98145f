"""
services/ - Business Logic Layer
=================================
Menu rendering, per-chat state tracking, in-place navigation and counters.
Handlers call services; services call repositories.
"""
