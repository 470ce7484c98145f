"""
models/ - Domain Layer
=======================
Plain dataclasses for the knowledge base tree, per-chat navigation state,
and usage counters. No I/O lives here.
"""
