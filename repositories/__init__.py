"""
repositories/ - Data Access Layer
==================================
Each repository owns one JSON file on disk.
Repositories read raw JSON and return domain model objects.
"""
