"""
User API
========

HTTP service exposing CRUD operations over users held in memory.
"""

__version__ = "1.0.0"
