"""
Core Package
============

Configuration and logging setup shared by every layer.
"""
