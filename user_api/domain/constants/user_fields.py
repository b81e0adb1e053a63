"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    NAME = "name"
    EMAIL = "email"
