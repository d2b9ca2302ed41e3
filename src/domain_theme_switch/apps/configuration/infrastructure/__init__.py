# Infrastructure package for configuration
"""
Repository implementations that persist configuration through the Django ORM.
"""
