"""
Configuration application for the domain theme switch service.

This package stores named configuration objects as key/value rows.
"""
