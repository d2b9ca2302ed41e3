# Domain package for configuration
"""
This package contains the interfaces the configuration service depends on.

The domain layer is independent of any infrastructure concerns.
"""
