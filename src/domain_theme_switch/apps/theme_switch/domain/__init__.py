# Domain package for theme switching
"""
Value objects, the view model of the settings form and the interfaces of
its collaborators. Nothing here depends on Django.
"""
