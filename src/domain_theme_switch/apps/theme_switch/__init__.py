"""
Theme switch application: assigns a site and an admin theme to every domain.
"""
