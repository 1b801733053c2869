"""
Application layer: use cases and data transfer objects.
"""
