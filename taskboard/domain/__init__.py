"""
Domain layer: entities, repository ports and service contracts.
"""
