class PolygonStoreError(ValueError):
    """Raised when the building polygon asset cannot be turned into a store"""
