"""Internal implementation package; import public symbols from ``projgeom``."""
