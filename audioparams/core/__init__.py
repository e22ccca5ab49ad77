"""Value types for describing audio streams."""
