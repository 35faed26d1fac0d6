"""Infrastructure concerns shared by the package (logging)."""
