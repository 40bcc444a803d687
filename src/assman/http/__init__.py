"""Transport adapters — query string and form body parsing."""
