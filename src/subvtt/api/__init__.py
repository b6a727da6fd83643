"""HTTP service exposing subtitle conversion."""
