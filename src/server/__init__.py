"""HTTP service exposing the dumbdown converters."""
