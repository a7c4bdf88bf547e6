"""HTTP surface for the hexpath service."""
