"""Constrain/round engine and tone curves. Import from :mod:`chromakit`."""
