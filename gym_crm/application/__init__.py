"""Application layer - services exposed to callers."""
