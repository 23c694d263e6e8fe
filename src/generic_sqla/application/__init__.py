"""Application layer – query descriptors shared by every repository."""
