"""Digital profile API for municipal statistics."""
