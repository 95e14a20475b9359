"""Application layer: ports and use cases of the scrubbing engine."""
