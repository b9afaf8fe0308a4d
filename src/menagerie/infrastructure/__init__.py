"""Infrastructure layer: line-oriented stream adapters."""
