"""Service layer: the collection loop and its ServiceResult wrapper."""
