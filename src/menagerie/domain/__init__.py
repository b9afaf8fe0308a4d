"""Domain layer: records, parsing rules and collector enums."""
