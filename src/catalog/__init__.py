"""Product catalog: entity validation and storage pass-through."""
