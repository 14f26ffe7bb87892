"""Domain layer: value objects for exercises, preferences and plans."""
