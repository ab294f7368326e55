"""Core recipe domain: value objects, entities and factories."""
