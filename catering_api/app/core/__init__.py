"""Configuration, logging, errors, admin security and the entity store."""
