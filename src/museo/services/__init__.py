"""Business logic services built on the models."""
