"""Game logic for a top-down roguelike: levels, entities, monsters, waves, rooms and profiles."""

__version__ = "0.1.0"