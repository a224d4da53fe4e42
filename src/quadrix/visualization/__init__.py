"""Pygame front end: board renderer and the human-play loop."""
