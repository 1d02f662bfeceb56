"""Calculator interaction layer: key routing, state and controller."""
