"""Breakout simulation core: entities, physics, levels and bonuses."""
