"""Domain layer — cadences, period windows, and progress math.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
