"""Domain layer: bootstrap phases and milestones.

This layer depends only on stdlib.
It must never import from plugins, config, or commands.
"""
