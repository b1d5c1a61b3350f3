"""
Single-screen Flappy Bird: simulation core plus a pygame host.
"""

__version__ = "1.0.0"
