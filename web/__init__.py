"""Flask JSON API for playing tic-tac-toe against the minimax engine."""

from .app import create_app

__all__ = ["create_app"]
