# HTTP surface for the vocabulary engine

from .server import create_app

__all__ = ['create_app']
