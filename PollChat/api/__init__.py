from .routes import MessageOut, create_app, run

__all__ = ['MessageOut', 'create_app', 'run']
