"""
Server startup module for PollChat application.
Provides the entry point for starting the message log server.
"""

import PollChat.api as _api
from PollChat.config import ServerSettings, config

__all__ = ['server']


def server(host=None, port=None, db=None):
    """
    Start the chat server on the given address.

    Args:
        host (str): Address to bind (default: Config.DEFAULT_HOST)
        port (int): Port number to listen on (default: Config.DEFAULT_SERVER_PORT)
        db (str): SQLite file holding the log (default: Config.SQLITE_DB_FILE)
    """
    settings = ServerSettings(
        host=host or config.DEFAULT_HOST,
        port=port or config.DEFAULT_SERVER_PORT,
        db_path=db or config.SQLITE_DB_FILE,
    )
    try:
        _api.run(settings)
    except KeyboardInterrupt:
        print("Closed by user.")
    return 0
