"""
Client startup module for PollChat application.
Provides the entry point for starting the chat client.
"""

from PollChat.config import ClientSettings
from PollChat.core.client import CursesClient, StandardCommandlineClient
from PollChat.core.client.utils import ClientError
from PollChat.core.logging import configure_logging, create_client_config, get_logger

__all__ = ['client']

logger = get_logger(__name__)


def client(url=None, message=None, get=False, log_level=None):
    """
    Start the chat client.

    With ``message`` and/or ``get`` the client runs once and exits, otherwise
    the interactive terminal UI starts.

    Args:
        url (str): Server URL (default: Config.DEFAULT_SERVER_URL)
        message (str): Send this message and exit
        get (bool): Print the full history and exit
        log_level (str): Override the log level

    Returns:
        int: Process exit status
    """
    settings = ClientSettings.from_config(url)

    if message is not None or get:
        return StandardCommandlineClient(settings, message, get).run()

    # curses owns the terminal from here on, log to files only
    configure_logging(create_client_config(log_level or "INFO"))
    try:
        CursesClient(settings).run()
    except KeyboardInterrupt:
        print("Client stopped by user.")
    except ClientError as e:
        logger.exception("Client failed")
        print(f"Client error: {e}")
        return 1
    return 0
