from PollChat.config import ClientSettings


class Client:
    """
    Base client class holding the settings every client mode shares.
    """

    def __init__(self, settings: ClientSettings):
        """
        Initialize client with connection parameters.

        Args:
            settings (ClientSettings): Server URL and timing settings
        """
        self.settings = settings

    def run(self):
        """
        Abstract method to start the client.
        Must be implemented by subclasses.
        """
        raise NotImplementedError
