# component_publisher/services/credential_broker.py
"""Registry credential acquisition"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..constants import MSG_ENTER_PASSWORD, MSG_ENTER_USERNAME, MSG_USING_CREDENTIALS
from ..models.request import Credentials


class Prompter(ABC):
    """Terminal input boundary"""

    @abstractmethod
    def prompt_visible(self, label: str) -> str:
        """Read a line with echo"""
        pass

    @abstractmethod
    def prompt_hidden(self, label: str) -> str:
        """Read a line without echo"""
        pass


class CredentialBroker:
    """Supplies registry credentials, prompting only when needed"""

    def __init__(self, prompter: Prompter, logger: Optional[logging.Logger] = None):
        """
        Initialize credential broker

        Args:
            prompter: Terminal input implementation
            logger: Logger for progress messages
        """
        self.prompter = prompter
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, pre_supplied: Optional[Credentials] = None) -> Credentials:
        """
        Get credentials

        Args:
            pre_supplied: Credentials given up front, returned without any I/O

        Returns:
            Credentials
        """
        if pre_supplied is not None and pre_supplied.username and pre_supplied.password:
            self.logger.info(MSG_USING_CREDENTIALS)
            return pre_supplied

        # Prompts run on the loop thread; nothing else is in flight here
        username = self.prompter.prompt_visible(MSG_ENTER_USERNAME)
        password = self.prompter.prompt_hidden(MSG_ENTER_PASSWORD)

        return Credentials(username=username, password=password)
