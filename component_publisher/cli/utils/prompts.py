"""Terminal prompts"""

from rich.console import Console
from rich.prompt import Prompt

from ...services.credential_broker import Prompter


class RichPrompter(Prompter):
    """Reads credentials from the terminal with rich prompts"""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def prompt_visible(self, label: str) -> str:
        return Prompt.ask(label.rstrip(":"), console=self.console)

    def prompt_hidden(self, label: str) -> str:
        return Prompt.ask(label.rstrip(":"), console=self.console, password=True)
