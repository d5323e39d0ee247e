"""Interactive main menu."""
import logging

from ..api.client import KimaiClient
from ..errors import KimaiError
from ..reports.list_printer import ListPrinter
from .. import commands
from . import prompts

logger = logging.getLogger(__name__)

MAIN_MENU = [
    ('Restart recent measurement', 'restart'),
    ('Start new measurement', 'start'),
    ('Stop all active measurements', 'stop-all'),
    ('Stop an active measurement', 'stop'),
    prompts.SEPARATOR,
    ('List active measurements', 'list-active'),
    ('List recent measurements', 'list-recent'),
    ('List projects', 'list-projects'),
    ('List activities', 'list-activities'),
    prompts.SEPARATOR,
    ('Exit', 'exit'),
]

LIST_ENDPOINTS = {
    'list-active': 'timesheets/active',
    'list-recent': 'timesheets/recent',
    'list-projects': 'projects',
    'list-activities': 'activities',
}

def run_choice(choice: str, client: KimaiClient, printer: ListPrinter) -> None:
    """Run the operation behind a main menu entry."""
    if choice == 'restart':
        commands.restart_command(client)
    elif choice == 'start':
        commands.interactive_start(client)
    elif choice == 'stop-all':
        commands.stop_command(client)
    elif choice == 'stop':
        commands.interactive_stop(client)
    elif choice in LIST_ENDPOINTS:
        commands.list_command(client, printer, LIST_ENDPOINTS[choice])
    else:
        raise ValueError(f"Unknown menu entry: {choice}")

def main_menu(client: KimaiClient, printer: ListPrinter) -> None:
    """Show the main menu until the user picks Exit.

    A failing operation is reported and the menu is shown again.
    """
    while True:
        print()
        choice = prompts.select_from_list('Select command', MAIN_MENU)
        logger.debug("selected answer: %s", choice)
        if choice is None or choice == 'exit':
            return
        try:
            run_choice(choice, client, printer)
        except KimaiError as e:
            print(f"[ERROR] {e}")
        except (KeyboardInterrupt, EOFError):
            print("Cancelled")
