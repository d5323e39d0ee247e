"""Main module for the kimaiPy package."""
import sys
import logging
import argparse
from typing import List, Optional

from . import __version__
from . import commands
from .api.client import KimaiClient
from .config import Settings, load_settings
from .errors import KimaiError
from .reports.list_printer import ListPrinter, OutputOptions
from .ui import prompts
from .ui.menu import LIST_ENDPOINTS, main_menu

# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Command line client for the Kimai 2 time tracker. "
                    "For interactive mode start without any commands. "
                    "To generate the settings file start in interactive mode!",
        epilog="""
Examples:
    # Start a measurement by project and activity name
  kimaipy start "Website" "Design"
    ---
    # Stop all running measurements
  kimaipy stop
    ---
    # List recent measurements with their ids, then restart one
  kimaipy --id list-recent
  kimaipy restart 42
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="kimaipy"
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='verbose, longer logging')
    parser.add_argument('-i', '--id', action='store_true', help='show id of elements when listing')
    parser.add_argument('-b', '--argosbutton', action='store_true', help='argos/bitbar button output')
    parser.add_argument('-a', '--argos', action='store_true', help='argos/bitbar output')

    sub = parser.add_subparsers(dest='command', metavar='command')
    start = sub.add_parser('start', help='start selected project and activity')
    start.add_argument('project', nargs='?', help='project name')
    start.add_argument('activity', nargs='?', help='activity name')
    restart = sub.add_parser('restart', help='restart selected measurement')
    restart.add_argument('id', nargs='?', help='measurement id; pick from recent ones if omitted')
    stop = sub.add_parser('stop', help='stop all or selected measurement, [id] is optional')
    stop.add_argument('id', nargs='?', help='measurement id')
    sub.add_parser('list-active', help='list active measurements')
    sub.add_parser('list-recent', help='list recent measurements')
    sub.add_parser('list-projects', help='list all projects')
    sub.add_parser('list-activities', help='list all activities')
    sub.add_parser('url', help='prints the url of the server')
    return parser.parse_args(argv)

def setup_logging(verbose: bool) -> None:
    """Configure the root logger; --verbose shows debug output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

def output_options(args: argparse.Namespace) -> OutputOptions:
    return OutputOptions(
        verbose=args.verbose,
        show_ids=args.id,
        argos=args.argos,
        argos_button=args.argosbutton,
    )

def run_command(args: argparse.Namespace, settings: Settings) -> None:
    """Run the subcommand given on the command line.

    Args:
        args: Parsed arguments
        settings: Loaded settings
    """
    client = KimaiClient(settings.server)
    printer = ListPrinter(output_options(args), settings.argos)

    if args.command is None:
        main_menu(client, printer)
    elif args.command == 'url':
        print(settings.server.base_url)
    elif args.command in LIST_ENDPOINTS:
        commands.list_command(client, printer, LIST_ENDPOINTS[args.command])
    elif args.command == 'start':
        if args.project and args.activity:
            commands.start_command(client, args.project, args.activity)
        else:
            commands.interactive_start(client)
    elif args.command == 'restart':
        commands.restart_command(client, args.id)
    elif args.command == 'stop':
        commands.stop_command(client, args.id)

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(prompt=prompts.ask_for_settings)
        run_command(args, settings)
    except KimaiError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(130)

if __name__ == "__main__":
    main()
