"""Commands shared by the scripted CLI and the interactive menu.

Every command receives the client and the list printer it works with; results
are printed as each request completes.
"""
import logging
from typing import Any, Optional

from .api.client import KimaiClient
from .reports.list_printer import ListPrinter
from .ui import prompts

logger = logging.getLogger(__name__)

def list_command(client: KimaiClient, printer: ListPrinter, endpoint: str) -> None:
    """Print the elements of an endpoint."""
    printer.print_list(client.list(endpoint), endpoint)

def start_command(client: KimaiClient, project: str, activity: str) -> None:
    """Start a measurement for the project and activity with the given names.

    Args:
        client: API client
        project: Project name (case-insensitive)
        activity: Activity name (case-insensitive)
    """
    project_id = client.find_id("projects", project)
    activity_id = client.find_id("activities", activity)
    started = client.start(project_id, activity_id)
    print(f"Started: {started.get('id')}")

def interactive_start(client: KimaiClient) -> None:
    """Pick a project, then one of its activities, and start a measurement."""
    project = prompts.autocomplete_select(client.list("projects"), "Select project")
    if project is None:
        print("No projects found")
        return
    activities = client.list("activities", filter={"project": project["id"]})
    activity = prompts.autocomplete_select(activities, "Select activity")
    if activity is None:
        print(f"No activities found for {project['name']}")
        return
    logger.debug("selected project %s, activity %s", project["id"], activity["id"])
    started = client.start(project["id"], activity["id"])
    print(f"Started: {started.get('id')}")

def restart_command(client: KimaiClient, measurement_id: Optional[Any] = None) -> None:
    """Restart a measurement; without an id, pick one of the recent measurements."""
    if measurement_id is None:
        recent = client.list("timesheets/recent")
        if not recent:
            print("No recent measurements")
            return
        measurement_id = prompts.select_measurement(recent)
        if measurement_id is None:
            return
    restarted = client.restart(measurement_id)
    print(f"Restarted: {restarted.get('id')}")

def stop_command(client: KimaiClient, measurement_id: Optional[Any] = None) -> None:
    """Stop one measurement, or all active measurements when no id is given."""
    if measurement_id is not None:
        stopped = client.stop(measurement_id)
        print(f"Stopped: {stopped.get('id')}")
        return
    count = 0
    for stopped in client.stop_all():
        count += 1
        print(f"Stopped: {stopped.get('id')}")
    if not count:
        print("No active measurements")

def interactive_stop(client: KimaiClient) -> None:
    """Pick one of the active measurements and stop it."""
    active = client.list("timesheets/active")
    if not active:
        print("No active measurements")
        return
    measurement_id = prompts.select_measurement(active)
    if measurement_id is not None:
        stop_command(client, measurement_id)
