"""ListPrinter class for printing API listings in the selected output mode."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Dict, Any, Optional
from tabulate import tabulate

from .measurement import Measurement
from ..config import ArgosSettings
from ..utils.format_utils import elapsed

logger = logging.getLogger(__name__)

NAMED_ENDPOINTS = ("projects", "activities")

@dataclass(frozen=True)
class OutputOptions:
    """Output flags given on the command line."""

    verbose: bool = False
    show_ids: bool = False
    argos: bool = False
    argos_button: bool = False

    @property
    def mode(self) -> str:
        """Get the effective output mode.

        Exactly one mode applies: verbose, then id, then argos, then
        argosbutton. With both argos flags set only the argos output is
        printed, including for an empty list.
        """
        if self.verbose:
            return "verbose"
        if self.show_ids:
            return "id"
        if self.argos:
            return "argos"
        if self.argos_button:
            return "argosbutton"
        return "default"

class ListPrinter:
    """Class for turning API listings into terminal output."""

    def __init__(self, options: OutputOptions, argos: Optional[ArgosSettings] = None):
        """Initialize a ListPrinter.

        Args:
            options: Output flags
            argos: Argos/BitBar settings used by the status-bar modes (optional)
        """
        self.options = options
        self.argos = argos or ArgosSettings()

    def render(self, elements: List[Dict[str, Any]], endpoint: str,
               now: Optional[datetime] = None) -> List[str]:
        """Render a listing as output lines.

        Args:
            elements: Elements as returned by the API
            endpoint: Endpoint the elements came from; selects the layout
            now: Reference time for running measurements (optional)

        Returns:
            Output lines
        """
        if len(elements) > 1:
            logger.debug("%d results:", len(elements))
        elif not elements:
            logger.debug("No results")
        else:
            logger.debug("One result:")

        mode = self.options.mode
        if not elements:
            # Status-bar scripts always need a line to show
            if mode == "argos":
                return ["No active measurements"]
            if mode == "argosbutton":
                return ["Kimai2 |"]
            return []

        if endpoint in NAMED_ENDPOINTS:
            return [self._named_line(e, idx + 1, mode) for idx, e in enumerate(elements)]

        lines = []
        for idx, e in enumerate(elements):
            m = Measurement(e, idx + 1)
            if mode == "verbose":
                if len(elements) > 1:
                    lines.append(f"{m.index}:")
                table = tabulate(m.to_rows(now), tablefmt="plain")
                lines.extend("   " + row for row in table.splitlines())
            else:
                line = self._measurement_line(m, endpoint, mode, now)
                if line is not None:
                    lines.append(line)
        return lines

    def print_list(self, elements: List[Dict[str, Any]], endpoint: str) -> None:
        """Print a listing to stdout.

        Args:
            elements: Elements as returned by the API
            endpoint: Endpoint the elements came from
        """
        for line in self.render(elements, endpoint):
            print(line)

    def _named_line(self, element: Dict[str, Any], index: int, mode: str) -> str:
        name = element.get("name", "")
        if mode == "verbose":
            return f"{index}: {name} (id:{element.get('id')})"
        if mode == "id":
            return f"{element.get('id')}: {name}"
        return name

    def _measurement_line(self, m: Measurement, endpoint: str, mode: str,
                          now: Optional[datetime]) -> Optional[str]:
        if mode == "id":
            return f"{m.id}: {m.label}"
        if mode == "argos":
            if endpoint == "timesheets/recent":
                return (f"--{m.project_name}, {m.activity_name} | bash={self.argos.kimai_path} "
                        f"param1=restart param2={m.id} terminal=false refresh=true")
            if endpoint == "timesheets/active":
                return (f"{m.duration_hm(now)} {m.project_name}, {m.activity_name} | "
                        f"bash={self.argos.kimai_path} param1=stop param2={m.id} "
                        f"terminal=false refresh=true")
            return None
        if mode == "argosbutton":
            # The button counts from begin to now, finished or not
            return (f"{elapsed(m.begin, now=now)} {m.project_name}, {m.activity_name} "
                    f"| length={self.argos.button_length}")
        if m.is_active:
            return f"{m.duration_hm(now)} {m.label}"
        return m.label
