"""Measurement class for representing Kimai timesheet entries."""
from datetime import datetime
from typing import Optional, Dict, Any

from ..utils.date_utils import parse_timestamp
from ..utils.format_utils import elapsed

class Measurement:
    """Class representing a Kimai timesheet entry."""

    def __init__(self, entry_data: Dict[str, Any], index: int = 1):
        """Initialize a Measurement.

        Args:
            entry_data: Raw timesheet data from the Kimai API
            index: Position of this entry in the listing (1-based)
        """
        self.raw_data = entry_data
        self.index = index
        self.id = entry_data.get("id")

        project = entry_data.get("project") or {}
        activity = entry_data.get("activity") or {}
        customer = project.get("customer") if isinstance(project, dict) else None
        # Without full=true the server may return plain ids instead of objects
        if not isinstance(project, dict):
            project = {"id": project, "name": str(project)}
        if not isinstance(activity, dict):
            activity = {"id": activity, "name": str(activity)}
        if not isinstance(customer, dict):
            customer = {"id": customer, "name": "" if customer is None else str(customer)}

        self.project_id = project.get("id")
        self.project_name = project.get("name", "")
        self.customer_id = customer.get("id")
        self.customer_name = customer.get("name", "")
        self.activity_id = activity.get("id")
        self.activity_name = activity.get("name", "")

        self.begin = entry_data.get("begin") or ""
        self.end = entry_data.get("end") or ""

    @property
    def is_active(self) -> bool:
        """Whether the measurement is still running (no valid end time)."""
        return parse_timestamp(self.end) is None

    @property
    def label(self) -> str:
        """Get the project and activity as 'Project | Activity'."""
        return f"{self.project_name} | {self.activity_name}"

    def duration_hm(self, now: Optional[datetime] = None) -> str:
        """Get formatted duration.

        Running measurements are measured until now.

        Args:
            now: Reference time for running measurements (optional)

        Returns:
            Formatted duration (HH:MM)
        """
        if self.is_active:
            return elapsed(self.begin, now=now)
        return elapsed(self.begin, self.end)

    def to_rows(self, now: Optional[datetime] = None) -> list:
        """Convert to the rows of a verbose listing.

        Args:
            now: Reference time for running measurements (optional)

        Returns:
            List of [field, value] rows
        """
        return [
            ["Id:", self.id],
            ["Project:", f"{self.project_name} (id:{self.project_id})"],
            ["Customer:", f"{self.customer_name} (id:{self.customer_id})"],
            ["Activity:", f"{self.activity_name} (id:{self.activity_id})"],
            ["Begin:", self.begin],
            ["Duration:", self.duration_hm(now)],
        ]
