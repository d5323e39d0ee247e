"""
KimaiClient: A client for interacting with the Kimai 2 API.
"""
import json
import logging
import requests
from typing import Optional, Dict, Any, List, Iterator

from ..config import ServerSettings
from ..errors import TransportError, ServerError, ParseError, NotFoundError
from ..utils.date_utils import now_iso
from ..utils.format_utils import sanitize_server_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15

class KimaiClient:
    """A client for interacting with the Kimai 2 API."""

    def __init__(self, server: ServerSettings, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the KimaiClient.

        Args:
            server: Connection settings (URL, username, API token)
            timeout: Seconds to wait for each request before giving up
        """
        self.server = server
        self.timeout = timeout
        self.base_url = sanitize_server_url(server.base_url) + "/api/"

    def api_call(self, method: str, endpoint: str, params: Optional[dict] = None,
                 body: Optional[dict] = None) -> Any:
        """Make a request to the Kimai API.

        Args:
            method: HTTP method ('GET', 'POST', 'PATCH', ...)
            endpoint: Path below /api/, e.g. 'timesheets/12/stop'
            params: Query parameters (optional)
            body: Request body, sent as JSON (optional)

        Returns:
            The parsed JSON response

        Raises:
            TransportError: If no response was received
            ParseError: If the response body is not JSON
            ServerError: If the server reports an error message
        """
        url = self.base_url + endpoint
        headers = {
            "X-AUTH-USER": self.server.username,
            "X-AUTH-TOKEN": self.server.api_token,
        }
        data = None
        if body is not None:
            data = json.dumps(body)
            headers["Content-Type"] = "application/json"

        logger.debug("calling kimai: %s %s params=%s body=%s", method, url, params, body)
        try:
            resp = requests.request(method, url, headers=headers, params=params,
                                    data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(e) from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise ParseError(resp.status_code, resp.text) from e
        logger.debug("response %s: %s", resp.status_code, payload)

        if isinstance(payload, dict) and "message" in payload:
            raise ServerError(payload.get("code"), payload["message"])
        return payload

    def list(self, endpoint: str, filter: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """List the elements of an endpoint.

        Args:
            endpoint: 'projects', 'activities', 'timesheets/active' or 'timesheets/recent'
            filter: Query filter, e.g. {'project': 1} (optional)

        Returns:
            List of elements as returned by the server
        """
        return self.api_call("GET", endpoint, params=filter)

    def find_id(self, endpoint: str, name: str) -> Any:
        """Find the id of a project or activity by its name.

        The comparison ignores case. When several elements share the name,
        the first one in server order wins.

        Args:
            endpoint: 'projects' or 'activities'
            name: Name to look for

        Returns:
            Id of the matching element

        Raises:
            NotFoundError: If no element has that name
        """
        wanted = name.lower()
        for element in self.list(endpoint):
            if str(element.get("name", "")).lower() == wanted:
                logger.debug("found %s '%s': id %s", endpoint, name, element.get("id"))
                return element["id"]
        raise NotFoundError(endpoint, name)

    def start(self, project_id: Any, activity_id: Any) -> Dict[str, Any]:
        """Start a new measurement now.

        Args:
            project_id: Project id
            activity_id: Activity id

        Returns:
            The created measurement
        """
        body = {
            "begin": now_iso(),
            "project": project_id,
            "activity": activity_id
        }
        return self.api_call("POST", "timesheets", body=body)

    def stop(self, measurement_id: Any) -> Dict[str, Any]:
        """Stop a running measurement.

        Args:
            measurement_id: Measurement id

        Returns:
            The stopped measurement
        """
        return self.api_call("PATCH", f"timesheets/{measurement_id}/stop")

    def stop_all(self) -> Iterator[Dict[str, Any]]:
        """Stop all active measurements, one after the other.

        Yields:
            Each stopped measurement, in the order the server listed them
        """
        active = self.list("timesheets/active")
        logger.debug("%d active measurements", len(active))
        for element in active:
            yield self.stop(element["id"])

    def restart(self, measurement_id: Any) -> Dict[str, Any]:
        """Restart a measurement with a new begin time.

        Args:
            measurement_id: Id of a (usually finished) measurement

        Returns:
            The measurement created by the server
        """
        return self.api_call("PATCH", f"timesheets/{measurement_id}/restart")
