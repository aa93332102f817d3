"""Projects."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import Project
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class ProjectsService(Service):
    """Projects API (``/projects``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="projects.list", verb="GET", id=self.host
        )
    )
    def list(self, account_id: ResourceId | None = None) -> ListResponse[Project]:
        """List projects, optionally limited to one account."""
        params = {"account_id": account_id} if account_id is not None else None
        return self._request("GET", "/projects", ListResponse[Project], params=params)

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="projects.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId) -> Project:
        return self._request("GET", f"/projects/{project_id}", Project)
