"""Insights dashboards."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import Dashboard, DashboardParams
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class DashboardsService(Service):
    """Dashboards API (``/projects/{project_id}/dashboards``).

    Widgets are passed through as plain dicts; the server validates them and
    answers 422 with a JSON pointer to the offending widget.
    """

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="dashboards.list", verb="GET", id=self.host
        )
    )
    def list(self, project_id: ResourceId) -> ListResponse[Dashboard]:
        return self._request(
            "GET", f"/projects/{project_id}/dashboards", ListResponse[Dashboard]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="dashboards.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId, dashboard_id: ResourceId) -> Dashboard:
        return self._request(
            "GET", f"/projects/{project_id}/dashboards/{dashboard_id}", Dashboard
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="dashboards.create", verb="POST", id=self.host
        )
    )
    def create(self, project_id: ResourceId, params: DashboardParams) -> Dashboard:
        return self._request(
            "POST",
            f"/projects/{project_id}/dashboards",
            Dashboard,
            body={"dashboard": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="dashboards.update", verb="PUT", id=self.host
        )
    )
    def update(
        self, project_id: ResourceId, dashboard_id: ResourceId, params: DashboardParams
    ) -> None:
        self._request(
            "PUT",
            f"/projects/{project_id}/dashboards/{dashboard_id}",
            body={"dashboard": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="dashboards.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, project_id: ResourceId, dashboard_id: ResourceId) -> None:
        self._request("DELETE", f"/projects/{project_id}/dashboards/{dashboard_id}")
