"""Uptime monitoring: sites, outages and uptime checks."""

from __future__ import annotations

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import (
    Outage,
    OutageListOptions,
    Site,
    SiteParams,
    UptimeCheck,
    UptimeCheckListOptions,
)
from honeybadger_api.services.base import ResourceId, Service, query_params


class UptimeService(Service):
    """Uptime API (``/projects/{project_id}/sites``).

    All list endpoints of this API return bare JSON arrays.
    """

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="sites.list", verb="GET", id=self.host
        )
    )
    def list(self, project_id: ResourceId) -> list[Site]:
        return self._request("GET", f"/projects/{project_id}/sites", list[Site])

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="sites.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId, site_id: ResourceId) -> Site:
        return self._request("GET", f"/projects/{project_id}/sites/{site_id}", Site)

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="sites.create", verb="POST", id=self.host
        )
    )
    def create(self, project_id: ResourceId, params: SiteParams) -> Site:
        """Start monitoring a URL.

        Example:
            >>> api = HoneybadgerApi(token="...")
            >>> site = api.uptime.create(
            ...     123, SiteParams(name="Home", url="https://example.com", frequency=5)
            ... )
            >>> print(site.state)
            pending
        """
        return self._request(
            "POST", f"/projects/{project_id}/sites", Site, body={"site": params}
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="sites.update", verb="PUT", id=self.host
        )
    )
    def update(
        self, project_id: ResourceId, site_id: ResourceId, params: SiteParams
    ) -> Site:
        return self._request(
            "PUT",
            f"/projects/{project_id}/sites/{site_id}",
            Site,
            body={"site": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="sites.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, project_id: ResourceId, site_id: ResourceId) -> None:
        self._request("DELETE", f"/projects/{project_id}/sites/{site_id}")

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="outages.list", verb="GET", id=self.host
        )
    )
    def list_outages(
        self,
        project_id: ResourceId,
        site_id: ResourceId,
        options: OutageListOptions | None = None,
    ) -> list[Outage]:
        return self._request(
            "GET",
            f"/projects/{project_id}/sites/{site_id}/outages",
            list[Outage],
            params=query_params(options),
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="uptime_checks.list", verb="GET", id=self.host
        )
    )
    def list_uptime_checks(
        self,
        project_id: ResourceId,
        site_id: ResourceId,
        options: UptimeCheckListOptions | None = None,
    ) -> list[UptimeCheck]:
        """List individual uptime checks of a site, newest first.

        Args:
            project_id: Project ID
            site_id: Site ID
            options: Optional created_after / created_before / limit filters

        Returns:
            Uptime checks with location, duration and result
        """
        return self._request(
            "GET",
            f"/projects/{project_id}/sites/{site_id}/uptime_checks",
            list[UptimeCheck],
            params=query_params(options),
        )
