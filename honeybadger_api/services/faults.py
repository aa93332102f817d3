"""Faults and their notices."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import Fault, FaultListOptions, Notice, NoticeListOptions
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service, query_params


class FaultsService(Service):
    """Faults API (``/projects/{project_id}/faults``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="faults.list", verb="GET", id=self.host
        )
    )
    def list(
        self, project_id: ResourceId, options: FaultListOptions | None = None
    ) -> ListResponse[Fault]:
        """List the faults of a project.

        Args:
            project_id: Project ID
            options: Optional search query, time filters, limit and order
                ("recent" or "frequent")

        Returns:
            First page of faults
        """
        return self._request(
            "GET",
            f"/projects/{project_id}/faults",
            ListResponse[Fault],
            params=query_params(options),
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="faults.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId, fault_id: ResourceId) -> Fault:
        return self._request("GET", f"/projects/{project_id}/faults/{fault_id}", Fault)

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="notices.list", verb="GET", id=self.host
        )
    )
    def list_notices(
        self,
        project_id: ResourceId,
        fault_id: ResourceId,
        options: NoticeListOptions | None = None,
    ) -> ListResponse[Notice]:
        return self._request(
            "GET",
            f"/projects/{project_id}/faults/{fault_id}/notices",
            ListResponse[Notice],
            params=query_params(options),
        )
