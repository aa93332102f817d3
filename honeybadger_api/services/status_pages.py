"""Status pages."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import StatusPage, StatusPageParams
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class StatusPagesService(Service):
    """Status pages API (``/accounts/{account_id}/status_pages``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="status_pages.list", verb="GET", id=self.host
        )
    )
    def list(self, account_id: ResourceId) -> ListResponse[StatusPage]:
        return self._request(
            "GET", f"/accounts/{account_id}/status_pages", ListResponse[StatusPage]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="status_pages.get", verb="GET", id=self.host
        )
    )
    def get(self, account_id: ResourceId, status_page_id: ResourceId) -> StatusPage:
        return self._request(
            "GET", f"/accounts/{account_id}/status_pages/{status_page_id}", StatusPage
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="status_pages.create", verb="POST", id=self.host
        )
    )
    def create(self, account_id: ResourceId, params: StatusPageParams) -> StatusPage:
        return self._request(
            "POST",
            f"/accounts/{account_id}/status_pages",
            StatusPage,
            body={"status_page": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="status_pages.update", verb="POST", id=self.host
        )
    )
    def update(
        self,
        account_id: ResourceId,
        status_page_id: ResourceId,
        params: StatusPageParams,
    ) -> None:
        """Update a status page.

        The status page endpoint takes updates as POST, not PUT.
        """
        self._request(
            "POST",
            f"/accounts/{account_id}/status_pages/{status_page_id}",
            body={"status_page": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="status_pages.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, account_id: ResourceId, status_page_id: ResourceId) -> None:
        self._request("DELETE", f"/accounts/{account_id}/status_pages/{status_page_id}")
