"""Check-ins (scheduled heartbeat monitors)."""

from collections.abc import Sequence

import structlog

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import CheckIn, CheckInBulkUpdateResponse, CheckInParams
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service

logger = structlog.get_logger(__name__)


class CheckInsService(Service):
    """Check-ins API (``/projects/{project_id}/check_ins``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="check_ins.list", verb="GET", id=self.host
        )
    )
    def list(self, project_id: ResourceId) -> ListResponse[CheckIn]:
        """List the check-ins of a project.

        Example:
            >>> api = HoneybadgerApi(token="...")
            >>> page = api.check_ins.list(project_id=123)
            >>> print([c.slug for c in page.results])
            ['daily-backup']
        """
        return self._request(
            "GET", f"/projects/{project_id}/check_ins", ListResponse[CheckIn]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="check_ins.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId, check_in_id: ResourceId) -> CheckIn:
        return self._request(
            "GET", f"/projects/{project_id}/check_ins/{check_in_id}", CheckIn
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="check_ins.create", verb="POST", id=self.host
        )
    )
    def create(self, project_id: ResourceId, params: CheckInParams) -> CheckIn:
        """Create a check-in.

        Args:
            project_id: Project ID
            params: Check-in definition. Simple schedules set report_period,
                cron schedules set cron_schedule (and optionally cron_timezone).

        Returns:
            The created CheckIn
        """
        return self._request(
            "POST",
            f"/projects/{project_id}/check_ins",
            CheckIn,
            body={"check_in": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="check_ins.update", verb="PUT", id=self.host
        )
    )
    def update(
        self, project_id: ResourceId, check_in_id: ResourceId, params: CheckInParams
    ) -> CheckIn:
        return self._request(
            "PUT",
            f"/projects/{project_id}/check_ins/{check_in_id}",
            CheckIn,
            body={"check_in": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="check_ins.bulk_update", verb="PUT", id=self.host
        )
    )
    def bulk_update(
        self, project_id: ResourceId, check_ins: Sequence[CheckInParams]
    ) -> CheckInBulkUpdateResponse:
        """Replace all check-ins of a project with ``check_ins``.

        Check-ins matched by slug are updated, unknown ones are created and
        existing check-ins missing from ``check_ins`` are deleted. An empty
        sequence deletes every check-in of the project.

        Args:
            project_id: Project ID
            check_ins: The complete desired set of check-ins

        Returns:
            Per check-in results grouped by create, update and delete
        """
        if not check_ins:
            logger.warning(
                "Bulk check-in update without check-ins deletes all check-ins",
                project_id=project_id,
            )
        return self._request(
            "PUT",
            f"/projects/{project_id}/check_ins",
            CheckInBulkUpdateResponse,
            body={"check_ins": list(check_ins)},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="check_ins.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, project_id: ResourceId, check_in_id: ResourceId) -> None:
        self._request("DELETE", f"/projects/{project_id}/check_ins/{check_in_id}")
