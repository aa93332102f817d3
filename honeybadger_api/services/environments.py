"""Project environments."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import Environment, EnvironmentParams
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class EnvironmentsService(Service):
    """Environments API (``/projects/{project_id}/environments``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="environments.list", verb="GET", id=self.host
        )
    )
    def list(self, project_id: ResourceId) -> ListResponse[Environment]:
        return self._request(
            "GET", f"/projects/{project_id}/environments", ListResponse[Environment]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="environments.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId, environment_id: ResourceId) -> Environment:
        return self._request(
            "GET", f"/projects/{project_id}/environments/{environment_id}", Environment
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="environments.create", verb="POST", id=self.host
        )
    )
    def create(self, project_id: ResourceId, params: EnvironmentParams) -> Environment:
        """Create an environment.

        Args:
            project_id: Project ID
            params: Environment name and whether it sends notifications

        Returns:
            The created Environment
        """
        return self._request(
            "POST",
            f"/projects/{project_id}/environments",
            Environment,
            body={"environment": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="environments.update", verb="PUT", id=self.host
        )
    )
    def update(
        self,
        project_id: ResourceId,
        environment_id: ResourceId,
        params: EnvironmentParams,
    ) -> None:
        self._request(
            "PUT",
            f"/projects/{project_id}/environments/{environment_id}",
            body={"environment": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="environments.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, project_id: ResourceId, environment_id: ResourceId) -> None:
        self._request("DELETE", f"/projects/{project_id}/environments/{environment_id}")
