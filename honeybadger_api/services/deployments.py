"""Deployments (deploy tracking)."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import Deployment, DeploymentListOptions
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service, query_params


class DeploymentsService(Service):
    """Deployments API (``/projects/{project_id}/deploys``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="deployments.list", verb="GET", id=self.host
        )
    )
    def list(
        self, project_id: ResourceId, options: DeploymentListOptions | None = None
    ) -> ListResponse[Deployment]:
        """List the deployments of a project, newest first.

        Args:
            project_id: Project ID
            options: Optional filters (environment, local_username,
                created_after, created_before, limit)

        Returns:
            First page of deployments

        Example:
            >>> api = HoneybadgerApi(token="...")
            >>> page = api.deployments.list(
            ...     123, DeploymentListOptions(environment="production", limit=10)
            ... )
            >>> print([d.revision for d in page.results])
            ['abc123']
        """
        return self._request(
            "GET",
            f"/projects/{project_id}/deploys",
            ListResponse[Deployment],
            params=query_params(options),
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="deployments.get", verb="GET", id=self.host
        )
    )
    def get(self, project_id: ResourceId, deployment_id: ResourceId) -> Deployment:
        return self._request(
            "GET", f"/projects/{project_id}/deploys/{deployment_id}", Deployment
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="deployments.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, project_id: ResourceId, deployment_id: ResourceId) -> None:
        self._request("DELETE", f"/projects/{project_id}/deploys/{deployment_id}")
