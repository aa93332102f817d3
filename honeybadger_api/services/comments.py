"""Comments on faults."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import Comment
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class CommentsService(Service):
    """Comments API (``/projects/{project_id}/faults/{fault_id}/comments``)."""

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="comments.list", verb="GET", id=self.host
        )
    )
    def list(self, project_id: ResourceId, fault_id: ResourceId) -> ListResponse[Comment]:
        return self._request(
            "GET",
            f"/projects/{project_id}/faults/{fault_id}/comments",
            ListResponse[Comment],
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="comments.get", verb="GET", id=self.host
        )
    )
    def get(
        self, project_id: ResourceId, fault_id: ResourceId, comment_id: ResourceId
    ) -> Comment:
        return self._request(
            "GET",
            f"/projects/{project_id}/faults/{fault_id}/comments/{comment_id}",
            Comment,
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="comments.create", verb="POST", id=self.host
        )
    )
    def create(self, project_id: ResourceId, fault_id: ResourceId, body: str) -> Comment:
        """Add a comment to a fault.

        Args:
            project_id: Project ID
            fault_id: Fault ID
            body: Comment text (Markdown)

        Returns:
            The created Comment
        """
        return self._request(
            "POST",
            f"/projects/{project_id}/faults/{fault_id}/comments",
            Comment,
            body={"comment": {"body": body}},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="comments.update", verb="PUT", id=self.host
        )
    )
    def update(
        self,
        project_id: ResourceId,
        fault_id: ResourceId,
        comment_id: ResourceId,
        body: str,
    ) -> None:
        """Replace the text of a comment. The API answers 204 No Content."""
        self._request(
            "PUT",
            f"/projects/{project_id}/faults/{fault_id}/comments/{comment_id}",
            body={"comment": {"body": body}},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="comments.delete", verb="DELETE", id=self.host
        )
    )
    def delete(
        self, project_id: ResourceId, fault_id: ResourceId, comment_id: ResourceId
    ) -> None:
        self._request(
            "DELETE", f"/projects/{project_id}/faults/{fault_id}/comments/{comment_id}"
        )
