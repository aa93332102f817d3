"""Teams, team members and team invitations."""

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import (
    Team,
    TeamInvitation,
    TeamInvitationParams,
    TeamMember,
)
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class TeamsService(Service):
    """Teams API (``/teams``).

    Teams belong to an account; listing and creating them take the account
    as ``account_id`` query parameter.
    """

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="teams.list", verb="GET", id=self.host
        )
    )
    def list(self, account_id: ResourceId) -> ListResponse[Team]:
        return self._request(
            "GET", "/teams", ListResponse[Team], params={"account_id": account_id}
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="teams.get", verb="GET", id=self.host
        )
    )
    def get(self, team_id: ResourceId) -> Team:
        return self._request("GET", f"/teams/{team_id}", Team)

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="teams.create", verb="POST", id=self.host
        )
    )
    def create(self, account_id: ResourceId, name: str) -> Team:
        return self._request(
            "POST",
            "/teams",
            Team,
            body={"team": {"name": name}},
            params={"account_id": account_id},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="teams.update", verb="PUT", id=self.host
        )
    )
    def update(self, team_id: ResourceId, name: str) -> None:
        self._request("PUT", f"/teams/{team_id}", body={"team": {"name": name}})

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="teams.delete", verb="DELETE", id=self.host
        )
    )
    def delete(self, team_id: ResourceId) -> None:
        self._request("DELETE", f"/teams/{team_id}")

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_members.list", verb="GET", id=self.host
        )
    )
    def list_members(self, team_id: ResourceId) -> ListResponse[TeamMember]:
        return self._request(
            "GET", f"/teams/{team_id}/team_members", ListResponse[TeamMember]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_members.update", verb="PUT", id=self.host
        )
    )
    def update_member(
        self, team_id: ResourceId, member_id: ResourceId, admin: bool
    ) -> None:
        """Grant or revoke team admin permissions of a member."""
        self._request(
            "PUT",
            f"/teams/{team_id}/team_members/{member_id}",
            body={"team_member": {"admin": admin}},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_members.delete", verb="DELETE", id=self.host
        )
    )
    def remove_member(self, team_id: ResourceId, member_id: ResourceId) -> None:
        self._request("DELETE", f"/teams/{team_id}/team_members/{member_id}")

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_invitations.list", verb="GET", id=self.host
        )
    )
    def list_invitations(self, team_id: ResourceId) -> ListResponse[TeamInvitation]:
        return self._request(
            "GET", f"/teams/{team_id}/team_invitations", ListResponse[TeamInvitation]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_invitations.get", verb="GET", id=self.host
        )
    )
    def get_invitation(
        self, team_id: ResourceId, invitation_id: ResourceId
    ) -> TeamInvitation:
        return self._request(
            "GET", f"/teams/{team_id}/team_invitations/{invitation_id}", TeamInvitation
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_invitations.create", verb="POST", id=self.host
        )
    )
    def create_invitation(
        self, team_id: ResourceId, params: TeamInvitationParams
    ) -> TeamInvitation:
        """Invite someone to a team.

        Args:
            team_id: Team ID
            params: Invitee email, admin flag and an optional personal message

        Returns:
            The created TeamInvitation
        """
        return self._request(
            "POST",
            f"/teams/{team_id}/team_invitations",
            TeamInvitation,
            body={"team_invitation": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_invitations.update", verb="PUT", id=self.host
        )
    )
    def update_invitation(
        self,
        team_id: ResourceId,
        invitation_id: ResourceId,
        params: TeamInvitationParams,
    ) -> None:
        self._request(
            "PUT",
            f"/teams/{team_id}/team_invitations/{invitation_id}",
            body={"team_invitation": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="team_invitations.delete", verb="DELETE", id=self.host
        )
    )
    def delete_invitation(self, team_id: ResourceId, invitation_id: ResourceId) -> None:
        self._request("DELETE", f"/teams/{team_id}/team_invitations/{invitation_id}")
