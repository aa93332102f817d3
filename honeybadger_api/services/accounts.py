"""Accounts, account users and account invitations."""

from __future__ import annotations

from honeybadger_api.hooks import HoneybadgerApiCallContext, invoke_with_hooks
from honeybadger_api.models import (
    Account,
    AccountInvitation,
    AccountInvitationParams,
    AccountUser,
)
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services.base import ResourceId, Service


class AccountsService(Service):
    """Accounts API.

    Account users and invitations are returned as bare JSON arrays, not
    wrapped in a ``results`` envelope.
    """

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="accounts.list", verb="GET", id=self.host
        )
    )
    def list(self) -> ListResponse[Account]:
        """List the accounts the token has access to.

        Example:
            >>> api = HoneybadgerApi(token="...")
            >>> print([a.name for a in api.accounts.list().results])
            ['Acme']
        """
        return self._request("GET", "/accounts", ListResponse[Account])

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="accounts.get", verb="GET", id=self.host
        )
    )
    def get(self, account_id: ResourceId) -> Account:
        """Get an account, including quota and API stats."""
        return self._request("GET", f"/accounts/{account_id}", Account)

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_users.list", verb="GET", id=self.host
        )
    )
    def list_users(self, account_id: ResourceId) -> list[AccountUser]:
        return self._request("GET", f"/accounts/{account_id}/users", list[AccountUser])

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_users.get", verb="GET", id=self.host
        )
    )
    def get_user(self, account_id: ResourceId, user_id: ResourceId) -> AccountUser:
        return self._request(
            "GET", f"/accounts/{account_id}/users/{user_id}", AccountUser
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_users.update", verb="PUT", id=self.host
        )
    )
    def update_user(
        self, account_id: ResourceId, user_id: ResourceId, role: str
    ) -> AccountUser:
        """Change the role of an account user.

        Args:
            account_id: Account ID
            user_id: User ID
            role: "Member", "Billing", "Admin" or "Owner"

        Returns:
            The updated AccountUser
        """
        return self._request(
            "PUT",
            f"/accounts/{account_id}/users/{user_id}",
            AccountUser,
            body={"user": {"role": role}},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_users.delete", verb="DELETE", id=self.host
        )
    )
    def remove_user(self, account_id: ResourceId, user_id: ResourceId) -> None:
        self._request("DELETE", f"/accounts/{account_id}/users/{user_id}")

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_invitations.list", verb="GET", id=self.host
        )
    )
    def list_invitations(self, account_id: ResourceId) -> list[AccountInvitation]:
        return self._request(
            "GET", f"/accounts/{account_id}/invitations", list[AccountInvitation]
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_invitations.get", verb="GET", id=self.host
        )
    )
    def get_invitation(
        self, account_id: ResourceId, invitation_id: ResourceId
    ) -> AccountInvitation:
        return self._request(
            "GET",
            f"/accounts/{account_id}/invitations/{invitation_id}",
            AccountInvitation,
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_invitations.create", verb="POST", id=self.host
        )
    )
    def create_invitation(
        self, account_id: ResourceId, params: AccountInvitationParams
    ) -> AccountInvitation:
        """Invite a user to an account.

        Args:
            account_id: Account ID
            params: Invitation email, role and optional team IDs

        Returns:
            The created AccountInvitation (with its token)
        """
        return self._request(
            "POST",
            f"/accounts/{account_id}/invitations",
            AccountInvitation,
            body={"invitation": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_invitations.update", verb="PUT", id=self.host
        )
    )
    def update_invitation(
        self,
        account_id: ResourceId,
        invitation_id: ResourceId,
        params: AccountInvitationParams,
    ) -> AccountInvitation:
        return self._request(
            "PUT",
            f"/accounts/{account_id}/invitations/{invitation_id}",
            AccountInvitation,
            body={"invitation": params},
        )

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="account_invitations.delete", verb="DELETE", id=self.host
        )
    )
    def delete_invitation(
        self, account_id: ResourceId, invitation_id: ResourceId
    ) -> None:
        self._request("DELETE", f"/accounts/{account_id}/invitations/{invitation_id}")
