"""Shared plumbing for resource services."""

from typing import TYPE_CHECKING, Any

from honeybadger_api.hooks import Hooks
from honeybadger_api.models import HoneybadgerParams

if TYPE_CHECKING:
    from honeybadger_api.client import HoneybadgerApi

# Honeybadger identifiers are numeric for most resources and opaque strings
# for a few (dashboards, sites, notices).
type ResourceId = int | str


def query_params(options: HoneybadgerParams | None) -> dict[str, Any]:
    """Turn list options into query parameters.

    Unset or zero-valued fields (None, "", 0) are left out. Field declaration
    order is kept.
    """
    if options is None:
        return {}
    params: dict[str, Any] = {}
    for name, field_info in type(options).model_fields.items():
        value = getattr(options, name)
        if value is None or value == "" or value == 0:
            continue
        params[field_info.alias or name] = value
    return params


class Service:
    """Base class of the resource services bound to a HoneybadgerApi.

    A service builds paths and bodies and picks the decode target; the
    client does the rest.
    """

    def __init__(self, api: "HoneybadgerApi") -> None:
        self._api = api

    @property
    def _hooks(self) -> Hooks:
        return self._api._hooks  # noqa: SLF001

    @property
    def host(self) -> str:
        return self._api.base_url

    def _request(
        self,
        verb: str,
        path: str,
        target: Any = None,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        request = self._api.new_request(verb, path, body=body, params=params)
        return self._api.do(request, target)
