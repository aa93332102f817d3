"""Pydantic models for the Honeybadger API.

- All response models are frozen (thread-safe, never mutated by the client)
- Fields are optional where the API sends partial responses
- Identifiers the API emits both as numbers and strings are ``int | str``
- Parameter models are serialized without None fields
"""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, model_validator

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_number(value: Any) -> int:
    """Accept a JSON integer or a JSON string holding a base 10 integer."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _NUMBER_RE.fullmatch(value):
        return int(value)
    raise ValueError(f"Number: cannot parse {value!r} as integer")


# Backtrace line and column numbers are sent as numbers or numeric strings
# depending on the notifier that reported the error.
Number = Annotated[int, PlainValidator(_parse_number)]


class HoneybadgerModel(BaseModel):
    """Base for response models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null means "not set": fall back to the field default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class HoneybadgerParams(BaseModel):
    """Base for request parameter and query option models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# --- Users & Accounts ---


class User(HoneybadgerModel):
    id: int | None = None
    email: str = ""
    name: str = ""


class Account(HoneybadgerModel):
    """A Honeybadger account.

    ``quota_consumed`` and ``api_stats`` are only included when fetching a
    single account.
    """

    id: int | str
    email: str = ""
    name: str = ""
    active: bool | None = None
    parked: bool | None = None
    quota_consumed: float | None = None
    api_stats: dict[str, Any] | None = None


class AccountUser(HoneybadgerModel):
    id: int
    role: str = ""
    name: str = ""
    email: str = ""


class AccountInvitation(HoneybadgerModel):
    id: int
    token: str = ""
    email: str = ""
    role: str = ""
    team_ids: list[int] = Field(default_factory=list)
    created_at: datetime | None = None
    accepted_at: datetime | None = None


class AccountInvitationParams(HoneybadgerParams):
    email: str | None = None
    role: str | None = None
    team_ids: list[int] | None = None


# --- Check-ins ---


class CheckIn(HoneybadgerModel):
    """A scheduled heartbeat monitor.

    ``report_period`` is set for simple schedules, ``cron_schedule`` for
    cron schedules.
    """

    id: int | str
    name: str = ""
    slug: str = ""
    schedule_type: str = ""
    report_period: str | None = None
    grace_period: str | None = None
    cron_schedule: str | None = None
    cron_timezone: str | None = None
    project_id: int | None = None
    created_at: datetime | None = None
    last_check_in_at: datetime | None = None


class CheckInParams(HoneybadgerParams):
    name: str | None = None
    slug: str | None = None
    schedule_type: str | None = None
    report_period: str | None = None
    grace_period: str | None = None
    cron_schedule: str | None = None
    cron_timezone: str | None = None


class CheckInBulkResult(HoneybadgerModel):
    success: bool
    id: int | str | None = None
    slug: str = ""
    error: str = ""


class CheckInBulkUpdateResponse(HoneybadgerModel):
    create: list[CheckInBulkResult] = Field(default_factory=list)
    update: list[CheckInBulkResult] = Field(default_factory=list)
    delete: list[CheckInBulkResult] = Field(default_factory=list)


# --- Comments ---


class Comment(HoneybadgerModel):
    """A comment on a fault.

    ``author`` is a user object for comments written through the UI and a
    plain name (possibly empty) for some system generated events.
    """

    id: int
    fault_id: int | None = None
    event: str = ""
    source: str = ""
    notices_count: int = 0
    created_at: datetime | None = None
    author: User | str | None = None
    body: str = ""


# --- Dashboards ---


class Dashboard(HoneybadgerModel):
    """A Honeybadger Insights dashboard."""

    id: str
    title: str = ""
    widgets: list[dict[str, Any]] = Field(default_factory=list)
    is_default: bool = False
    shared: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    project_id: int | None = None


class DashboardParams(HoneybadgerParams):
    title: str
    widgets: list[dict[str, Any]] = Field(default_factory=list)
    default_ts: str | None = None


# --- Deployments ---


class Deployment(HoneybadgerModel):
    id: int | None = None
    created_at: datetime | None = None
    environment: str = ""
    local_username: str = ""
    project_id: int | None = None
    repository: str = ""
    revision: str = ""


class DeploymentListOptions(HoneybadgerParams):
    environment: str = ""
    local_username: str = ""
    created_after: int = Field(0, description="Unix timestamp")
    created_before: int = Field(0, description="Unix timestamp")
    limit: int = Field(0, description="Max 25")


# --- Environments ---


class Environment(HoneybadgerModel):
    id: int
    project_id: int | None = None
    name: str = ""
    notifications: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EnvironmentParams(HoneybadgerParams):
    name: str | None = None
    notifications: bool | None = None


# --- Status pages ---


class StatusPage(HoneybadgerModel):
    id: int | str
    name: str = ""
    account_id: int | str | None = None
    domain: str | None = None
    url: str = ""
    created_at: datetime | None = None
    domain_verified_at: datetime | None = None
    sites: list[str] = Field(default_factory=list, description="Site IDs")
    check_ins: list[str] = Field(default_factory=list, description="Check-in slugs")
    hide_branding: bool | None = None
    features: dict[str, Any] | None = None


class StatusPageParams(HoneybadgerParams):
    name: str | None = None
    domain: str | None = None
    sites: list[str] | None = None
    check_ins: list[str] | None = None
    hide_branding: bool | None = None
    features: dict[str, Any] | None = None


# --- Teams ---


class Team(HoneybadgerModel):
    id: int
    name: str = ""
    account_id: int | str | None = None
    created_at: datetime | None = None


class TeamMember(HoneybadgerModel):
    id: int
    name: str = ""
    email: str = ""
    admin: bool = False


class TeamInvitation(HoneybadgerModel):
    id: int
    token: str = ""
    email: str = ""
    admin: bool = False
    created_at: datetime | None = None
    accepted_at: datetime | None = None
    message: str | None = None


class TeamInvitationParams(HoneybadgerParams):
    email: str | None = None
    admin: bool | None = None
    message: str | None = None


# --- Uptime ---


class Site(HoneybadgerModel):
    """An uptime monitoring site."""

    id: str
    active: bool = True
    frequency: int | None = None
    last_checked_at: datetime | None = None
    match: str | None = None
    match_type: str = ""
    name: str = ""
    state: str = ""
    url: str = ""


class SiteParams(HoneybadgerParams):
    """Parameters for creating or updating an uptime site.

    Attributes:
        frequency: Check frequency in minutes (1, 5 or 15)
        match_type: "success", "exact", "include" or "exclude"
        request_headers: List of {"key": ..., "value": ...} dicts
        locations: Virginia, Oregon, Frankfurt, Singapore, London
        timeout: Request timeout in seconds (30-120)
        outage_threshold: Failed checks before an outage is reported
    """

    name: str | None = None
    url: str | None = None
    frequency: int | None = None
    match: str | None = None
    match_type: str | None = None
    request_method: str | None = None
    request_body: str | None = None
    request_headers: list[dict[str, str]] | None = None
    locations: list[str] | None = None
    validate_ssl: bool | None = None
    timeout: int | None = None
    outage_threshold: int | None = None
    active: bool | None = None


class Outage(HoneybadgerModel):
    down_at: datetime | None = None
    up_at: datetime | None = None
    created_at: datetime | None = None
    status: int | None = None
    reason: str = ""
    headers: dict[str, Any] = Field(default_factory=dict)


class UptimeCheck(HoneybadgerModel):
    created_at: datetime | None = None
    duration: int = Field(0, description="Milliseconds")
    location: str = ""
    up: bool = False


class OutageListOptions(HoneybadgerParams):
    created_after: int = Field(0, description="Unix timestamp")
    created_before: int = Field(0, description="Unix timestamp")
    limit: int = Field(0, description="1-25, default 25")


class UptimeCheckListOptions(HoneybadgerParams):
    created_after: int = Field(0, description="Unix timestamp")
    created_before: int = Field(0, description="Unix timestamp")
    limit: int = Field(0, description="1-25, default 25")


# --- Projects, faults & notices ---


class Project(HoneybadgerModel):
    id: int
    name: str = ""
    active: bool = True
    created_at: datetime | None = None
    earliest_notice_at: datetime | None = None
    last_notice_at: datetime | None = None
    environments: list[str] = Field(default_factory=list)
    fault_count: int = 0
    unresolved_fault_count: int = 0
    token: str = ""
    sites: list[Site] = Field(default_factory=list)
    teams: list[Team] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)


class Fault(HoneybadgerModel):
    """A grouped error class.

    ``notices_count_in_range`` is only present when a search query narrows
    the notice count.
    """

    id: int
    action: str | None = None
    assignee: User | None = None
    comments_count: int = 0
    component: str | None = None
    created_at: datetime | None = None
    environment: str = ""
    ignored: bool = False
    klass: str = ""
    last_notice_at: datetime | None = None
    message: str = ""
    notices_count: int = 0
    notices_count_in_range: int | None = None
    project_id: int | None = None
    resolved: bool = False
    tags: list[str] = Field(default_factory=list)
    url: str = ""


class FaultListOptions(HoneybadgerParams):
    q: str = Field("", description="Search query")
    created_after: int = Field(0, description="Unix timestamp")
    occurred_after: int = Field(0, description="Unix timestamp")
    occurred_before: int = Field(0, description="Unix timestamp")
    limit: int = Field(0, description="Max 25")
    order: str = Field("", description='"recent" or "frequent"')


class NoticeListOptions(HoneybadgerParams):
    created_after: int = Field(0, description="Unix timestamp")
    created_before: int = Field(0, description="Unix timestamp")
    limit: int = Field(0, description="Max 25")


class BacktraceEntry(HoneybadgerModel):
    number: Number
    column: Number | None = None
    file: str = ""
    method: str = ""
    class_: str = Field("", alias="class")
    type: str = ""
    args: list[Any] = Field(default_factory=list)
    source: dict[str, Any] = Field(default_factory=dict)
    context: str = ""


class NoticeEnvironment(HoneybadgerModel):
    environment_name: str = ""
    hostname: str = ""
    project_root: Any = None  # string or object, depending on the notifier
    revision: str | None = None
    stats: dict[str, Any] = Field(default_factory=dict)
    time: str = ""
    pid: int | None = None


class NoticeRequest(HoneybadgerModel):
    action: str | None = None
    component: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)
    params: dict[str, Any] = Field(default_factory=dict)
    session: dict[str, Any] = Field(default_factory=dict)
    url: str | None = None
    user: dict[str, Any] = Field(default_factory=dict)


class Notice(HoneybadgerModel):
    """One occurrence of a fault."""

    id: str
    created_at: datetime | None = None
    environment: NoticeEnvironment = Field(default_factory=NoticeEnvironment)
    environment_name: str = ""
    cookies: dict[str, Any] = Field(default_factory=dict)
    fault_id: int | None = None
    url: str = ""
    message: str = ""
    web_environment: dict[str, Any] = Field(default_factory=dict)
    request: NoticeRequest = Field(default_factory=NoticeRequest)
    backtrace: list[BacktraceEntry] = Field(default_factory=list)
    application_trace: list[BacktraceEntry] = Field(default_factory=list)
    deploy: dict[str, Any] | None = None
