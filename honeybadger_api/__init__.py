"""Honeybadger API client and models.

This package provides a synchronous client for the Honeybadger REST API (v2).

Client:
- HoneybadgerApi: API client with hooks for metrics and logging. Resource
  services (accounts, check_ins, comments, dashboards, deployments,
  environments, faults, projects, status_pages, teams, uptime) are attributes
- Models: Pydantic models for every resource and its request parameters
- ListResponse: Generic ``{"results", "links"}`` page envelope

Hook System:
- HoneybadgerApiCallContext: Context passed to hooks
- Hooks: pre/post/error hooks for metrics, logging, latency

Example:
    >>> from honeybadger_api import HoneybadgerApi
    >>> api = HoneybadgerApi(token="...")
    >>> for project in api.projects.list().results:
    ...     print(project.name)
"""

from honeybadger_api.client import (
    DEFAULT_BASE_URL,
    TIMEOUT,
    HoneybadgerApi,
)
from honeybadger_api.config import Settings
from honeybadger_api.errors import (
    APIError,
    DecodeError,
    HoneybadgerApiError,
    RequestBuildError,
    StructuredErrors,
    TextErrors,
)
from honeybadger_api.hooks import HoneybadgerApiCallContext, Hooks
from honeybadger_api.models import (
    Account,
    AccountInvitation,
    AccountInvitationParams,
    AccountUser,
    BacktraceEntry,
    CheckIn,
    CheckInBulkResult,
    CheckInBulkUpdateResponse,
    CheckInParams,
    Comment,
    Dashboard,
    DashboardParams,
    Deployment,
    DeploymentListOptions,
    Environment,
    EnvironmentParams,
    Fault,
    FaultListOptions,
    Notice,
    NoticeListOptions,
    Number,
    Outage,
    OutageListOptions,
    Project,
    Site,
    SiteParams,
    StatusPage,
    StatusPageParams,
    Team,
    TeamInvitation,
    TeamInvitationParams,
    TeamMember,
    UptimeCheck,
    UptimeCheckListOptions,
    User,
)
from honeybadger_api.pagination import ListResponse, PaginationLinks

__all__ = [
    "DEFAULT_BASE_URL",
    "TIMEOUT",
    "APIError",
    "Account",
    "AccountInvitation",
    "AccountInvitationParams",
    "AccountUser",
    "BacktraceEntry",
    "CheckIn",
    "CheckInBulkResult",
    "CheckInBulkUpdateResponse",
    "CheckInParams",
    "Comment",
    "Dashboard",
    "DashboardParams",
    "DecodeError",
    "Deployment",
    "DeploymentListOptions",
    "Environment",
    "EnvironmentParams",
    "Fault",
    "FaultListOptions",
    "HoneybadgerApi",
    "HoneybadgerApiCallContext",
    "HoneybadgerApiError",
    "Hooks",
    "ListResponse",
    "Notice",
    "NoticeListOptions",
    "Number",
    "Outage",
    "OutageListOptions",
    "PaginationLinks",
    "Project",
    "RequestBuildError",
    "Settings",
    "Site",
    "SiteParams",
    "StatusPage",
    "StatusPageParams",
    "StructuredErrors",
    "Team",
    "TeamInvitation",
    "TeamInvitationParams",
    "TeamMember",
    "TextErrors",
    "UptimeCheck",
    "UptimeCheckListOptions",
    "User",
]
