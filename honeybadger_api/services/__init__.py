from honeybadger_api.services.accounts import AccountsService
from honeybadger_api.services.base import ResourceId, Service, query_params
from honeybadger_api.services.check_ins import CheckInsService
from honeybadger_api.services.comments import CommentsService
from honeybadger_api.services.dashboards import DashboardsService
from honeybadger_api.services.deployments import DeploymentsService
from honeybadger_api.services.environments import EnvironmentsService
from honeybadger_api.services.faults import FaultsService
from honeybadger_api.services.projects import ProjectsService
from honeybadger_api.services.status_pages import StatusPagesService
from honeybadger_api.services.teams import TeamsService
from honeybadger_api.services.uptime import UptimeService

__all__ = [
    "AccountsService",
    "CheckInsService",
    "CommentsService",
    "DashboardsService",
    "DeploymentsService",
    "EnvironmentsService",
    "FaultsService",
    "ProjectsService",
    "ResourceId",
    "Service",
    "StatusPagesService",
    "TeamsService",
    "UptimeService",
    "query_params",
]
