"""Honeybadger API client with hook system.

The client owns the request/response pipeline shared by every resource
service: request construction (URL resolution, JSON body, Basic auth),
response classification and decoding. Resource services only build paths
and pick the decode target.
"""

import contextlib
import contextvars
import copy
import functools
import time
from collections.abc import Generator, Mapping
from typing import Any, TypeVar

import httpx
import pydantic
import structlog
from prometheus_client import Counter, Histogram

from honeybadger_api.config import Settings
from honeybadger_api.errors import APIError, DecodeError, RequestBuildError
from honeybadger_api.hooks import (
    HoneybadgerApiCallContext,
    Hooks,
    invoke_with_hooks,
    with_hooks,
)
from honeybadger_api.json_utils import json_dumps
from honeybadger_api.pagination import ListResponse
from honeybadger_api.services import (
    AccountsService,
    CheckInsService,
    CommentsService,
    DashboardsService,
    DeploymentsService,
    EnvironmentsService,
    FaultsService,
    ProjectsService,
    StatusPagesService,
    TeamsService,
    UptimeService,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")

# Prometheus metrics
honeybadger_request = Counter(
    "honeybadger_api_requests_total",
    "Total number of Honeybadger API requests",
    ["method", "verb"],
)

honeybadger_request_duration = Histogram(
    "honeybadger_api_request_duration_seconds",
    "Honeybadger API request duration in seconds",
    ["method", "verb"],
)

# Local storage for latency tracking (tuple stack to support nested calls)
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)

# Per-context timeout override, see HoneybadgerApi.request_timeout()
_timeout_override: contextvars.ContextVar[float | None] = contextvars.ContextVar(
    f"{__name__}.timeout_override", default=None
)

DEFAULT_BASE_URL = "https://app.honeybadger.io"
API_VERSION_PREFIX = "/v2"
TIMEOUT = 30
USER_AGENT = "honeybadger-api-python"


def _metrics_hook(context: HoneybadgerApiCallContext) -> None:
    """Built-in Prometheus metrics hook."""
    honeybadger_request.labels(context.method, context.verb).inc()


def _latency_start_hook(_context: HoneybadgerApiCallContext) -> None:
    """Built-in hook to start latency measurement."""
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def _latency_end_hook(context: HoneybadgerApiCallContext) -> None:
    """Built-in hook to record latency measurement."""
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    honeybadger_request_duration.labels(context.method, context.verb).observe(
        duration
    )


def _request_log_hook(context: HoneybadgerApiCallContext) -> None:
    """Built-in hook for logging API requests."""
    logger.debug("API request", method=context.method, verb=context.verb, id=context.id)


def _error_log_hook(context: HoneybadgerApiCallContext) -> None:
    """Built-in hook for logging failed API requests."""
    logger.debug(
        "API request failed",
        method=context.method,
        verb=context.verb,
        id=context.id,
        exc_info=True,
    )


@functools.cache
def _type_adapter(target: Any) -> pydantic.TypeAdapter[Any]:
    return pydantic.TypeAdapter(target)


@with_hooks(
    hooks=Hooks(
        pre_hooks=[
            _metrics_hook,
            _request_log_hook,
            _latency_start_hook,
        ],
        post_hooks=[_latency_end_hook],
        error_hooks=[_error_log_hook],
    )
)
class HoneybadgerApi:
    """Honeybadger REST API (v2) client.

    Resource services are available as attributes, e.g. ``api.check_ins``.
    Every service method performs exactly one HTTP round trip.

    Hook System:
    - Always includes built-in hooks (metrics, logging, latency)
    - Supports additional custom hooks via hooks parameter
    - Hooks receive HoneybadgerApiCallContext with method, verb, id

    Example:
        >>> api = HoneybadgerApi(token="...")
        >>> for check_in in api.check_ins.list(project_id=123).results:
        ...     print(check_in.name)
    """

    # Set by @with_hooks decorator
    _hooks: Hooks

    def __init__(
        self,
        token: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = TIMEOUT,
        *,
        transport: httpx.BaseTransport | None = None,
        hooks: Hooks | None = None,  # noqa: ARG002 - Handled by @with_hooks decorator
    ) -> None:
        """Initialize Honeybadger API client.

        Args:
            token: Honeybadger personal auth token
            base_url: Honeybadger host URL (default: https://app.honeybadger.io)
            timeout: API request timeout in seconds (default: 30)
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
            hooks: Optional custom hooks to merge with built-in hooks.
                Built-in hooks (metrics, logging, latency) are automatically included.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._bind_services()

    @classmethod
    def from_settings(
        cls, settings: Settings, *, hooks: Hooks | None = None
    ) -> "HoneybadgerApi":
        """Create a client from Settings (HONEYBADGER_* environment variables)."""
        return cls(
            token=settings.api_token,
            base_url=settings.api_url,
            timeout=settings.api_timeout,
            hooks=hooks,
        )

    def _bind_services(self) -> None:
        self.accounts = AccountsService(self)
        self.check_ins = CheckInsService(self)
        self.comments = CommentsService(self)
        self.dashboards = DashboardsService(self)
        self.deployments = DeploymentsService(self)
        self.environments = EnvironmentsService(self)
        self.faults = FaultsService(self)
        self.projects = ProjectsService(self)
        self.status_pages = StatusPagesService(self)
        self.teams = TeamsService(self)
        self.uptime = UptimeService(self)

    def _replace(self, **changes: Any) -> "HoneybadgerApi":
        # shallow copy: the httpx client (connection pool) and hooks are shared
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        clone._bind_services()
        return clone

    def with_base_url(self, base_url: str) -> "HoneybadgerApi":
        """Return a copy of this client using another base URL."""
        return self._replace(base_url=base_url.rstrip("/"))

    def with_auth_token(self, token: str) -> "HoneybadgerApi":
        """Return a copy of this client using another auth token."""
        return self._replace(token=token)

    @staticmethod
    @contextlib.contextmanager
    def request_timeout(seconds: float) -> Generator[None, None, None]:
        """Apply a timeout to every request built inside the block.

        Example:
            >>> with HoneybadgerApi.request_timeout(5):
            ...     api.accounts.list()
        """
        token = _timeout_override.set(seconds)
        try:
            yield
        finally:
            _timeout_override.reset(token)

    def _resolve_url(self, path: str) -> httpx.URL:
        if path.startswith(("http://", "https://")):
            raw = path
        else:
            raw = f"{self.base_url}{API_VERSION_PREFIX}/{path.lstrip('/')}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"Invalid request URL {raw!r}: {e}") from e
        if url.scheme not in {"http", "https"} or not url.host:
            raise RequestBuildError(
                f"Invalid base URL {self.base_url!r}: expected an absolute http(s) URL"
            )
        return url

    def _resolve_link(self, link: str) -> httpx.URL:
        """Resolve a pagination link against the base URL.

        Links may be absolute or relative to the host (e.g. "/v2/teams?page=2").
        Links pointing to another origin than base_url are refused.
        """
        base = self._resolve_url("/")
        try:
            url = base.join(link)
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"Invalid pagination link {link!r}: {e}") from e
        if (url.scheme, url.host, url.port) != (base.scheme, base.host, base.port):
            raise RequestBuildError(
                f"Refusing pagination link {link!r}: not on {self.base_url!r}"
            )
        return url

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build an authenticated request. No network I/O happens here.

        Args:
            method: HTTP verb (GET, POST, PUT, DELETE)
            path: Path relative to <base_url>/v2 (e.g. "/projects/1/check_ins"),
                or an absolute URL such as a pagination link
            body: Optional JSON serializable body (pydantic models allowed)
            params: Optional query parameters
            timeout: Optional timeout in seconds for this request

        Returns:
            httpx.Request ready to be passed to do()

        Raises:
            RequestBuildError: Malformed base URL or non serializable body
        """
        url = self._resolve_url(path)
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        content = None
        if body is not None:
            try:
                content = json_dumps(body)
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"Cannot serialize request body: {e}") from e
            headers["Content-Type"] = "application/json"

        if timeout is None:
            timeout = _timeout_override.get()
        request = self._client.build_request(
            method,
            url,
            params=dict(params) if params else None,
            content=content,
            headers=headers,
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )
        # token as username, empty password
        return next(httpx.BasicAuth(self.token, "").sync_auth_flow(request))

    def do(self, request: httpx.Request, target: Any = None) -> Any:
        """Send a request and decode the response.

        Args:
            request: Request built by new_request()
            target: Type to decode a successful body into (pydantic model,
                list[Model], ListResponse[Model], ...). None skips decoding.

        Returns:
            Decoded body, or None if target is None

        Raises:
            APIError: Non-2xx response
            DecodeError: 2xx response not matching target
            httpx.HTTPError: Network failure or timeout
        """
        response = self._client.send(request)
        body = response.read()

        if not response.is_success:
            raise APIError.from_response(response.status_code, body)

        if target is None:
            return None

        try:
            return _type_adapter(target).validate_json(body)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Cannot decode {request.method} {request.url.path} response: {e}",
                status_code=response.status_code,
                body=body,
            ) from e

    @invoke_with_hooks(
        lambda self: HoneybadgerApiCallContext(
            method="pages.next", verb="GET", id=self.base_url
        )
    )
    def next_page(self, page: ListResponse[T]) -> ListResponse[T] | None:
        """Fetch the page after ``page``, or None if ``page`` is the last one.

        Fetches a single page; following further links is up to the caller.

        Raises:
            RequestBuildError: The next link points to another host
        """
        if not page.links.next:
            return None
        request = self.new_request("GET", str(self._resolve_link(page.links.next)))
        return self.do(request, type(page))

    def close(self) -> None:
        """Close the underlying httpx client (shared with with_* copies)."""
        self._client.close()

    def __enter__(self) -> "HoneybadgerApi":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
