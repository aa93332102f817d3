"""Hook system for API clients.

Hooks are plain callables that receive a call context. They run around every
decorated API method:

- pre_hooks: before the call
- post_hooks: after the call, whether it succeeded or not
- error_hooks: when the call raises, before the exception propagates

Example:
    >>> @with_hooks(hooks=Hooks(pre_hooks=[metrics_hook]))
    ... class MyApi:
    ...     def __init__(self, hooks: Hooks | None = None) -> None: ...
    ...
    ...     @invoke_with_hooks(lambda self: MyContext(method="things.list"))
    ...     def things(self) -> list[str]: ...
"""

import contextlib
import functools
import inspect
from collections.abc import Callable, Generator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HoneybadgerApiCallContext:
    """Context information passed to API call hooks.

    Attributes:
        method: API method name (e.g., "check_ins.list")
        verb: HTTP verb (e.g., "GET")
        id: Honeybadger instance identifier (base URL)
    """

    method: str
    verb: str
    id: str


@dataclass(frozen=True)
class Hooks:
    """Collection of hooks to run around API calls."""

    pre_hooks: Sequence[Callable[[Any], None]] = field(default_factory=list)
    post_hooks: Sequence[Callable[[Any], None]] = field(default_factory=list)
    error_hooks: Sequence[Callable[[Any], None]] = field(default_factory=list)

    def merge(self, other: "Hooks | None") -> "Hooks":
        """Return new Hooks with self's hooks first, then other's."""
        if other is None:
            return self
        return Hooks(
            pre_hooks=[*self.pre_hooks, *other.pre_hooks],
            post_hooks=[*self.post_hooks, *other.post_hooks],
            error_hooks=[*self.error_hooks, *other.error_hooks],
        )


@contextlib.contextmanager
def run_hooks[T](context: T, hooks: Hooks) -> Generator[None, Any, None]:
    for hook in hooks.pre_hooks:
        hook(context)
    try:
        yield
    except Exception:
        for hook in hooks.error_hooks:
            hook(context)
        raise
    finally:
        for hook in hooks.post_hooks:
            hook(context)


def invoke_with_hooks[R](
    context_factory: Callable[..., Any],
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Decorate an instance method to run the instance's hooks around it.

    The instance must expose a ``_hooks`` attribute (see ``with_hooks``).

    Args:
        context_factory: Builds the hook context. Called with the instance
            if it declares a parameter, otherwise without arguments.
    """
    takes_instance = bool(inspect.signature(context_factory).parameters)

    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> R:
            context = context_factory(self) if takes_instance else context_factory()
            with run_hooks(context, self._hooks):
                return func(self, *args, **kwargs)

        return wrapper

    return decorator


def with_hooks[C: type](hooks: Hooks) -> Callable[[C], C]:
    """Class decorator that installs built-in hooks on every instance.

    The decorated class must accept a ``hooks`` keyword in ``__init__``.
    Built-in hooks run before user supplied hooks. The merged result is
    stored as ``self._hooks``.
    """

    def decorator(cls: C) -> C:
        original_init = cls.__init__  # type: ignore[misc]

        @functools.wraps(original_init)
        def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
            if "hooks" not in inspect.signature(original_init).parameters:
                raise ValueError(
                    f"{cls.__name__} must have a 'hooks' parameter in __init__"
                )
            self._hooks = hooks.merge(kwargs.get("hooks"))
            original_init(self, *args, **kwargs)

        cls.__init__ = __init__  # type: ignore[misc]
        return cls

    return decorator
