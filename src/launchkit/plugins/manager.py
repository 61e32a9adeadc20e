"""Plugin registry and ordered milestone broadcast.

The host owns one PluginManager, registers plugins during setup, then calls
one broadcast method per bootstrap milestone. Each broadcast invokes the
same-named hook on every plugin, first-registered first-notified, passing the
same argument object to all of them.

Discovery: entry_points (pip-installed) in the ``launchkit.plugins`` group.
INVARIANT: Broadcast order equals registration order for every milestone.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from importlib.metadata import entry_points
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, cast

import pluggy

from launchkit.config.models import ErrorPolicy
from launchkit.domain.lifecycle import BootstrapPhase, Milestone, is_in_order, target_phase
from launchkit.exceptions import BroadcastError
from launchkit.plugins.base import Plugin
from launchkit.plugins.hookspecs import HOOK_NAMES, PROJECT_NAME, LaunchkitHookSpec

if TYPE_CHECKING:
    from launchkit.config.settings import LaunchkitSettings

ENTRY_POINT_GROUP = "launchkit.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Ordered plugin registry with one broadcast method per milestone.

    Parameters:
        error_policy: ``abort`` re-raises the first hook failure and skips the
            remaining plugins; ``collect`` notifies every plugin and raises a
            :class:`BroadcastError` holding all failures afterwards.
    """

    def __init__(self, *, error_policy: ErrorPolicy | str = ErrorPolicy.ABORT) -> None:
        self._plugins: list[object] = []
        self._error_policy = ErrorPolicy(error_policy)
        self._phase = BootstrapPhase.UNCONFIGURED

    @classmethod
    def from_settings(cls, settings: LaunchkitSettings) -> PluginManager:
        """Build a manager configured by the ``[plugins]`` settings section."""
        return cls(error_policy=settings.plugins.error_policy)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add(self, *plugins: object) -> None:
        """Append *plugins*, in order, after every plugin already registered.

        No validation and no de-duplication: the same instance may be added
        more than once and is then notified once per registration.
        """
        for plugin in plugins:
            self._plugins.append(plugin)
            logger.debug("Registered plugin: %s", _plugin_name(plugin))

    def get_plugins(self) -> list[object]:
        """Return all registered plugins in registration order."""
        return list(self._plugins)

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins in registration order."""
        return [_plugin_name(p) for p in self._plugins]

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._error_policy

    @property
    def phase(self) -> BootstrapPhase:
        """Phase reached by the last milestone broadcast that completed."""
        return self._phase

    def discover_and_load(
        self,
        group: str = ENTRY_POINT_GROUP,
        *,
        disabled: Iterable[str] = (),
    ) -> list[str]:
        """Load plugins advertised under the *group* entry-point group.

        Entry points are loaded in name order so the resulting registration
        order does not depend on installation order. Entry points that name
        a class are instantiated with no arguments. Each plugin is checked
        with :func:`validate_plugin` before it is added.

        Errors are logged as warnings and the entry point is skipped.

        Returns the names of the entry points that were added.
        """
        skipped = set(disabled)
        loaded: list[str] = []
        for ep in sorted(entry_points(group=group), key=lambda ep: ep.name):
            if ep.name in skipped:
                logger.debug("Skipping disabled plugin %s", ep.name)
                continue
            try:
                plugin = ep.load()
                if inspect.isclass(plugin):
                    plugin = plugin()
                validate_plugin(plugin)
            except Exception:
                logger.warning("Failed to load entry-point plugin %s", ep.name, exc_info=True)
                continue
            self.add(plugin)
            loaded.append(ep.name)
        return loaded

    # ------------------------------------------------------------------
    # Milestone broadcasts
    # ------------------------------------------------------------------

    def configure(self, config: Any) -> None:
        """Broadcast ``configure(config)`` to every plugin."""
        self._broadcast(Milestone.CONFIGURE, config)

    def before_launch(self, config: Any) -> None:
        """Broadcast ``before_launch(config)`` to every plugin."""
        self._broadcast(Milestone.BEFORE_LAUNCH, config)

    def after_setup(self, runtime: Any) -> None:
        """Broadcast ``after_setup(runtime)`` to every plugin."""
        self._broadcast(Milestone.AFTER_SETUP, runtime)

    def after_startup(self, runtime: Any) -> None:
        """Broadcast ``after_startup(runtime)`` to every plugin."""
        self._broadcast(Milestone.AFTER_STARTUP, runtime)

    def on_user_error(self, error: Any) -> None:
        """Broadcast ``on_user_error(error)`` to every plugin."""
        self._broadcast(Milestone.USER_ERROR, error)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _broadcast(self, milestone: Milestone, arg: Any) -> None:
        """Invoke *milestone*'s hook on a snapshot of the registry.

        Plugins added by a hook during the pass are notified from the next
        broadcast on.
        """
        if not is_in_order(self._phase, milestone):
            logger.warning(
                "Milestone %s fired out of order (phase: %s)",
                milestone.value,
                self._phase.value,
            )

        plugins = list(self._plugins)
        failures: list[Exception] = []
        for plugin in plugins:
            hook = getattr(plugin, milestone.value, None)
            if not callable(hook):
                continue
            try:
                hook(arg)
            except Exception as exc:
                if self._error_policy is ErrorPolicy.ABORT:
                    logger.warning(
                        "Plugin %s raised during %s; aborting broadcast",
                        _plugin_name(plugin),
                        milestone.value,
                    )
                    raise
                logger.warning(
                    "Plugin %s raised during %s",
                    _plugin_name(plugin),
                    milestone.value,
                    exc_info=True,
                )
                failures.append(exc)

        if failures:
            msg = f"{len(failures)} plugin(s) failed during {milestone.value}"
            raise BroadcastError(msg, failures, milestone.value)

        target = target_phase(milestone)
        if target is not None:
            self._phase = target
        logger.debug("Broadcast %s to %d plugin(s)", milestone.value, len(plugins))


class _ContractManager(pluggy.PluginManager):
    """Pluggy manager that also accepts undecorated hook methods.

    A public method whose name matches a hook specification counts as an
    implementation, with or without ``@hookimpl``.
    """

    def __init__(self) -> None:
        super().__init__(PROJECT_NAME)
        self.add_hookspecs(LaunchkitHookSpec)

    def parse_hookimpl_opts(self, plugin: object, name: str) -> pluggy.HookimplOpts | None:
        opts = super().parse_hookimpl_opts(plugin, name)
        if opts is None and name in HOOK_NAMES:
            if inspect.isroutine(getattr(plugin, name, None)):
                opts = cast("pluggy.HookimplOpts", {})
        return opts


def validate_plugin(plugin: object) -> list[str]:
    """Check *plugin* against the hook contract.

    Hooks are called with one positional argument, so any parameter name is
    accepted as long as the hook can be called with exactly one argument.

    Raises ``pluggy.PluginValidationError`` when a hook cannot be called that
    way, when a ``@hookimpl`` method names no known hook, or when it relies on
    ``specname`` or the wrapper options (hooks are dispatched by attribute
    name and called directly).

    Returns the hooks *plugin* overrides, in milestone order. Inherited
    :class:`Plugin` no-ops are not counted.
    """
    pm = _ContractManager()
    stand_in = SimpleNamespace()

    for name in dir(plugin):
        opts = pm.parse_hookimpl_opts(plugin, name)
        if opts is None:
            continue
        if opts.get("specname"):
            msg = f"hook {name!r} must be implemented by a method of the same name"
            raise pluggy.PluginValidationError(plugin, msg)
        if opts.get("wrapper") or opts.get("hookwrapper"):
            raise pluggy.PluginValidationError(plugin, f"hook {name!r} cannot be a wrapper")

        method = getattr(plugin, name)
        caller = getattr(pm.hook, name, None)
        if caller is not None and caller.spec is not None:
            argnames = caller.spec.argnames
            try:
                inspect.signature(method).bind(None)
            except TypeError:
                msg = f"hook {name!r} must accept a single {argnames[0]!r} argument"
                raise pluggy.PluginValidationError(plugin, msg) from None
            method = _positional(method, argnames)
        setattr(stand_in, name, method)

    # pluggy compares argument names; the stand-in carries the hookspec's.
    pm.register(stand_in, name=_plugin_name(plugin))
    pm.check_pending()

    return [
        name
        for name in HOOK_NAMES
        if hasattr(stand_in, name) and not _is_default(plugin, name)
    ]


def _positional(method: Any, argnames: tuple[str, ...]) -> Any:
    """Wrap *method* under the hookspec's argument names."""

    def hook(*args: Any) -> Any:
        return method(*args)

    hook.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        [inspect.Parameter(arg, inspect.Parameter.POSITIONAL_OR_KEYWORD) for arg in argnames]
    )
    marker = f"{PROJECT_NAME}_impl"
    opts = getattr(method, marker, None)
    if opts is not None:
        setattr(hook, marker, opts)
    return hook


def _is_default(plugin: object, name: str) -> bool:
    """Whether *plugin*'s hook *name* is the inherited no-op from :class:`Plugin`."""
    method = getattr(plugin, name, None)
    return getattr(method, "__func__", None) is getattr(Plugin, name)


def _plugin_name(plugin: object) -> str:
    return plugin.__class__.__name__
