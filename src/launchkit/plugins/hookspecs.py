"""Pluggy hook specifications for the launchkit bootstrap lifecycle.

Four ordered milestones and one unordered notification. Every hook is a
pure notification: return values are ignored by the plugin manager.
"""

from __future__ import annotations

from typing import Any

import pluggy

PROJECT_NAME = "launchkit"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LaunchkitHookSpec:
    """Hook specifications for the launchkit plugin system."""

    @hookspec
    def configure(self, config: Any) -> None:
        """Validate the plugin's configuration section and fill in defaults.

        Plugins check that the keys they own hold valid values, reject
        unknown keys in their namespace, and write defaults for keys the
        user left out. ``config`` is shared with every other plugin and is
        mutated in place.

        Must not do expensive work: it runs before the interpreter download
        starts.
        """

    @hookspec
    def before_launch(self, config: Any) -> None:
        """Preliminary initialization is done; the interpreter is about to launch.

        The page is visible and its content loaded, so this is the place
        for page setup that must exist before the interpreter starts.

        Must not do expensive work: it delays the interpreter download.
        """

    @hookspec
    def after_setup(self, runtime: Any) -> None:
        """The interpreter is live and its environment installed.

        No user script has run yet; startup scripts execute after this hook.
        """

    @hookspec
    def after_startup(self, runtime: Any) -> None:
        """Startup complete: user scripts ran and the host accepts input."""

    @hookspec
    def on_user_error(self, error: Any) -> None:
        """A user script raised. May fire any number of times."""


# Milestone order. on_user_error is last but unordered.
HOOK_NAMES: tuple[str, ...] = (
    "configure",
    "before_launch",
    "after_setup",
    "after_startup",
    "on_user_error",
)


def describe_hooks() -> list[dict[str, Any]]:
    """Describe each hook: name, argument names, and docstring summary.

    Read back through pluggy's hook relay so the description always matches
    what plugins are validated against.
    """
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(LaunchkitHookSpec)

    hooks: list[dict[str, Any]] = []
    for name in HOOK_NAMES:
        spec = getattr(pm.hook, name).spec
        assert spec is not None
        doc = (spec.function.__doc__ or "").strip()
        hooks.append(
            {
                "name": name,
                "args": list(spec.argnames),
                "summary": doc.splitlines()[0] if doc else "",
            }
        )
    return hooks
