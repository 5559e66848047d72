# -*- coding: utf-8 -*-
"""
Panel Descriptor - Describes one step of a wizard.

A descriptor carries:
- The panel id and its opaque content handle
- The rules for which panel follows/precedes it
- Lifecycle hooks called by the wizard during a transition

Transition rules and hooks can be given as values/closures, or a subclass
can override the corresponding methods.
"""

from typing import Any, Callable, Hashable, Optional, Union


class PanelSentinel:
    """Special panel id that never names a registered panel."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return self.name


# Next id of the last panel: pressing Next closes the wizard
FINISH = PanelSentinel("FINISH")

# No panel in that direction: the button is disabled
NONE = PanelSentinel("NONE")


def is_sentinel(panel_id: Any) -> bool:
    """Check if a panel id is None or one of the sentinels."""
    return panel_id is None or isinstance(panel_id, PanelSentinel)


PanelRule = Union[Hashable, Callable[['WizardContext'], Any]]
PanelHook = Callable[['WizardContext'], None]


class PanelDescriptor:
    """
    Behavioral description of one wizard panel.

    Usage:
        welcome = PanelDescriptor(
            "WELCOME_PANEL",
            content=welcome_page,
            next_id=lambda ctx: ctx.get_data("next_panel", "INSTALL_PANEL"),
        )
    """

    def __init__(
        self,
        panel_id: Hashable,
        content: Any = None,
        next_id: PanelRule = FINISH,
        previous_id: PanelRule = NONE,
        on_about_to_hide: Optional[PanelHook] = None,
        on_about_to_display: Optional[PanelHook] = None,
        on_displaying: Optional[PanelHook] = None,
    ):
        """
        Initialize the descriptor.

        Args:
            panel_id: Unique id of the panel within its wizard
            content: Opaque display handle handed to the display surface
            next_id: Next panel id, FINISH, NONE, or a callable taking the context
            previous_id: Previous panel id, NONE, or a callable taking the context
            on_about_to_hide: Called before the panel is hidden
            on_about_to_display: Called before the panel is shown
            on_displaying: Called once the panel is visible
        """
        self.panel_id = panel_id
        self.content = content
        self._next_id = next_id
        self._previous_id = previous_id
        self._on_about_to_hide = on_about_to_hide
        self._on_about_to_display = on_about_to_display
        self._on_displaying = on_displaying
        self._context: Optional['WizardContext'] = None

    def __repr__(self):
        return f"{self.__class__.__name__}({self.panel_id!r})"

    # =========================================================================
    # Binding
    # =========================================================================

    def bind(self, context: 'WizardContext'):
        """Bind the descriptor to the context of the wizard it is registered in."""
        self._context = context

    @property
    def context(self) -> Optional['WizardContext']:
        """The context of the owning wizard, or None before registration."""
        return self._context

    # =========================================================================
    # Transition rules
    # =========================================================================

    def get_next_panel_id(self) -> Any:
        """Get the id of the panel Next leads to, FINISH, or NONE."""
        return self._resolve(self._next_id)

    def get_previous_panel_id(self) -> Any:
        """Get the id of the panel Back leads to, or NONE."""
        return self._resolve(self._previous_id)

    def _resolve(self, rule: PanelRule) -> Any:
        value = rule(self._context) if callable(rule) else rule
        return NONE if value is None else value

    # =========================================================================
    # Lifecycle hooks
    # =========================================================================

    def about_to_hide(self):
        """Called on the outgoing panel before the transition."""
        self._run_hook(self._on_about_to_hide)

    def about_to_display(self):
        """Called on the incoming panel before it is shown."""
        self._run_hook(self._on_about_to_display)

    def displaying(self):
        """Called on the incoming panel after it was shown."""
        self._run_hook(self._on_displaying)

    def _run_hook(self, hook: Optional[PanelHook]):
        if hook is not None:
            hook(self._context)
