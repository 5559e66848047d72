# -*- coding: utf-8 -*-
"""
Wizard Model - Panel registry, current panel and navigation button state.

Every state change is published as (property name, old value, new value),
first to the subscribed listeners in subscription order, then through the
property_changed signal. Setters that do not change a value publish nothing.
A listener that raises is logged and reported through listener_failed; the
remaining listeners still run.
"""

from enum import Enum
from typing import Any, Callable, Dict, Hashable, List, Optional
import threading

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from .panel_descriptor import PanelDescriptor
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardButton(Enum):
    """Navigation buttons of a wizard."""
    BACK = "back"
    NEXT = "next"
    CANCEL = "cancel"


class ButtonAttribute(Enum):
    """Presentation attributes of a navigation button."""
    TEXT = "text"
    ICON = "icon"
    ENABLED = "enabled"


# Property names
CURRENT_PANEL_DESCRIPTOR_PROPERTY = "current_panel_descriptor"
BACK_BUTTON_TEXT_PROPERTY = "back_button_text"
BACK_BUTTON_ICON_PROPERTY = "back_button_icon"
BACK_BUTTON_ENABLED_PROPERTY = "back_button_enabled"
NEXT_BUTTON_TEXT_PROPERTY = "next_button_text"
NEXT_BUTTON_ICON_PROPERTY = "next_button_icon"
NEXT_BUTTON_ENABLED_PROPERTY = "next_button_enabled"
CANCEL_BUTTON_TEXT_PROPERTY = "cancel_button_text"
CANCEL_BUTTON_ICON_PROPERTY = "cancel_button_icon"
CANCEL_BUTTON_ENABLED_PROPERTY = "cancel_button_enabled"


def button_property(button: WizardButton, attribute: ButtonAttribute) -> str:
    """Get the property name for a button attribute."""
    return f"{button.value}_button_{attribute.value}"


def parse_button_property(name: str) -> Optional[tuple]:
    """
    Split a button property name into (WizardButton, ButtonAttribute).

    Returns:
        The pair, or None if the name is not a button property
    """
    parts = name.split("_button_")
    if len(parts) != 2:
        return None
    try:
        return WizardButton(parts[0]), ButtonAttribute(parts[1])
    except ValueError:
        return None


class WizardModel(QObject):
    """
    State of a wizard.

    Holds:
    - The registry of panel descriptors
    - The current panel descriptor
    - Text, icon and enabled state of the Back, Next and Cancel buttons
    """

    # Signals
    property_changed = pyqtSignal(str, object, object)  # name, old_value, new_value
    listener_failed = pyqtSignal(str, str)  # error_type, error_message

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._panels: Dict[Hashable, PanelDescriptor] = {}
        self._current: Optional[PanelDescriptor] = None
        self._button_state: Dict[str, Any] = {}
        self._listeners: List[Callable[[str, Any, Any], None]] = []
        self._owner_thread = threading.get_ident()

    def _check_thread(self):
        if Config.ENFORCE_THREAD_AFFINITY:
            assert threading.get_ident() == self._owner_thread, (
                "Wizard model used from a thread other than the one that created it"
            )

    # =========================================================================
    # Panels
    # =========================================================================

    def register_panel(self, panel_id: Hashable, descriptor: PanelDescriptor):
        """
        Register a descriptor. An existing registration for the id is replaced.

        Replacing the current panel makes the new descriptor current and
        fires a current panel change.
        """
        self._check_thread()
        old_descriptor = self._panels.get(panel_id)
        if old_descriptor is not None:
            logger.debug(f"Replacing descriptor for panel {panel_id!r}")
        self._panels[panel_id] = descriptor

        if old_descriptor is not None and old_descriptor is self._current:
            self._current = descriptor
            self.fire_property_change(CURRENT_PANEL_DESCRIPTOR_PROPERTY, old_descriptor, descriptor)

    def has_panel(self, panel_id: Hashable) -> bool:
        """Check if a panel id is registered."""
        try:
            return panel_id in self._panels
        except TypeError:
            return False

    def get_panel_descriptor(self, panel_id: Hashable) -> Optional[PanelDescriptor]:
        """Get a registered descriptor, or None."""
        if not self.has_panel(panel_id):
            return None
        return self._panels[panel_id]

    def panel_ids(self) -> List[Hashable]:
        """Get all registered panel ids."""
        return list(self._panels)

    def get_current_panel_descriptor(self) -> Optional[PanelDescriptor]:
        """Get the current descriptor, or None if no panel was shown yet."""
        return self._current

    def set_current_panel(self, panel_id: Hashable) -> bool:
        """
        Make a registered panel the current one.

        Args:
            panel_id: Id of a registered panel

        Returns:
            False if the id is not registered; nothing changes in that case
        """
        self._check_thread()
        new_descriptor = self.get_panel_descriptor(panel_id)
        if new_descriptor is None:
            return False

        old_descriptor = self._current
        self._current = new_descriptor
        self.fire_property_change(CURRENT_PANEL_DESCRIPTOR_PROPERTY, old_descriptor, new_descriptor)
        return True

    # =========================================================================
    # Button state
    # =========================================================================

    def get_button_property(self, button: WizardButton, attribute: ButtonAttribute) -> Any:
        return self._button_state.get(button_property(button, attribute))

    def set_button_property(self, button: WizardButton, attribute: ButtonAttribute, value: Any):
        """
        Set a button attribute.

        Fires a change notification only if the value differs from the
        stored one.
        """
        self._check_thread()
        name = button_property(button, attribute)
        old_value = self._button_state.get(name)
        if value == old_value:
            return
        self._button_state[name] = value
        self.fire_property_change(name, old_value, value)

    def get_back_button_text(self) -> Any:
        return self.get_button_property(WizardButton.BACK, ButtonAttribute.TEXT)

    def set_back_button_text(self, text: Any):
        self.set_button_property(WizardButton.BACK, ButtonAttribute.TEXT, text)

    def get_next_button_text(self) -> Any:
        return self.get_button_property(WizardButton.NEXT, ButtonAttribute.TEXT)

    def set_next_button_text(self, text: Any):
        self.set_button_property(WizardButton.NEXT, ButtonAttribute.TEXT, text)

    def get_cancel_button_text(self) -> Any:
        return self.get_button_property(WizardButton.CANCEL, ButtonAttribute.TEXT)

    def set_cancel_button_text(self, text: Any):
        self.set_button_property(WizardButton.CANCEL, ButtonAttribute.TEXT, text)

    def get_back_button_icon(self) -> Any:
        return self.get_button_property(WizardButton.BACK, ButtonAttribute.ICON)

    def set_back_button_icon(self, icon: Any):
        self.set_button_property(WizardButton.BACK, ButtonAttribute.ICON, icon)

    def get_next_button_icon(self) -> Any:
        return self.get_button_property(WizardButton.NEXT, ButtonAttribute.ICON)

    def set_next_button_icon(self, icon: Any):
        self.set_button_property(WizardButton.NEXT, ButtonAttribute.ICON, icon)

    def get_cancel_button_icon(self) -> Any:
        return self.get_button_property(WizardButton.CANCEL, ButtonAttribute.ICON)

    def set_cancel_button_icon(self, icon: Any):
        self.set_button_property(WizardButton.CANCEL, ButtonAttribute.ICON, icon)

    def get_back_button_enabled(self) -> Optional[bool]:
        return self.get_button_property(WizardButton.BACK, ButtonAttribute.ENABLED)

    def set_back_button_enabled(self, enabled: bool):
        self.set_button_property(WizardButton.BACK, ButtonAttribute.ENABLED, enabled)

    def get_next_button_enabled(self) -> Optional[bool]:
        return self.get_button_property(WizardButton.NEXT, ButtonAttribute.ENABLED)

    def set_next_button_enabled(self, enabled: bool):
        self.set_button_property(WizardButton.NEXT, ButtonAttribute.ENABLED, enabled)

    def get_cancel_button_enabled(self) -> Optional[bool]:
        return self.get_button_property(WizardButton.CANCEL, ButtonAttribute.ENABLED)

    def set_cancel_button_enabled(self, enabled: bool):
        self.set_button_property(WizardButton.CANCEL, ButtonAttribute.ENABLED, enabled)

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_property_change_listener(self, listener: Callable[[str, Any, Any], None]):
        """Subscribe a callable(name, old_value, new_value)."""
        self._listeners.append(listener)

    def remove_property_change_listener(self, listener: Callable[[str, Any, Any], None]):
        """Unsubscribe a listener added with add_property_change_listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)
        else:
            logger.debug(f"Listener {listener!r} was not subscribed")

    def fire_property_change(self, name: str, old_value: Any, new_value: Any):
        """Notify all listeners of a property change, then emit property_changed."""
        self._notify_listeners(name, old_value, new_value)
        self.property_changed.emit(name, old_value, new_value)

    def _notify_listeners(self, name: str, old_value: Any, new_value: Any):
        for listener in list(self._listeners):
            try:
                listener(name, old_value, new_value)

            except (MemoryError, KeyboardInterrupt):
                raise

            except Exception as e:
                logger.error(
                    f"Property change listener {listener!r} failed for {name}: {e}",
                    exc_info=True
                )
                self.listener_failed.emit(type(e).__name__, str(e))
