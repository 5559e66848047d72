# -*- coding: utf-8 -*-
"""
Wizard Context - The view of a wizard handed to panel descriptors.

Provides a narrow interface for:
- Navigation button mutators
- Navigation back into the wizard
- Shared data that dynamic transitions depend on
- State tracking
"""

from typing import Dict, Any, Hashable, List, Optional
from datetime import datetime
from enum import Enum
import uuid
import weakref

from services.exceptions import ProgrammerMisuseError


class WizardState(Enum):
    """Lifecycle state of a wizard."""
    UNINITIALIZED = "uninitialized"
    SHOWING = "showing"
    CLOSED = "closed"


class WizardContext:
    """
    Context shared by a wizard and its panel descriptors.

    Holds only a weak reference to the wizard, so descriptors bound to the
    context never keep the wizard alive.
    """

    def __init__(self, wizard: 'Wizard'):
        """Initialize base context properties."""
        self._wizard_ref = weakref.ref(wizard)
        self.wizard_id: str = str(uuid.uuid4())
        self.status: WizardState = WizardState.UNINITIALIZED
        self.return_code: Optional[int] = None
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()

        # Ids of the panels shown so far, in order
        self.history: List[Hashable] = []

        # Custom data storage
        self.data: Dict[str, Any] = {}

    @property
    def wizard(self) -> 'Wizard':
        wizard = self._wizard_ref()
        if wizard is None:
            raise ProgrammerMisuseError("Wizard context used after its wizard was discarded")
        return wizard

    @property
    def current_panel_id(self) -> Optional[Hashable]:
        """Id of the current panel, or None before the first panel is shown."""
        descriptor = self.wizard.model.get_current_panel_descriptor()
        return descriptor.panel_id if descriptor is not None else None

    # =========================================================================
    # State tracking
    # =========================================================================

    def mark_panel_shown(self, panel_id: Hashable):
        """Record that a panel became current."""
        self.history.append(panel_id)
        self.status = WizardState.SHOWING
        self.updated_at = datetime.now()

    def mark_closed(self, code: int):
        """Record the final result code."""
        self.return_code = code
        self.status = WizardState.CLOSED
        self.updated_at = datetime.now()

    def was_shown(self, panel_id: Hashable) -> bool:
        """Check if a panel was current at some point."""
        return panel_id in self.history

    def update_data(self, key: str, value: Any):
        """Update data in the context."""
        self.data[key] = value
        self.updated_at = datetime.now()

    def get_data(self, key: str, default: Any = None) -> Any:
        """Get data from the context."""
        return self.data.get(key, default)

    # =========================================================================
    # Navigation
    # =========================================================================

    def go_to(self, panel_id: Hashable) -> bool:
        """Switch the wizard to another panel."""
        return self.wizard.set_current_panel(panel_id)

    # =========================================================================
    # Button mutators
    # =========================================================================

    def set_back_button_text(self, text: Any):
        self.wizard.model.set_back_button_text(text)

    def set_next_button_text(self, text: Any):
        self.wizard.model.set_next_button_text(text)

    def set_cancel_button_text(self, text: Any):
        self.wizard.model.set_cancel_button_text(text)

    def set_back_button_icon(self, icon: Any):
        self.wizard.model.set_back_button_icon(icon)

    def set_next_button_icon(self, icon: Any):
        self.wizard.model.set_next_button_icon(icon)

    def set_cancel_button_icon(self, icon: Any):
        self.wizard.model.set_cancel_button_icon(icon)

    def set_back_button_enabled(self, enabled: bool):
        self.wizard.model.set_back_button_enabled(enabled)

    def set_next_button_enabled(self, enabled: bool):
        self.wizard.model.set_next_button_enabled(enabled)

    def set_cancel_button_enabled(self, enabled: bool):
        self.wizard.model.set_cancel_button_enabled(enabled)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        return {
            "wizard_id": self.wizard_id,
            "status": self.status.value,
            "return_code": self.return_code,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "history": [str(panel_id) for panel_id in self.history],
            "data": self.data
        }
