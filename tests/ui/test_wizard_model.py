# -*- coding: utf-8 -*-
"""
Tests for WizardModel.

Tests cover:
- Panel registry
- Current panel switching
- Button state notifications
- Listener management
"""

import threading

import pytest

from ui.wizards.framework import ButtonAttribute, PanelDescriptor, WizardButton, WizardModel
from ui.wizards.framework.wizard_model import (
    BACK_BUTTON_ENABLED_PROPERTY,
    CURRENT_PANEL_DESCRIPTOR_PROPERTY,
    NEXT_BUTTON_ENABLED_PROPERTY,
    NEXT_BUTTON_ICON_PROPERTY,
    NEXT_BUTTON_TEXT_PROPERTY,
    button_property,
    parse_button_property,
)


@pytest.fixture
def model(qapp):
    return WizardModel()


@pytest.fixture
def events(model):
    received = []
    model.add_property_change_listener(lambda name, old, new: received.append((name, old, new)))
    return received


class TestPanelRegistry:
    """Test panel registration."""

    def test_register_and_lookup(self, model):
        descriptor = PanelDescriptor("A")
        model.register_panel("A", descriptor)

        assert model.has_panel("A")
        assert model.get_panel_descriptor("A") is descriptor
        assert model.panel_ids() == ["A"]

    def test_duplicate_id_overwrites(self, model):
        first = PanelDescriptor("A")
        second = PanelDescriptor("A")
        model.register_panel("A", first)
        model.register_panel("A", second)

        assert model.get_panel_descriptor("A") is second
        assert model.panel_ids() == ["A"]

    def test_unhashable_id_is_not_registered(self, model):
        assert model.has_panel(["A"]) is False
        assert model.get_panel_descriptor(["A"]) is None

    def test_no_current_panel_initially(self, model):
        assert model.get_current_panel_descriptor() is None


class TestCurrentPanel:
    """Test switching the current panel."""

    def test_set_current_panel_fires_change(self, model, events):
        a = PanelDescriptor("A")
        b = PanelDescriptor("B")
        model.register_panel("A", a)
        model.register_panel("B", b)

        assert model.set_current_panel("A") is True
        assert model.set_current_panel("B") is True

        assert model.get_current_panel_descriptor() is b
        assert events == [
            (CURRENT_PANEL_DESCRIPTOR_PROPERTY, None, a),
            (CURRENT_PANEL_DESCRIPTOR_PROPERTY, a, b),
        ]

    def test_unknown_panel_fails_without_side_effects(self, model, events):
        a = PanelDescriptor("A")
        model.register_panel("A", a)
        model.set_current_panel("A")
        events.clear()

        assert model.set_current_panel("NO_SUCH_ID") is False
        assert model.get_current_panel_descriptor() is a
        assert events == []


class TestButtonState:
    """Test button property setters."""

    def test_setter_fires_change(self, model, events):
        model.set_next_button_text("Next >")

        assert model.get_next_button_text() == "Next >"
        assert events == [(NEXT_BUTTON_TEXT_PROPERTY, None, "Next >")]

    def test_same_value_twice_fires_once(self, model, events):
        model.set_back_button_enabled(True)
        model.set_back_button_enabled(True)

        assert events == [(BACK_BUTTON_ENABLED_PROPERTY, None, True)]

    def test_equal_values_are_not_a_change(self, model, events):
        model.set_next_button_text("Finish")
        model.set_next_button_text("".join(["Fin", "ish"]))

        assert len(events) == 1

    def test_changed_value_fires_again(self, model, events):
        model.set_back_button_enabled(True)
        model.set_back_button_enabled(False)

        assert events == [
            (BACK_BUTTON_ENABLED_PROPERTY, None, True),
            (BACK_BUTTON_ENABLED_PROPERTY, True, False),
        ]

    def test_icon_is_opaque(self, model, events):
        icon = object()
        model.set_next_button_icon(icon)

        assert model.get_next_button_icon() is icon
        assert events == [(NEXT_BUTTON_ICON_PROPERTY, None, icon)]

    def test_nine_distinct_properties(self, model, events):
        for button in WizardButton:
            model.set_button_property(button, ButtonAttribute.TEXT, f"{button.value} text")
            model.set_button_property(button, ButtonAttribute.ICON, f"{button.value}.png")
            model.set_button_property(button, ButtonAttribute.ENABLED, True)

        names = {name for name, _, _ in events}
        assert len(names) == 9
        assert model.get_cancel_button_text() == "cancel text"
        assert model.get_back_button_icon() == "back.png"
        assert model.get_cancel_button_enabled() is True

    def test_parse_button_property(self):
        name = button_property(WizardButton.CANCEL, ButtonAttribute.ENABLED)

        assert parse_button_property(name) == (WizardButton.CANCEL, ButtonAttribute.ENABLED)
        assert parse_button_property(CURRENT_PANEL_DESCRIPTOR_PROPERTY) is None
        assert parse_button_property("help_button_text") is None


class TestListeners:
    """Test listener management."""

    def test_listeners_called_in_subscription_order(self, model):
        order = []
        model.add_property_change_listener(lambda *args: order.append("first"))
        model.add_property_change_listener(lambda *args: order.append("second"))
        model.add_property_change_listener(lambda *args: order.append("third"))

        model.set_cancel_button_enabled(True)

        assert order == ["first", "second", "third"]

    def test_removed_listener_is_not_called(self, model):
        received = []

        def listener(name, old, new):
            received.append(name)

        model.add_property_change_listener(listener)
        model.remove_property_change_listener(listener)
        model.set_next_button_enabled(False)

        assert received == []

    def test_removing_unknown_listener_is_harmless(self, model):
        model.remove_property_change_listener(lambda *args: None)

    def test_raising_listener_does_not_stop_delivery(self, model):
        received = []
        failures = []
        model.listener_failed.connect(lambda kind, message: failures.append((kind, message)))

        def broken(name, old, new):
            raise RuntimeError("listener bug")

        model.add_property_change_listener(broken)
        model.add_property_change_listener(lambda name, old, new: received.append(name))

        model.set_next_button_enabled(True)

        assert received == [NEXT_BUTTON_ENABLED_PROPERTY]
        assert failures == [("RuntimeError", "listener bug")]
        assert model.get_next_button_enabled() is True

    def test_signal_follows_listeners(self, model):
        order = []
        model.property_changed.connect(lambda *args: order.append("signal"))
        model.add_property_change_listener(lambda *args: order.append("listener"))

        model.set_back_button_text("Back")

        assert order == ["listener", "signal"]


class TestReplacingCurrentPanel:
    """Test re-registering the id of the current panel."""

    def test_current_follows_registry(self, model, events):
        old = PanelDescriptor("A")
        new = PanelDescriptor("A")
        model.register_panel("A", old)
        model.set_current_panel("A")
        events.clear()

        model.register_panel("A", new)

        assert model.get_current_panel_descriptor() is new
        assert model.get_current_panel_descriptor() is model.get_panel_descriptor("A")
        assert events == [(CURRENT_PANEL_DESCRIPTOR_PROPERTY, old, new)]

    def test_replacing_other_panel_keeps_current(self, model, events):
        a = PanelDescriptor("A")
        model.register_panel("A", a)
        model.register_panel("B", PanelDescriptor("B"))
        model.set_current_panel("A")
        events.clear()

        model.register_panel("B", PanelDescriptor("B"))

        assert model.get_current_panel_descriptor() is a
        assert events == []


class TestThreadAffinity:
    """Test that the model rejects calls from other threads."""

    @pytest.mark.parametrize("call", [
        lambda model: model.set_next_button_enabled(False),
        lambda model: model.set_current_panel("A"),
        lambda model: model.register_panel("B", PanelDescriptor("B")),
    ])
    def test_other_thread_asserts(self, model, call):
        model.register_panel("A", PanelDescriptor("A"))
        failures = []

        def run():
            try:
                call(model)
            except AssertionError as e:
                failures.append(e)

        worker = threading.Thread(target=run)
        worker.start()
        worker.join()

        assert len(failures) == 1
        assert model.get_current_panel_descriptor() is None
        assert model.get_next_button_enabled() is None
        assert model.panel_ids() == ["A"]
