"""Tests for the in-session color history."""

from unittest.mock import Mock

import pytest

from huepicker.core import ColorHistory, PickerController
from huepicker.models import Color, PickerConfig
from huepicker.protocols import ColorObserver, EditSource

RED = Color(r=255, g=0, b=0)
GREEN = Color(r=0, g=255, b=0)
BLUE = Color(r=0, g=0, b=255)


class TestColorHistory:
    """ColorHistory on its own."""

    @pytest.mark.unit
    def test_is_a_color_observer(self):
        assert isinstance(ColorHistory(), ColorObserver)

    @pytest.mark.unit
    def test_appends_in_order(self):
        history = ColorHistory()
        for color in (RED, GREEN, BLUE):
            history.on_color_changed(color)
        assert history.colors == [RED, GREEN, BLUE]
        assert len(history) == 3

    @pytest.mark.unit
    def test_repeat_of_newest_is_skipped(self):
        callback = Mock()
        history = ColorHistory(on_history_changed=callback)
        history.on_color_changed(RED)
        history.on_color_changed(RED)

        assert history.colors == [RED]
        callback.assert_called_once_with([RED])

    @pytest.mark.unit
    def test_existing_color_moves_to_end(self):
        history = ColorHistory()
        for color in (RED, GREEN, BLUE, RED):
            history.on_color_changed(color)
        assert history.colors == [GREEN, BLUE, RED]

    @pytest.mark.unit
    def test_alpha_makes_a_different_entry(self):
        history = ColorHistory()
        history.on_color_changed(RED)
        history.on_color_changed(RED.with_alpha(128))
        assert len(history) == 2

    @pytest.mark.unit
    def test_oldest_dropped(self):
        history = ColorHistory(max_size=2)
        for color in (RED, GREEN, BLUE):
            history.on_color_changed(color)
        assert history.colors == [GREEN, BLUE]

    @pytest.mark.unit
    def test_zero_size_records_nothing(self):
        callback = Mock()
        history = ColorHistory(max_size=0, on_history_changed=callback)
        history.on_color_changed(RED)
        assert history.colors == []
        callback.assert_not_called()

    @pytest.mark.unit
    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            ColorHistory(max_size=-1)

    @pytest.mark.unit
    def test_colors_is_a_copy(self):
        history = ColorHistory()
        history.on_color_changed(RED)
        history.colors.clear()
        assert history.colors == [RED]

    @pytest.mark.unit
    def test_clear(self):
        callback = Mock()
        history = ColorHistory(on_history_changed=callback)
        history.on_color_changed(RED)
        history.clear()

        assert history.colors == []
        callback.assert_called_with([])

    @pytest.mark.unit
    def test_clear_empty_does_not_notify(self):
        callback = Mock()
        ColorHistory(on_history_changed=callback).clear()
        callback.assert_not_called()

    @pytest.mark.unit
    def test_pick_uses_history_source(self):
        history = ColorHistory()
        history.on_color_changed(GREEN)
        controller = Mock(spec=PickerController)

        assert history.pick(0, controller) == GREEN
        controller.set_color.assert_called_once_with(GREEN, source=EditSource.HISTORY)

    @pytest.mark.unit
    def test_pick_out_of_range(self):
        with pytest.raises(IndexError):
            ColorHistory().pick(0, Mock(spec=PickerController))


@pytest.mark.integration
class TestHistoryWithController:
    """ColorHistory registered on a PickerController."""

    @pytest.fixture
    def history(self, controller):
        history = ColorHistory(max_size=4)
        controller.register_observer(history)
        return history

    def test_records_emitted_colors(self, controller, history):
        controller.apply_hex_input("00FF00")
        controller.apply_hex_input("0000F")
        controller.apply_hex_input("0000FF")
        assert history.colors == [GREEN, BLUE]

    def test_drag_records_each_distinct_color(self, controller, history):
        for x in (0.0, 0.0, 1.0):
            controller.apply_geometry_input("hsv_saturation_value", x, 0.0)
        assert history.colors == [Color(r=255, g=255, b=255), RED]

    def test_pick_restores_and_moves_to_end(self, controller, history):
        controller.apply_hex_input("00FF00")
        controller.apply_hex_input("0000FF")

        history.pick(0, controller)

        assert controller.color == GREEN
        assert controller.hex_text == "FF00FF00"
        assert history.colors == [BLUE, GREEN]

    def test_sized_from_config(self):
        config = PickerConfig(history_size=2)
        controller = PickerController(config)
        history = ColorHistory.from_config(config)
        controller.register_observer(history)

        for text in ("FF0000", "00FF00", "0000FF"):
            controller.apply_hex_input(text)

        assert history.max_size == 2
        assert history.colors == [GREEN, BLUE]

    def test_config_size_zero_disables_recording(self):
        config = PickerConfig(history_size=0)
        controller = PickerController(config)
        history = ColorHistory.from_config(config)
        controller.register_observer(history)

        controller.apply_hex_input("FF0000")

        assert history.colors == []
