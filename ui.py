"""Arcade window that replays the round trip through the valley."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import arcade
import arcade.gui

from core import Pos, Timestamp
from navigator import Itinerary
from problem import BlizzardBasin


# Rendering Constants
TILE_SIZE = 24
PADDING = 10
CONTROL_AREA_HEIGHT = 50
MINUTES_PER_SECOND = 4.0

WALL_COLOR = (90, 90, 90)
GROUND_COLOR = (25, 25, 35)
BLIZZARD_COLOR = (150, 200, 255)
TRAIL_COLOR = (120, 110, 40)
EXPEDITION_COLOR = (255, 220, 60)


@dataclass
class PlaybackState:
    """Which minute is on screen and whether it is advancing on its own."""

    last_minute: Timestamp
    minute: Timestamp = 0
    playing: bool = True
    _elapsed: float = 0.0

    def seek(self, minute: Timestamp) -> None:
        self.minute = max(0, min(self.last_minute, minute))
        self._elapsed = 0.0

    def advance(self, delta_time: float) -> None:
        if not self.playing:
            return
        self._elapsed += delta_time
        steps = int(self._elapsed * MINUTES_PER_SECOND)
        if steps:
            self._elapsed -= steps / MINUTES_PER_SECOND
            self.minute = min(self.last_minute, self.minute + steps)
        if self.minute == self.last_minute:
            self.playing = False


@dataclass
class PlaybackControls:
    """UI controls for time navigation."""

    slider: arcade.gui.UISlider
    minute_label: arcade.gui.UILabel
    play_btn: arcade.gui.UIFlatButton


def cell_bottom_left(pos: Pos, offset_x: int, offset_y: int, map_height: int) -> tuple[int, int]:
    """Screen position of an interior cell; the wall border takes one tile on each side."""
    left = offset_x + (pos.x + 1) * TILE_SIZE
    bottom = offset_y + map_height - (pos.y + 2) * TILE_SIZE
    return left, bottom


def draw_walls(basin: BlizzardBasin, offset_x: int, offset_y: int, map_width: int, map_height: int) -> None:
    """Draw the wall border with the two openings cut out."""
    arcade.draw_lbwh_rectangle_filled(offset_x, offset_y, map_width, map_height, WALL_COLOR)
    valley = basin.valley
    for pos in [valley.start, valley.goal]:
        left, bottom = cell_bottom_left(pos, offset_x, offset_y, map_height)
        arcade.draw_lbwh_rectangle_filled(left, bottom, TILE_SIZE, TILE_SIZE, GROUND_COLOR)
    left, bottom = cell_bottom_left(Pos(0, valley.height - 1), offset_x, offset_y, map_height)
    arcade.draw_lbwh_rectangle_filled(
        left, bottom, valley.width * TILE_SIZE, valley.height * TILE_SIZE, GROUND_COLOR
    )


def draw_blizzards(basin: BlizzardBasin, minute: Timestamp, offset_x: int, offset_y: int, map_height: int) -> None:
    """Shade covered cells, brighter where blizzards pile up, with the arrow of a lone one."""
    for pos, directions in basin.occupancy.blizzards_at(minute).items():
        left, bottom = cell_bottom_left(pos, offset_x, offset_y, map_height)
        shade = min(1.0, 0.4 + 0.2 * len(directions))
        color = tuple(int(c * shade) for c in BLIZZARD_COLOR)
        arcade.draw_lbwh_rectangle_filled(left + 1, bottom + 1, TILE_SIZE - 2, TILE_SIZE - 2, color)
        label = directions[0].value if len(directions) == 1 else str(len(directions))
        arcade.draw_text(
            label,
            left + TILE_SIZE // 2, bottom + TILE_SIZE // 2, (20, 20, 40),
            font_size=10, anchor_x="center", anchor_y="center",
        )


def draw_expedition(itinerary: Itinerary, minute: Timestamp, offset_x: int, offset_y: int, map_height: int) -> None:
    """Draw the expedition and the cells it has already passed through."""
    for earlier in range(itinerary.start_minute, minute):
        pos = itinerary.position_at(earlier)
        if pos is None:
            continue
        left, bottom = cell_bottom_left(pos, offset_x, offset_y, map_height)
        arcade.draw_circle_filled(left + TILE_SIZE // 2, bottom + TILE_SIZE // 2, 3, TRAIL_COLOR)

    pos = itinerary.position_at(minute)
    if pos is None:
        return
    left, bottom = cell_bottom_left(pos, offset_x, offset_y, map_height)
    arcade.draw_circle_filled(left + TILE_SIZE // 2, bottom + TILE_SIZE // 2, TILE_SIZE // 3, EXPEDITION_COLOR)


class ValleyView(arcade.View):
    """Map of the valley above a minute slider."""

    def __init__(self, basin: BlizzardBasin):
        super().__init__()
        self.basin = basin
        self.itinerary = basin.itinerary()
        self.playback = PlaybackState(last_minute=self.itinerary.end_minute)

        self.map_width = (basin.valley.width + 2) * TILE_SIZE
        self.map_height = (basin.valley.height + 2) * TILE_SIZE

        self.ui_manager = arcade.gui.UIManager()
        self.controls = self._setup_controls()

    def _setup_controls(self) -> PlaybackControls:
        slider = arcade.gui.UISlider(
            value=0,
            min_value=0,
            max_value=max(1, self.playback.last_minute),
            width=max(100, self.map_width - 130),
            height=20,
        )
        minute_label = arcade.gui.UILabel(text="t=0", width=60, height=20)
        play_btn = arcade.gui.UIFlatButton(text="Pause", width=60, height=20)

        row = arcade.gui.UIBoxLayout(vertical=False, space_between=5)
        row.add(slider)
        row.add(minute_label)
        row.add(play_btn)

        anchor = arcade.gui.UIAnchorLayout()
        anchor.add(row, anchor_x="left", anchor_y="bottom", align_x=PADDING, align_y=PADDING)
        self.ui_manager.add(anchor)

        @slider.event("on_change")
        def on_slider_change(event: Any) -> None:
            minute = int(round(slider.value))
            if minute != self.playback.minute:
                self.playback.seek(minute)
                self.playback.playing = False

        @play_btn.event("on_click")
        def on_play_click(event: Any) -> None:
            self.toggle_playing()

        return PlaybackControls(slider=slider, minute_label=minute_label, play_btn=play_btn)

    def toggle_playing(self) -> None:
        if self.playback.minute == self.playback.last_minute:
            self.playback.seek(0)
        self.playback.playing = not self.playback.playing

    def on_show_view(self) -> None:
        self.ui_manager.enable()

    def on_hide_view(self) -> None:
        self.ui_manager.disable()

    def on_draw(self) -> None:
        self.clear()
        ox, oy = PADDING, CONTROL_AREA_HEIGHT + PADDING
        minute = self.playback.minute
        draw_walls(self.basin, ox, oy, self.map_width, self.map_height)
        draw_blizzards(self.basin, minute, ox, oy, self.map_height)
        draw_expedition(self.itinerary, minute, ox, oy, self.map_height)
        self.ui_manager.draw()

    def on_update(self, delta_time: float) -> None:
        self.playback.advance(delta_time)
        self.controls.slider.value = self.playback.minute
        self.controls.minute_label.text = f"t={self.playback.minute}"
        self.controls.play_btn.text = "Pause" if self.playback.playing else "Play"
        self.ui_manager.on_update(delta_time)  # type: ignore[no-untyped-call]

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        if symbol == arcade.key.SPACE:
            self.toggle_playing()
        elif symbol == arcade.key.LEFT:
            self.playback.playing = False
            self.playback.seek(self.playback.minute - 1)
        elif symbol == arcade.key.RIGHT:
            self.playback.playing = False
            self.playback.seek(self.playback.minute + 1)
        else:
            return False
        return True


def open_viewer(basin: BlizzardBasin) -> None:
    """Open a window for the valley and block until it is closed."""
    map_width = (basin.valley.width + 2) * TILE_SIZE
    map_height = (basin.valley.height + 2) * TILE_SIZE
    window_width = max(map_width, 300) + PADDING * 2
    window_height = map_height + PADDING * 2 + CONTROL_AREA_HEIGHT

    window = arcade.Window(window_width, window_height, f"Day {basin.DAY}: {basin.TITLE}")
    window.set_update_rate(1/60)

    view = ValleyView(basin)
    window.show_view(view)
    arcade.run()
