import pytest
from trendline.render.hover import HoverOverlay


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def overlay(clock: FakeClock) -> HoverOverlay:
    return HoverOverlay([10, 20, 30, 40, 50], clock=clock)


class TestHoverOverlay:
    def test_picks_nearest_value(self, overlay: HoverOverlay):
        # path spans 8..292 of a 300px svg
        state = overlay.move(79, svg_width=300, path_left=8, path_width=284)

        assert state.visible
        assert state.value == 20
        assert state.text == "20"
        assert state.line_x_percent == pytest.approx(79 / 300 * 100)

    def test_path_edges(self, overlay: HoverOverlay):
        assert overlay.move(8, svg_width=300, path_left=8, path_width=284).value == 10
        assert overlay.move(292, svg_width=300, path_left=8, path_width=284).value == 50

    def test_outside_path_hides(self, overlay: HoverOverlay):
        overlay.move(100, svg_width=300, path_left=8, path_width=284)
        state = overlay.move(4, svg_width=300, path_left=8, path_width=284)

        assert not state.visible
        assert state.text == ""

    def test_fades_after_timeout(self, overlay: HoverOverlay, clock: FakeClock):
        overlay.move(150, svg_width=300, path_left=8, path_width=284)

        clock.now += 0.5
        assert overlay.state().visible

        clock.now += 0.5
        assert not overlay.state().visible

    def test_moving_restarts_the_timeout(self, overlay: HoverOverlay, clock: FakeClock):
        overlay.move(150, svg_width=300, path_left=8, path_width=284)
        clock.now += 0.9
        overlay.move(160, svg_width=300, path_left=8, path_width=284)
        clock.now += 0.9

        assert overlay.state().visible

    def test_no_values(self, clock: FakeClock):
        overlay = HoverOverlay([], clock=clock)
        assert not overlay.move(10, svg_width=100, path_left=0, path_width=100).visible

    def test_halfway_rounds_up(self, overlay: HoverOverlay):
        # 12.5 of 100 is exactly between the first and second point
        assert overlay.move(12.5, svg_width=100, path_left=0, path_width=100).value == 20

    def test_readout_shows_the_full_value(self, clock: FakeClock):
        overlay = HoverOverlay([1234567, 2.125], clock=clock)

        assert overlay.move(0, svg_width=100, path_left=0, path_width=100).text == "1234567"
        assert overlay.move(100, svg_width=100, path_left=0, path_width=100).text == "2.125"
