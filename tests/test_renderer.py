import pytest
from matplotlib.colors import to_rgb

from levelschemer import renderer
from levelschemer.renderer import (
    energy_to_y,
    format_energy,
    render_figure,
    render_to_pdf,
    render_to_svg,
    split_superscript,
    vertical_scale,
)
from levelschemer.scheme import LevelScheme


def _sample():
    scheme = LevelScheme()
    scheme.isotope_label = "^123Ab"
    scheme.add_level(0.0, "0^+", "GS")
    scheme.add_level(1225.1, "2^+", "1st")
    scheme.add_level(5006.5, "4^+", "2nd")
    scheme.add_transition(1225.1, 0.0, "E2", 100.0)
    scheme.add_transition(5006.5, 1225.1, "E2", 80.0)
    scheme.add_threshold(2000.7, "α")
    scheme.add_threshold(3503.4, "p", [8.0, 4.0], 0.0, 0.6, 0.0)
    scheme.add_threshold(4044.1, "n", [], 0.0, 0.0, 1.0)
    return scheme


def test_split_superscript_isotope():
    assert split_superscript("^123Ab") == [("123", True), ("Ab", False)]


def test_split_superscript_spin_parity():
    assert split_superscript("0^+") == [("0", False), ("+", True)]


def test_split_superscript_ends_on_other_char():
    assert split_superscript("^1x2") == [("1", True), ("x2", False)]


def test_split_superscript_plain_text_round_trips():
    assert "".join(run for run, _ in split_superscript("GS level")) == "GS level"


def test_highest_energy_plus_headroom_maps_to_top_margin():
    scheme = _sample()
    scale = vertical_scale(scheme)
    top = 5006.5 + renderer.ENERGY_HEADROOM
    assert energy_to_y(top, scale) == pytest.approx(renderer.MARGIN)


def test_zero_energy_sits_on_bottom_margin():
    scale = vertical_scale(_sample())
    assert energy_to_y(0.0, scale) == renderer.HEIGHT - renderer.MARGIN


def test_thresholds_count_towards_scale():
    scheme = LevelScheme()
    scheme.add_level(0.0, "0^+", "GS")
    low = vertical_scale(scheme)
    scheme.add_threshold(9000.0, "n")
    assert vertical_scale(scheme) < low


def test_format_energy():
    assert format_energy(1225.1) == "1225.1 keV"
    assert format_energy(0.0) == "0 keV"


def test_render_figure_draws_each_element():
    scheme = _sample()
    ax = render_figure(scheme).axes[0]
    assert len(ax.lines) == len(scheme.thresholds) + len(scheme.levels) + len(scheme.transitions)
    assert len(ax.patches) == len(scheme.transitions)


def test_threshold_lines_take_their_colour_and_style():
    ax = render_figure(_sample()).axes[0]
    green, blue = ax.lines[1], ax.lines[2]
    assert to_rgb(green.get_color()) == pytest.approx((0.0, 0.6, 0.0))
    assert blue.get_linestyle() == "-"


def test_transition_labels_and_level_labels():
    texts = [t.get_text() for t in render_figure(_sample()).axes[0].texts]
    assert "E2, 100%" in texts
    assert "E2, 80%" in texts
    assert any(t.startswith("GS (") and t.endswith("0 keV") for t in texts)


def test_downward_arrowhead_apex_on_target_level():
    scheme = _sample()
    scale = vertical_scale(scheme)
    patch = render_figure(scheme).axes[0].patches[0]
    xy = patch.get_xy()
    apex_y = energy_to_y(0.0, scale)
    assert tuple(xy[0]) == pytest.approx((renderer.WIDTH / 2, apex_y))
    assert all(y < apex_y for y in xy[1:3, 1])


def test_invalid_dash_pattern_raises():
    scheme = LevelScheme()
    scheme.add_level(0.0, "0^+", "GS")
    scheme.add_threshold(10.0, "p", [-1.0, 2.0])
    with pytest.raises(ValueError):
        render_figure(scheme)


def test_render_to_pdf(tmp_path):
    path = tmp_path / "scheme.pdf"
    render_to_pdf(_sample(), path)
    assert path.read_bytes().startswith(b"%PDF")


def test_render_to_svg(tmp_path):
    path = tmp_path / "scheme.svg"
    render_to_svg(_sample(), path)
    assert b"<svg" in path.read_bytes()