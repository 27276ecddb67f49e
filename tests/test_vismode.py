import pytest

from ecosim.vismode import (
    DEFAULT_MODE,
    VIS_MODE_DATA,
    VisMode,
    get_data,
    to_string,
    to_vis_mode,
)


@pytest.mark.parametrize("mode", list(VisMode))
def test_name_round_trip(mode):
    assert to_vis_mode(to_string(mode)) is mode


@pytest.mark.parametrize("mode", list(VisMode))
def test_get_data_matches_mode(mode):
    data = get_data(mode)
    assert data.vis_mode is mode
    assert data.name == to_string(mode)


def test_names_from_source():
    assert to_string(VisMode.TEMPERATURE) == "Temperature"
    assert to_vis_mode("Vegetation") is VisMode.VEGETATION


def test_temperature_legend():
    data = get_data(VisMode.TEMPERATURE)
    assert (data.low_end_name, data.high_end_name) == ("Cold", "Hot")
    assert data.low_end_color == (0, 0, 255)
    assert data.high_end_color == (255, 0, 0)


def test_humidity_colors():
    data = get_data(VisMode.HUMIDITY)
    assert data.low_end_color == (139, 69, 19)
    assert data.high_end_color == (0, 120, 255)


def test_default_mode_is_temperature():
    assert to_string(DEFAULT_MODE) == "Temperature"
    assert get_data(DEFAULT_MODE).vis_mode is VisMode.TEMPERATURE


def test_every_mode_mapped_once():
    names = [to_string(mode) for mode in VisMode]
    assert len(set(names)) == len(list(VisMode))
    assert [to_vis_mode(d.name) for d in VIS_MODE_DATA] == [
        d.vis_mode for d in VIS_MODE_DATA
    ]
    assert sorted(to_vis_mode(n).name for n in names) == sorted(
        m.name for m in VisMode
    )


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        to_vis_mode("Pressure")


def test_name_is_case_sensitive():
    with pytest.raises(ValueError):
        to_vis_mode("temperature")


def test_unmapped_mode_raises():
    with pytest.raises(ValueError):
        get_data("Temperature")