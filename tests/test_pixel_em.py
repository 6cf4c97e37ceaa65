import pytest

from allwayscalc.services.unit_conversion import PixelEmState, ems_to_pixels, pixels_to_ems, sync_pixel_em


def test_pixels_to_ems():
    assert pixels_to_ems(16, 16) == 1
    assert ems_to_pixels(2, 20) == 40


def test_non_positive_base_is_rejected():
    with pytest.raises(ValueError):
        pixels_to_ems(16, 0)
    with pytest.raises(ValueError):
        ems_to_pixels(1, -4)


def test_sync_from_pixels_updates_ems():
    synced = sync_pixel_em(PixelEmState(pixels="24", ems="1", base_size="16"), "pixels")
    assert synced.ems == "1.5"
    assert synced.pixels == "24"


def test_sync_from_ems_updates_pixels():
    synced = sync_pixel_em(PixelEmState(pixels="16", ems="0.875", base_size="16"), "ems")
    assert synced.pixels == "14"


def test_base_change_keeps_ems_and_recomputes_pixels():
    synced = sync_pixel_em(PixelEmState(pixels="16", ems="2", base_size="20"), "base_size")
    assert synced == PixelEmState(pixels="40", ems="2", base_size="20")


def test_results_round_to_four_decimals():
    synced = sync_pixel_em(PixelEmState(pixels="10", ems="", base_size="3"), "pixels")
    assert synced.ems == "3.3333"


@pytest.mark.parametrize("base_size", ["0", "-16", "", "abc"])
def test_invalid_base_leaves_state_unchanged(base_size):
    state = PixelEmState(pixels="16", ems="1", base_size=base_size)
    assert sync_pixel_em(state, "pixels") == state


def test_unparseable_pixels_leave_state_unchanged():
    state = PixelEmState(pixels="big", ems="1", base_size="16")
    assert sync_pixel_em(state, "pixels") == state
