import pytest

from core.models import Phase, RaceDistance
from core.services.mileage import _week_mileage, mileage_progression, peak_mileage_for
from core.services.phases import PhaseAllocation, allocate_phases


def test_peak_mileage_bounds():
    assert peak_mileage_for(RaceDistance.FIVE_K, 10) == 30
    assert peak_mileage_for(RaceDistance.TEN_K, 50) == 60
    assert peak_mileage_for(RaceDistance.HALF, 40) == 60
    assert peak_mileage_for(RaceDistance.FULL, 40) == 60
    assert peak_mileage_for(RaceDistance.FULL, 100) == 80


def test_peak_mileage_rounds_half_up():
    assert peak_mileage_for(RaceDistance.FIVE_K, 25) == 38


def test_sixteen_week_progression():
    progression = mileage_progression(30, 60, allocate_phases(16))
    assert progression == [32, 35, 37, 40, 42, 45, 48, 51, 41, 57, 60, 57, 57, 48, 30, 18]


def test_progression_has_one_value_per_allocated_week():
    for total in (8, 9, 12, 20, 30):
        allocation = allocate_phases(total)
        assert len(mileage_progression(20, 50, allocation)) == sum(a.weeks for a in allocation)


def test_base_ramps_to_seventy_percent_of_peak():
    progression = mileage_progression(20, 60, [PhaseAllocation(Phase.BASE, 4)])
    assert progression[-1] == 42
    assert progression == sorted(progression)


def test_build_fourth_week_is_recovery():
    # 42 + 18 * 4/6 = 54 before the cutback
    assert _week_mileage(Phase.BUILD, 4, 6, 30, 60) == pytest.approx(54 * 0.75)
    assert _week_mileage(Phase.BUILD, 3, 6, 30, 60) == pytest.approx(51)


def test_peak_every_third_week_drops():
    progression = mileage_progression(30, 60, [PhaseAllocation(Phase.PEAK, 6)])
    assert progression == [57, 57, 48, 57, 57, 48]


def test_taper_decays():
    progression = mileage_progression(30, 60, [PhaseAllocation(Phase.TAPER, 4)])
    assert progression == [36, 30, 24, 18]


def test_week_mileage_accepts_phase_strings():
    assert _week_mileage("peak", 1, 3, 30, 60) == pytest.approx(57)
