import pytest

from core.models import PHASE_ORDER, Paces, Phase, RaceDistance, WorkoutType


def test_race_distance_values_and_lengths():
    assert [d.value for d in RaceDistance] == ["5K", "10K", "half", "full"]
    assert RaceDistance.FIVE_K.km == 5.0
    assert RaceDistance.FULL.km == pytest.approx(42.195)
    assert RaceDistance("half").label == "Half Marathon"


def test_phase_order_and_labels():
    assert PHASE_ORDER == (Phase.BASE, Phase.BUILD, Phase.PEAK, Phase.TAPER)
    assert [p.label for p in PHASE_ORDER] == ["Base", "Build", "Peak", "Taper"]


def test_workout_type_quality_flags():
    assert {t for t in WorkoutType if t.is_quality} == {WorkoutType.TEMPO, WorkoutType.INTERVAL}
    assert WorkoutType.REST.label == "Rest Day"


def test_paces_easy_upper_without_range():
    paces = Paces(easy="5:18", marathon="4:36", threshold="4:18", interval="3:54", repetition="3:36")
    assert paces.easy_upper == "5:18"


def test_paces_frozen():
    paces = Paces(easy="5:18-5:48", marathon="4:36", threshold="4:18", interval="3:54", repetition="3:36")
    with pytest.raises(AttributeError):
        paces.easy = "6:00-6:30"
