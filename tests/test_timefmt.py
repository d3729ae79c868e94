from core.services.timefmt import format_pace, format_time, parse_pace, parse_time, round_half_up


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
    assert round_half_up(-2.5) == -3


def test_parse_time_formats():
    assert parse_time("20:00") == 1200
    assert parse_time("1:30:00") == 5400
    assert parse_time(" 42:30 ") == 2550


def test_parse_time_malformed_is_zero():
    assert parse_time("abc") == 0
    assert parse_time("") == 0
    assert parse_time("20") == 0
    assert parse_time("1:2:3:4") == 0
    assert parse_time("20:xx") == 0


def test_parse_pace():
    assert parse_pace("5:18") == 318
    assert parse_pace("5:18:00") == 0
    assert parse_pace("n/a") == 0


def test_format_pace():
    assert format_pace(318) == "5:18"
    assert format_pace(308.4) == "5:08"
    assert format_pace(240) == "4:00"


def test_format_pace_never_shows_sixty_seconds():
    assert format_pace(359.6) == "6:00"


def test_format_time():
    assert format_time(5400) == "1:30:00"
    assert format_time(1260) == "21:00"
    assert format_time(59.5) == "1:00"


def test_pace_format_parse_round_trip():
    for tenths in range(1200, 6000, 7):
        seconds = tenths / 10
        assert abs(parse_pace(format_pace(seconds)) - seconds) <= 1
