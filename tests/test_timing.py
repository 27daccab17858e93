from mousepong.utils.timing import Stopwatch, timing


def test_timing_reports_frames():
    lines = []
    with timing("session", log=lines.append) as sw:
        sw.frames = 10
    assert len(lines) == 1
    assert lines[0].startswith("session took ")
    assert "10 frames" in lines[0]
    assert sw.elapsed >= 0


def test_timing_without_frames():
    lines = []
    with timing("setup", log=lines.append):
        pass
    assert lines[0].startswith("setup took ") and "frames" not in lines[0]


def test_stopwatch_fps():
    assert Stopwatch(frames=120, elapsed=2.0).fps == 60.0
    assert Stopwatch().fps == 0.0
