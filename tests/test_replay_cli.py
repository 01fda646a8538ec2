import json

import pytest
import yaml

from pursuit.cli import main
from pursuit.core.vec import Vec3
from pursuit.replay import TrackReplay, load_track, parse_track
from pursuit.utils.errors import ValidationError

TRACK = {
    "name": "straight",
    "config": {"estimator": "multi_model", "max_lead_time": 10.0},
    "follower": {"position": {"x": -4.6, "y": 0.0, "z": 0.0}, "speed": 2.0},
    "samples": [{"t": i * 0.1, "position": {"x": i * 0.1, "y": 0.0, "z": 0.0}} for i in range(5)],
}


@pytest.fixture
def track_file(tmp_path):
    path = tmp_path / "track.yaml"
    path.write_text(yaml.safe_dump(TRACK))
    return str(path)


def test_load_track(track_file):
    track = load_track(track_file)
    assert track.name == "straight"
    assert len(track.samples) == 5
    assert track.follower_position == Vec3(-4.6, 0.0, 0.0)
    assert track.follower_speed == 2.0
    assert track.config.max_lead_time == 10.0


def test_parse_track_requires_samples():
    with pytest.raises(ValidationError):
        parse_track({"samples": []})
    with pytest.raises(ValidationError):
        parse_track(["not", "a", "mapping"])


def test_replay_yields_one_frame_per_sample(track_file):
    track = load_track(track_file)
    frames = list(TrackReplay.from_track(track).run(track.samples, track.follower_position,
                                                     track.follower_speed))
    assert len(frames) == 5
    assert all(frame.accepted for frame in frames)
    last = frames[-1]
    assert last.intercept.feasible
    assert last.intercept.time_to_intercept == pytest.approx(5.0, abs=1e-6)
    assert last.to_dict()["intercept"]["feasible"] is True


def test_cli_replay_json(track_file, capsys):
    assert main(["replay", track_file, "--json", "--estimator", "kalman"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 5
    frames = [json.loads(line) for line in lines]
    assert frames[0]["timestamp"] == 0.0
    assert set(frames[-1]["intercept"]) == {"point", "time_to_intercept", "feasible"}


def test_cli_replay_table(track_file, capsys):
    assert main(["replay", track_file, "--horizon", "0.5"]) == 0
    out = capsys.readouterr().out
    assert out.count("t=") == 5
    assert "T-" in out


def test_cli_estimators(capsys):
    assert main(["estimators"]) == 0
    assert "kalman" in capsys.readouterr().out


def test_cli_missing_file(tmp_path, capsys):
    assert main(["replay", str(tmp_path / "missing.yaml")]) == 2
    assert "IO_ERROR" in capsys.readouterr().err


def test_cli_invalid_track(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"config": {"softening": -1}, "samples": [{"t": 0, "position": [0, 0, 0]}]}))
    assert main(["replay", str(path)]) == 2
    assert "VALIDATIONERROR" in capsys.readouterr().err


def test_cli_without_command(capsys):
    assert main([]) == 1


def write_track(tmp_path, **overrides):
    data = dict(TRACK, **overrides)
    path = tmp_path / "track.json"
    path.write_text(json.dumps(data))
    return str(path)


@pytest.mark.parametrize("follower", [
    [0, 0, 0],
    "behind",
    {"position": [0, 0, 0], "speed": "fast"},
    {"position": [0, 0, 0], "speed": [2.0]},
    {"position": {"x": "left"}, "speed": 2.0},
])
def test_parse_track_rejects_bad_follower(follower):
    with pytest.raises(ValidationError):
        parse_track(dict(TRACK, follower=follower))


@pytest.mark.parametrize("follower", [[0, 0, 0], {"position": [0, 0, 0], "speed": "fast"}])
def test_cli_bad_follower_reports_validation_error(tmp_path, capsys, follower):
    assert main(["replay", write_track(tmp_path, follower=follower)]) == 2
    assert "VALIDATIONERROR" in capsys.readouterr().err


def test_cli_non_numeric_sample_reports_validation_error(tmp_path, capsys):
    samples = [{"t": 0.0, "position": {"x": "1", "y": 0, "z": 0}},
               {"t": 0.1, "position": {"x": "east", "y": 0, "z": 0}}]
    assert main(["replay", write_track(tmp_path, samples=samples)]) == 2
    assert "VALIDATIONERROR" in capsys.readouterr().err
