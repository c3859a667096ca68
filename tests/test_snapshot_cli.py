import json

import pytest

from distantstart.cli import main
from distantstart.compatibility.snapshot import load_snapshot, save_snapshot
from distantstart.exceptions import FileLoadException, InvalidSnapshotException
from distantstart.maps.distance import DistanceTable
from distantstart.models.participant import Participant
from distantstart.testing import rsg
from distantstart.utils.validation import (
    validate_participants,
    validate_participants_strict,
)


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _line_snapshot(humans=2, total=5):
    n = total
    return {
        "map": {
            "type": "table",
            "distances": [
                [a * 10, b * 10, (b - a) * 10] for a in range(n) for b in range(a + 1, n)
            ],
        },
        "participants": [
            {
                "id": f"P{i + 1}",
                "name": f"Civ {i + 1}",
                "isHuman": i < humans,
                "positionId": i * 10,
            }
            for i in range(n)
        ],
    }


# ========== Snapshot files ==========


def test_load_and_save_snapshot(tmp_path):
    source = _write(tmp_path / "in.json", _line_snapshot())
    participants, oracle, map_spec = load_snapshot(source)

    assert [p.id for p in participants] == ["P1", "P2", "P3", "P4", "P5"]
    assert participants[0].is_human and not participants[2].is_human
    assert oracle(0, 40) == 40

    save_snapshot(tmp_path / "out" / "copy.json", participants, map_spec)
    again, oracle_again, _ = load_snapshot(tmp_path / "out" / "copy.json")
    assert [p.to_dict() for p in again] == [p.to_dict() for p in participants]
    assert oracle_again(10, 30) == 20


def test_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        load_snapshot(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "content",
    ["not json", "[]", '{"participants": 3}', '{"participants": [{"name": "x"}]}'],
)
def test_malformed_snapshots(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_snapshot(path)



@pytest.mark.parametrize("flag", ["false", "0", 1, 0])
def test_non_boolean_human_flag_rejected(flag):
    with pytest.raises(InvalidSnapshotException):
        Participant.from_dict({"id": "P1", "is_human": flag, "position_id": 3})


@pytest.mark.parametrize("position", [[3, 4], {"x": 3}, True, 1.5])
def test_non_scalar_position_rejected(position):
    with pytest.raises(InvalidSnapshotException):
        Participant.from_dict({"id": "P1", "is_human": True, "position_id": position})


def test_non_object_participant_record_rejected():
    with pytest.raises(InvalidSnapshotException):
        Participant.from_dict(["P1", True, 3])


# ========== Validation ==========


def test_duplicate_positions_and_ids_reported():
    participants = [
        Participant("A", True, 1, participant_id="x"),
        Participant("B", False, 1, participant_id="x"),
    ]
    result = validate_participants(participants)

    assert not result
    assert len(result.errors) == 2
    with pytest.raises(InvalidSnapshotException):
        validate_participants_strict(participants)


def test_unknown_positions_reported():
    participants = [Participant("A", True, 1), Participant("B", False, 2)]
    result = validate_participants(participants, DistanceTable({(1, 3): 2}))

    assert not result
    assert "No distance known" in result.error_message


def test_valid_snapshot_passes():
    participants = [Participant("A", True, 1), Participant("B", False, 3)]
    assert validate_participants(participants, DistanceTable({(1, 3): 2}))


# ========== Command line ==========


def test_cli_rebalances_and_writes_output(tmp_path, capsys):
    source = _write(tmp_path / "in.json", _line_snapshot())
    output = tmp_path / "out.json"

    assert main([str(source), "--output", str(output)]) == 0

    printed = capsys.readouterr().out
    assert "Outcome: balanced" in printed
    assert "Swap: Civ 2 <-> Civ 5 (10 <-> 40)" in printed

    written = json.loads(output.read_text(encoding="utf-8"))
    humans = [p for p in written["participants"] if p["is_human"]]
    assert sorted(p["position_id"] for p in humans) == [0, 40]


def test_cli_dry_run_json(tmp_path, capsys):
    source = _write(tmp_path / "in.json", _line_snapshot())

    assert main([str(source), "--dry-run", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["outcome"] == "balanced"
    assert data["applied"] is False
    assert data["final_positions"] == data["initial_positions"]


def test_cli_participant_cap_is_a_no_op(tmp_path, capsys):
    source = _write(tmp_path / "in.json", _line_snapshot(humans=2, total=5))

    assert main([str(source), "--max-participants", "4"]) == 0
    assert "Outcome: too_many_participants" in capsys.readouterr().out


def test_cli_reads_config_file(tmp_path, capsys):
    source = _write(tmp_path / "in.json", _line_snapshot(humans=3, total=5))
    config = _write(tmp_path / "config.json", {"max_humans": 2})

    assert main([str(source), "--config", str(config)]) == 0
    assert "Outcome: too_many_humans" in capsys.readouterr().out


def test_cli_errors_exit_with_one(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1

    data = _line_snapshot()
    data["participants"][1]["positionId"] = 0
    source = _write(tmp_path / "dup.json", data)
    assert main([str(source)]) == 1
    assert "invalid snapshot" in capsys.readouterr().err



def test_cli_rejects_mistyped_snapshot_fields(tmp_path, capsys):
    data = _line_snapshot()
    data["participants"][2]["isHuman"] = "false"
    source = _write(tmp_path / "flag.json", data)
    assert main([str(source)]) == 1
    assert "is_human must be true or false" in capsys.readouterr().err

    data = _line_snapshot()
    data["participants"][0]["positionId"] = [3, 4]
    source = _write(tmp_path / "position.json", data)
    assert main([str(source)]) == 1
    assert "position_id must be an integer or string" in capsys.readouterr().err


@pytest.mark.parametrize(
    "config_data", [{"max_participants": "12"}, [], {"dry_run": "yes"}]
)
def test_cli_rejects_bad_config_file(tmp_path, capsys, config_data):
    source = _write(tmp_path / "in.json", _line_snapshot())
    config = _write(tmp_path / "config.json", config_data)

    assert main([str(source), "--config", str(config)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_rejects_small_caps(tmp_path):
    source = _write(tmp_path / "in.json", _line_snapshot())
    with pytest.raises(SystemExit):
        main([str(source), "--max-humans", "1"])


def test_generator_writes_a_loadable_snapshot(tmp_path):
    output = tmp_path / "generated.json"
    assert (
        rsg.main(
            [
                "--participants",
                "6",
                "--humans",
                "3",
                "--width",
                "12",
                "--height",
                "8",
                "--output",
                str(output),
            ]
        )
        == 0
    )

    participants, oracle, _ = load_snapshot(output)
    assert len(participants) == 6
    assert sum(p.is_human for p in participants) == 3
    assert validate_participants(participants, oracle)


def test_generator_rejects_impossible_setups(tmp_path, capsys):
    code = rsg.main(
        ["--participants", "2", "--humans", "3", "--output", str(tmp_path / "x.json")]
    )
    assert code == 1
