"""
Tests for writing the display files
"""

import json

import pytest

from nowplaying.output import SnapshotWriter, write_json_files


class TestWriteJsonFiles:
    """Tests for write_json_files()"""

    def test_writes_all_files(self, tmp_path):
        """Test every payload reaches its target and no temp files remain"""
        write_json_files({
            tmp_path / "a.json": {"x": 1},
            tmp_path / "sub" / "b.json": {"y": "Bjørk"},
        })

        assert json.loads((tmp_path / "a.json").read_text(encoding="utf-8")) == {"x": 1}
        assert "Bjørk" in (tmp_path / "sub" / "b.json").read_text(encoding="utf-8")
        assert not list(tmp_path.rglob("*.tmp"))

    def test_failure_leaves_targets_untouched(self, tmp_path):
        """Test a payload that cannot be serialized stops every write"""
        first = tmp_path / "latest.json"
        first.write_text('{"date": "2026-10-18"}', encoding="utf-8")

        with pytest.raises(TypeError):
            write_json_files({
                first: {"date": "2026-10-19"},
                tmp_path / "2026-10-19.json": {"items": object()},
            })

        assert json.loads(first.read_text(encoding="utf-8")) == {"date": "2026-10-18"}
        assert not (tmp_path / "2026-10-19.json").exists()
        assert [p.name for p in tmp_path.iterdir()] == ["latest.json"]


class TestSnapshotWriter:
    """Tests for SnapshotWriter.payloads()"""

    def test_station_files_and_latest(self, tmp_path, make_snapshot):
        snapshot = make_snapshot(artist="Queen", title="Bohemian Rhapsody")

        files = SnapshotWriter(tmp_path).payloads("2026-10-19", [snapshot])

        assert set(files) == {tmp_path / "kfm.json", tmp_path / "latest.json"}
        assert files[tmp_path / "kfm.json"]["artist"] == "Queen"
        assert files[tmp_path / "latest.json"] == {
            "date": "2026-10-19",
            "stations": [snapshot.to_dict()],
        }
