from .generator import SnapshotWriter, write_json_files

__all__ = ["SnapshotWriter", "write_json_files"]
