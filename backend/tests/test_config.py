"""
Tests for config.Settings - upload directory resolution.
"""

from pathlib import Path

from jobmail import config
from jobmail.config import Settings


class TestUploadPath:
    def test_relative_dir_is_anchored_to_backend(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = Settings(upload_dir="uploads").upload_path

        assert path.is_absolute()
        assert path == Path(config.__file__).resolve().parent.parent / "uploads"
        assert tmp_path not in path.parents

    def test_absolute_dir_is_kept(self, tmp_path):
        assert Settings(upload_dir=str(tmp_path / "files")).upload_path == tmp_path / "files"

    def test_static_mount_serves_the_anchored_dir(self):
        from jobmail.main import app

        mount = next(route for route in app.routes if getattr(route, "name", None) == "uploads")
        assert Path(mount.app.directory).is_absolute()
