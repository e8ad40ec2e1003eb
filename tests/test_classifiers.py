"""
Unit tests for path classifiers.

Tests cover:
- Filesystem classification of directories, files and symlinks
- Missing and relative paths raising configuration errors
- Open and closed-world static classifiers
- The classifier factory
"""
import os

import pytest

from sandsync.sync.classifiers import (
    FilesystemClassifier,
    StaticClassifier,
    get_classifier,
)
from sandsync.sync.errors import InvalidVolumePathError, PathNotFoundError, VolumeError


class TestFilesystemClassifier:
    """Test classification against the real disk."""

    @pytest.fixture
    def classifier(self) -> FilesystemClassifier:
        return FilesystemClassifier()

    def test_directory(self, classifier, tmp_path):
        assert classifier.is_dir(str(tmp_path)) is True

    def test_file(self, classifier, tmp_path):
        target = tmp_path / "settings.json"
        target.write_text("{}")
        assert classifier.is_dir(str(target)) is False

    def test_symlink_to_directory_is_directory(self, classifier, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        os.symlink(real, link)
        assert classifier.is_dir(str(link)) is True

    def test_missing_path_is_not_a_file(self, classifier, tmp_path):
        missing = tmp_path / "typo"
        with pytest.raises(PathNotFoundError) as exc_info:
            classifier.is_dir(str(missing))
        assert exc_info.value.path == str(missing)

    def test_path_beneath_a_file(self, classifier, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(PathNotFoundError):
            classifier.is_dir(str(target / "child"))

    def test_symlink_loop_is_volume_error(self, classifier, tmp_path):
        loop = tmp_path / "loop"
        os.symlink(loop, loop)
        with pytest.raises(VolumeError, match="Cannot read volume"):
            classifier.is_dir(str(loop))

    def test_overlong_name_is_volume_error(self, classifier, tmp_path):
        with pytest.raises(VolumeError, match="Cannot read volume"):
            classifier.is_dir(str(tmp_path / ("x" * 300)))

    def test_embedded_nul_is_volume_error(self, classifier, tmp_path):
        with pytest.raises(VolumeError, match="Cannot read volume"):
            classifier.is_dir(f"{tmp_path}/bad\x00name")

    def test_relative_path_rejected(self, classifier):
        with pytest.raises(InvalidVolumePathError):
            classifier.is_dir("relative/path")

    def test_errors_share_a_base(self):
        assert issubclass(PathNotFoundError, VolumeError)
        assert issubclass(InvalidVolumePathError, VolumeError)


class TestStaticClassifier:
    """Test the in-memory classifier."""

    def test_open_world_defaults_to_file(self):
        classifier = StaticClassifier(dirs=["/a"])
        assert classifier.is_dir("/a") is True
        assert classifier.is_dir("/a/anything") is False

    def test_paths_are_normalized(self):
        classifier = StaticClassifier(dirs=["/a/b/"])
        assert classifier.is_dir("/a//b") is True

    def test_closed_world(self):
        classifier = StaticClassifier(dirs=["/a"], files=["/a/f"])
        assert classifier.is_dir("/a") is True
        assert classifier.is_dir("/a/f") is False
        with pytest.raises(PathNotFoundError):
            classifier.is_dir("/a/g")


class TestGetClassifier:
    """Test the classifier factory."""

    def test_filesystem(self):
        classifier = get_classifier("filesystem")
        assert isinstance(classifier, FilesystemClassifier)
        assert classifier.name == "Filesystem"

    def test_static_with_dirs(self):
        classifier = get_classifier("static", dirs=["/srv"])
        assert isinstance(classifier, StaticClassifier)
        assert classifier.is_dir("/srv") is True

    def test_filesystem_rejects_static_options(self):
        with pytest.raises(TypeError):
            get_classifier("filesystem", dirs=["/srv"])

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown classifier"):
            get_classifier("inotify")
