"""Tests for custom exceptions."""

from dirdiff.exceptions import DiffIOError


class TestDiffIOError:
    """Test DiffIOError exception."""

    def test_diff_io_error_with_cause(self):
        """Test creating DiffIOError with a path and underlying cause."""
        cause = PermissionError(13, "Permission denied")
        error = DiffIOError("/srv/data", cause)

        assert error.path == "/srv/data"
        assert error.cause is cause
        assert str(error) == "Cannot read /srv/data: [Errno 13] Permission denied"

    def test_diff_io_error_without_cause(self):
        """Test that the cause is optional."""
        error = DiffIOError("/srv/data")

        assert error.cause is None
        assert str(error) == "Cannot read /srv/data"

    def test_diff_io_error_accepts_path_objects(self, tmp_path):
        """Test that path-like objects are stored as strings."""
        error = DiffIOError(tmp_path / "missing")

        assert error.path == str(tmp_path / "missing")
        assert isinstance(error, Exception)
