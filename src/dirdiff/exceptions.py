from typing import Optional

from dirdiff.types import PathType


class DiffIOError(Exception):
    """
    Exception raised when a filesystem entry needed for a comparison cannot be read.

    This is the single failure kind of the package. It covers a missing path, denied
    permission, a directory listing attempted on something that is not a directory, and
    file content that cannot be decoded as text. The failure is never retried and always
    aborts the whole comparison; there is no partial result.

    Attributes:
        path (str): The path that could not be listed or read.
        cause (Optional[BaseException]): The underlying exception, also chained as ``__cause__``
            when raised by this package.

    Example:
        >>> error = DiffIOError("/data/missing", FileNotFoundError(2, "No such file or directory"))
        >>> error.path
        '/data/missing'
        >>> str(error)
        'Cannot read /data/missing: [Errno 2] No such file or directory'
    """

    def __init__(self, path: PathType, cause: Optional[BaseException] = None) -> None:
        """
        Initialize the exception with the offending path and its underlying cause.

        Args:
            path (PathType): Path that could not be accessed.
            cause (Optional[BaseException]): The exception raised by the filesystem primitive.
        """
        self.path = str(path)
        self.cause = cause
        message = f"Cannot read {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
