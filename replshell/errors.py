"""

Defines the Exception classes thrown by replshell operations.

Errors raised by the operating system are translated in to one of
the following exceptions.

All Exception classes are derived from :class:`~replshell.errors.ShellError`
which may be used as a catch-all exception.

"""

__all__ = [
    "AlreadyExists",
    "DirectoryExpected",
    "DirectoryNotEmpty",
    "FileExpected",
    "InvalidOption",
    "OperationFailed",
    "PathNotFound",
    "PermissionDenied",
    "ProcessStartFailure",
    "ResourceError",
    "ShellError",
]


class ShellError(Exception):
    """Base exception class for replshell."""

    default_message = "Unspecified error"

    def __init__(self, msg=None):
        self._msg = msg or self.default_message
        super(ShellError, self).__init__()

    def __str__(self):
        """The error message."""
        msg = self._msg.format(**self.__dict__)
        return msg

    def __repr__(self):
        msg = self._msg.format(**self.__dict__)
        return "{}({!r})".format(self.__class__.__name__, msg)


class InvalidOption(ShellError, ValueError):
    """An option was given that can't be used, or conflicts with another.

    .. note::

        This exception is a subclass of ``ValueError`` as it is a
        problem with the arguments rather than with a resource.

    """

    default_message = "invalid option {option!r}"

    def __init__(self, option, msg=None):
        self.option = option
        super(InvalidOption, self).__init__(msg=msg)


class OperationFailed(ShellError):
    """Base exception class for errors associated with a specific operation."""

    default_message = "operation failed on '{path}', {details}"

    def __init__(self, path=None, exc=None, msg=None):
        self.path = path
        self.exc = exc
        self.details = "" if exc is None else str(exc)
        self.errno = getattr(exc, "errno", None)
        super(OperationFailed, self).__init__(msg=msg)


class ProcessStartFailure(ShellError):
    """The executable could not be found or started."""

    default_message = "could not start process {command!r}: {details}"

    def __init__(self, command, exc=None, msg=None):
        self.command = command
        self.exc = exc
        self.details = "" if exc is None else str(exc)
        super(ProcessStartFailure, self).__init__(msg=msg)


class ResourceError(ShellError):
    """Base exception class for error associated with a specific path."""

    default_message = "failed on path {path}"

    def __init__(self, path, exc=None, msg=None):
        self.path = path
        self.exc = exc
        super(ResourceError, self).__init__(msg=msg)


class PathNotFound(ResourceError):
    """A required file or directory does not exist."""

    default_message = "path '{path}' not found"


class AlreadyExists(ResourceError):
    """The target of a copy or move already exists."""

    default_message = "path '{path}' already exists"


class PermissionDenied(ResourceError):
    """Permissions error."""

    default_message = "permission denied for '{path}'"


class FileExpected(ResourceError):
    """A file was expected but a directory was found."""

    default_message = "path '{path}' should be a file"


class DirectoryExpected(ResourceError):
    """A directory was expected but a file was found."""

    default_message = "path '{path}' should be a directory"


class DirectoryNotEmpty(ResourceError):
    """A directory to be removed is not empty."""

    default_message = "directory '{path}' is not empty"
