import errno
import sys

from . import errors as shellerrors


class _ConvertOSErrors(object):
    """Context manager to convert OSErrors in to shell errors."""

    ERRORS = {
        errno.ENOENT: shellerrors.PathNotFound,
        errno.EEXIST: shellerrors.AlreadyExists,
        183: shellerrors.AlreadyExists,  # ERROR_ALREADY_EXISTS
        errno.ENOTEMPTY: shellerrors.DirectoryNotEmpty,
        errno.ENOTDIR: shellerrors.DirectoryExpected,
        errno.EISDIR: shellerrors.FileExpected,
        errno.EACCES: shellerrors.PermissionDenied,
        errno.EPERM: shellerrors.PermissionDenied,
    }

    def __init__(self, opname, path):
        self._opname = opname
        self._path = path

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type and isinstance(exc_value, OSError):
            _errno = exc_value.errno
            error_class = self.ERRORS.get(_errno)
            # Windows reports removing a non-empty directory as ERROR_DIR_NOT_EMPTY
            if sys.platform == "win32" and getattr(exc_value, "winerror", None) == 145:
                error_class = shellerrors.DirectoryNotEmpty  # pragma: no cover
            if error_class is None:
                error = shellerrors.OperationFailed(
                    self._path,
                    exc=exc_value,
                    msg="{} failed on '{{path}}', {{details}}".format(self._opname),
                )
            else:
                error = error_class(self._path, exc=exc_value)
            raise error.with_traceback(traceback)


# Stops linter complaining about invalid class name
convert_os_errors = _ConvertOSErrors
