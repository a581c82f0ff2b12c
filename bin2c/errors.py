class Bin2cException(Exception):
    pass


class ArgumentError(Bin2cException):
    pass


class PathTooLong(Bin2cException):
    pass


class NameTooLong(Bin2cException):
    pass


class CountOverflow(Bin2cException):
    pass


class IoError(Bin2cException):
    def __init__(self, path, cause=None):
        self.path = path
        self.cause = cause
        message = f"{self.verb} '{path}'"
        if cause is not None:
            message += ": %s" % (getattr(cause, "strerror", None) or cause)
        super().__init__(message)


class IoOpenError(IoError):
    verb = "cannot open"


class IoReadError(IoError):
    verb = "cannot read"


class IoWriteError(IoError):
    verb = "cannot write"


class IoFlushError(IoError):
    verb = "cannot flush"


def error(message):
    raise Bin2cException(message)
