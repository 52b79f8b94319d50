# errors.py
#
# Everything that ends a run early. The CLI turns each of these into
# exit status 1 plus the message.


class ReverseCatError(Exception):
    """Base class for all terminal errors of a reverse-cat run."""


class MissingArguments(ReverseCatError):
    pass


class SourceNotFound(ReverseCatError):
    def __init__(self, prog: str, path):
        self.path = path
        super().__init__(f"{prog}: source file {path} does not exist")


class DestinationAlreadyExists(ReverseCatError):
    def __init__(self, prog: str, path):
        self.path = path
        super().__init__(f"{prog}: destination file {path} already exists and would be overwritten")


class SourceUnreadable(ReverseCatError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Could not read source file: {path}")


class EmptySource(ReverseCatError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Source file has no lines: {path} (use --allow-empty to accept)")


class DestinationUnwritable(ReverseCatError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Could not open destination for writing: {path}")


class WriteFailure(ReverseCatError):
    def __init__(self, path):
        self.path = path
        target = path if path is not None else "standard output"
        super().__init__(f"Write failed, output is incomplete: {target}")


class LineStoreMemoryError(ReverseCatError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Out of memory after storing {count} line(s)")
