# errors.py
class StackDiffError(Exception):
    """Base class for failures that abort a diff before any output."""


class NotEnoughProfilesError(StackDiffError):
    def __init__(self):
        super().__init__('"diff" requires at least 2 profiles')


class NoColumnsError(StackDiffError):
    def __init__(self):
        super().__init__("no table columns specified for diff output")


class UnsupportedColumnError(StackDiffError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unsupported column {name!r}")


class UnsupportedUnitError(StackDiffError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unsupported display unit {name!r}")


class ProfileLoadError(StackDiffError):
    """Raised when a profile file cannot be read or deserialized."""
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"could not load profile {path}: {message}")
