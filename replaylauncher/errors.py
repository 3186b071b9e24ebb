class ReplayError(Exception):
    """
    Superclass for everything that can be wrong with a replay file we were
    asked to open. Nothing is retried; the whole launch is aborted.
    """


class UnsupportedFormatError(ReplayError):
    """
    Used when the file name doesn't end with a replay suffix we know.
    """
    pass


class ReplayIOError(ReplayError):
    """
    Used when the replay file (or the temporary file we extract it to) can't
    be opened, read or written.
    """
    pass


class CorruptReplayError(ReplayError):
    """
    Used for legacy replays that are structurally broken: missing lines, bad
    base64, a stream too short for its header or one that doesn't inflate.
    """
    pass


class LaunchError(Exception):
    """
    Used by Launcher when the game (or its wrapper) could not be started.
    """
    pass
