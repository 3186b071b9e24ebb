import os

from replaylauncher.logging import logger, short_exc


class ReplayLocation:
    """
    A native replay file the game can be pointed at. Use as a context manager
    and keep it open until the game is done with the file; closing may delete
    it.
    """
    def __init__(self, path):
        self._path = os.fspath(path)

    @property
    def path(self):
        return self._path

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class ExistingPath(ReplayLocation):
    """
    A replay that was native to begin with. We don't own it and never touch
    it.
    """
    def __repr__(self):
        return f"ExistingPath({self._path!r})"


class MaterializedTempFile(ReplayLocation):
    """
    A temporary file we extracted a replay into. Owned by this object, removed
    on close().
    """
    def __init__(self, path):
        ReplayLocation.__init__(self, path)
        self._closed = False

    @property
    def path(self):
        if self._closed:
            raise ValueError(f"Temporary replay {self._path} was removed")
        return self._path

    @property
    def closed(self):
        return self._closed

    def close(self):
        if self._closed:
            return
        self._closed = True
        try:
            os.unlink(self._path)
            logger.debug(f"Removed temporary replay {self._path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            # Still locked, e.g. by a game process that hasn't quite exited.
            logger.warning(f"Could not remove temporary replay {self._path}: "
                           f"{short_exc(e)}")

    def __repr__(self):
        return f"MaterializedTempFile({self._path!r})"
