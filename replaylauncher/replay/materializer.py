import os
import tempfile

from replaylauncher.errors import UnsupportedFormatError, ReplayIOError
from replaylauncher.logging import logger, short_exc
from replaylauncher.replay.container import parse
from replaylauncher.replay.decoder import decode
from replaylauncher.replay.location import ExistingPath, MaterializedTempFile
from replaylauncher.replay.variant import ReplayVariant, classify


TEMP_SUFFIX = ".scfareplay"


def write_temp_replay(data, dir=None):
    try:
        fd, path = tempfile.mkstemp(suffix=TEMP_SUFFIX, prefix="faf_replay_",
                                    dir=dir)
    except OSError as e:
        raise ReplayIOError("Could not create temporary replay file") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        try:
            os.unlink(path)
        except OSError as cleanup_error:
            logger.warning(f"Could not remove temporary replay {path}: "
                           f"{short_exc(cleanup_error)}")
        raise ReplayIOError("Could not write temporary replay file") from e
    logger.debug(f"Wrote {len(data)} bytes of replay to {path}")
    return MaterializedTempFile(path)


def materialize(path, temp_dir=None):
    """Get a native replay file for the game out of whatever we were given.

    Native replays are returned as they are. Legacy replays are decoded into a
    temporary file, which is created only once decoding succeeded and deleted
    when the returned location is closed.

    Parameters
    ----------
    path: Path to an existing replay file.
    temp_dir: Where to put the temporary file. Defaults to the system's
        temporary directory.
    """
    variant = classify(path)
    logger.debug(f"Replay {path} classified as {variant.name}")

    if variant == ReplayVariant.NATIVE_BINARY:
        return ExistingPath(path)
    elif variant == ReplayVariant.LEGACY_CONTAINER:
        container = parse(path)
        data = decode(container.encoded_stream)
        return write_temp_replay(data, temp_dir)
    else:
        raise UnsupportedFormatError(f"Unknown replay format: {path}")
