from replaylauncher.errors import ReplayIOError, CorruptReplayError


class LegacyContainer:
    def __init__(self, metadata_line, encoded_stream):
        self.metadata_line = metadata_line
        self.encoded_stream = encoded_stream

    def __repr__(self):
        return (f"LegacyContainer(metadata_line={self.metadata_line!r}, "
                f"encoded_stream=<{len(self.encoded_stream)} chars>)")


def _strip_eol(line):
    return line.rstrip(b"\r\n")


def parse(path):
    """Split a legacy replay file into its two lines.

    The first line holds the replay's json metadata, the second the encoded
    replay stream. Neither is validated here; anything past the second line
    is ignored.
    """
    try:
        with open(path, "rb") as f:
            metadata = f.readline()
            stream = f.readline() if metadata else b""
    except OSError as e:
        raise ReplayIOError(f"Could not read replay file {path}") from e

    if not metadata:
        raise CorruptReplayError(
            "Replay corrupt - replay metadata json is missing")
    if not stream:
        raise CorruptReplayError(
            "Replay corrupt - binary replay stream is missing")

    return LegacyContainer(
        _strip_eol(metadata).decode("utf-8", errors="replace"),
        # Non-ascii junk ends up as replacement chars, which base64 rejects.
        _strip_eol(stream).decode("ascii", errors="replace"))
