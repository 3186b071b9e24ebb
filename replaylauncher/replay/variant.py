import os
from enum import Enum


class ReplayVariant(Enum):
    UNKNOWN = 0
    # Raw replay format written by the ForgedAlliance binary itself.
    NATIVE_BINARY = 1
    # FAF's legacy format: a json line, then a base64-ed, prefixed, zipped
    # native replay.
    LEGACY_CONTAINER = 2


SUFFIXES = {
    ".scfareplay": ReplayVariant.NATIVE_BINARY,
    ".fafreplay": ReplayVariant.LEGACY_CONTAINER,
}


def classify(file_name):
    # Only the name counts, the file doesn't even have to exist.
    name = os.fspath(file_name)
    for suffix, variant in SUFFIXES.items():
        if name.endswith(suffix):
            return variant
    return ReplayVariant.UNKNOWN
