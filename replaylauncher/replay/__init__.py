from replaylauncher.replay.variant import ReplayVariant, classify
from replaylauncher.replay.container import LegacyContainer, parse
from replaylauncher.replay.decoder import decode
from replaylauncher.replay.location import ReplayLocation, ExistingPath, \
        MaterializedTempFile
from replaylauncher.replay.materializer import materialize

__all__ = ["ReplayVariant", "classify", "LegacyContainer", "parse", "decode",
           "ReplayLocation", "ExistingPath", "MaterializedTempFile",
           "materialize"]
