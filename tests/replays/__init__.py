import json
import base64
import struct
import zlib


__all__ = ["pack_legacy_replay", "example_info", "example_data"]


example_info = {
    "uid": 1111,
    "complete": True,
    "state": "PLAYING",
    "featured_mod": "faf",
    "title": "Name of the game",
    "mapname": "scmp_1",
    "teams": {"1": ["user1"], "2": ["user2"]},
}
# Not a real replay, but the launcher never looks inside.
example_data = bytes(range(256)) * 8 + b"Supreme Commander v1.50.3701\0"


# Same layout the replay server writes .fafreplay files with.
def pack_legacy_replay(data, info=None):
    if info is None:
        info = example_info
    head = json.dumps(info).encode('UTF-8')
    body = struct.pack("i", len(data)) + zlib.compress(data)
    return head + b"\n" + base64.b64encode(body)
