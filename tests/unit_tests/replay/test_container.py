import pytest

from replaylauncher.replay.container import parse
from replaylauncher.errors import CorruptReplayError, ReplayIOError


def test_parse_two_lines(legacy_replay_file):
    rfile = legacy_replay_file(b'{"meta":true}\nAAAABBBB')
    container = parse(rfile)
    assert container.metadata_line == '{"meta":true}'
    assert container.encoded_stream == "AAAABBBB"


def test_parse_strips_line_endings(legacy_replay_file):
    rfile = legacy_replay_file(b'{"meta":true}\r\nAAAABBBB\r\n')
    container = parse(rfile)
    assert container.metadata_line == '{"meta":true}'
    assert container.encoded_stream == "AAAABBBB"


def test_parse_ignores_trailing_lines(legacy_replay_file):
    rfile = legacy_replay_file(b'{}\nAAAABBBB\nwhatever\n\xff\xfe')
    container = parse(rfile)
    assert container.encoded_stream == "AAAABBBB"


def test_parse_does_not_validate_metadata(legacy_replay_file):
    rfile = legacy_replay_file(b'this is not json\nAAAA')
    assert parse(rfile).metadata_line == "this is not json"


def test_parse_empty_file(legacy_replay_file):
    rfile = legacy_replay_file(b'')
    with pytest.raises(CorruptReplayError) as e:
        parse(rfile)
    assert "metadata" in str(e.value)


@pytest.mark.parametrize("content", [b'{"meta":true}', b'{"meta":true}\n'])
def test_parse_missing_stream(legacy_replay_file, content):
    rfile = legacy_replay_file(content)
    with pytest.raises(CorruptReplayError) as e:
        parse(rfile)
    assert "stream" in str(e.value)


def test_parse_empty_stream_line_is_not_missing(legacy_replay_file):
    # It's there, it's just empty. Decoding will complain about it.
    rfile = legacy_replay_file(b'{}\n\n')
    assert parse(rfile).encoded_stream == ""


def test_parse_non_ascii_stream(legacy_replay_file):
    rfile = legacy_replay_file(b'{}\nAAAA\xc0BBB')
    container = parse(rfile)
    assert container.encoded_stream.startswith("AAAA")
    assert container.encoded_stream != "AAAABBB"


def test_parse_nonexistent_file(tmpdir):
    with pytest.raises(ReplayIOError):
        parse(str(tmpdir.join("missing.fafreplay")))


def test_parse_directory(tmpdir):
    with pytest.raises(ReplayIOError):
        parse(str(tmpdir.mkdir("dir.fafreplay")))
