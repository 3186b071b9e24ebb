import pytest

from tests.replays import pack_legacy_replay, example_data


@pytest.fixture
def legacy_replay_file(tmpdir):
    def build(content=None, name="1111.fafreplay"):
        if content is None:
            content = pack_legacy_replay(example_data)
        rfile = tmpdir.join(name)
        rfile.write_binary(content)
        return str(rfile)

    return build


@pytest.fixture
def native_replay_file(tmpdir):
    rfile = tmpdir.join("1111.scfareplay")
    rfile.write_binary(example_data)
    return str(rfile)


@pytest.fixture
def game_executable(tmpdir):
    exe = tmpdir.mkdir("bin").join("ForgedAlliance.exe")
    exe.write_binary(b"")
    return str(exe)


@pytest.fixture
def wrapper_script(tmpdir):
    wrapper = tmpdir.join("run_with_wine.sh")
    wrapper.write("#!/bin/sh\n")
    return str(wrapper)
