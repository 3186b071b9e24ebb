import os
import subprocess
import sys

from replaylauncher import config
from replaylauncher.errors import LaunchError
from replaylauncher.logging import logger
from replaylauncher.replay import materialize


class LauncherConfig(config.Config):
    _options = {
        "executable": {
            "parser": config.is_file,
            "doc": "Path to ForgedAlliance.exe."
        },
        "wrapper": {
            "default": "",
            "parser": config.optional_file,
            "doc": ("Program to run the executable through, e.g. a wine "
                    "script on Linux. Gets the executable path as its first "
                    "argument.")
        },
        "replay_id": {
            "default": "12345",
            "parser": config.nonnegative_int,
            "doc": "Replay id passed to the game."
        },
    }


class Launcher:
    def __init__(self, executable, wrapper, replay_id):
        self._executable = executable
        self._wrapper = wrapper
        self._replay_id = replay_id

    @classmethod
    def build(cls, config):
        return cls(config.executable, config.wrapper, config.replay_id)

    def command(self, replay_path):
        if self._wrapper is not None:
            cmd = [self._wrapper, self._executable]
        else:
            cmd = [self._executable]
        cmd += ["/init", "init.lua",
                "/nobugreport",
                "/replay", replay_path,
                "/replayid", str(self._replay_id)]
        return cmd

    def launch(self, replay_path):
        """Run the game on a native replay file and wait for it to exit.

        The game's output is forwarded to our stdout and stderr. Returns the
        game's exit code.
        """
        cmd = self.command(replay_path)
        cwd = os.path.dirname(os.path.abspath(self._executable))
        logger.info(f"Launching {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=cwd, stdout=subprocess.PIPE,
                                    stderr=subprocess.PIPE)
        except OSError as e:
            raise LaunchError(f"Game failed to launch: {e}") from e

        sys.stdout.buffer.write(result.stdout)
        sys.stdout.buffer.flush()
        sys.stderr.buffer.write(result.stderr)
        sys.stderr.buffer.flush()
        logger.info(f"Game exited with code {result.returncode}")
        return result.returncode

    def run(self, replay_file):
        # The temporary replay must outlive the game process.
        with materialize(replay_file) as location:
            return self.launch(location.path)
