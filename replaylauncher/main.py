"""
Entry points, installed as runnable scripts. Gather arguments from the
command line, the environment and an optional config file, then prepare the
replay and launch the game (or just extract the replay). ::
"""

import argparse
import os
import shutil
import sys
from everett.manager import ConfigManager, ConfigDictEnv, ConfigOSEnv
from everett.ext.yamlfile import ConfigYamlEnv
from everett import ConfigurationError

from replaylauncher import config
from replaylauncher.errors import ReplayError, ReplayIOError, LaunchError
from replaylauncher.launcher import Launcher, LauncherConfig
from replaylauncher.logging import logger, short_exc
from replaylauncher.replay import materialize


__all__ = ["main", "extract_main", "extract_replay"]


VERSION = "0.1.0"
NAMESPACE = "rl"


class MainConfig(config.Config):
    _options = {
        "log_level": {
            "default": "INFO",
            "parser": config.LogLevel.from_config,
            "doc": ("Log level. Name or numeric value corresponding to "
                    "Python's logging module value.")
        },
        "replay_file": {
            "parser": config.is_file,
            "doc": "Replay file to watch (.scfareplay or .fafreplay)."
        },
    }

    def __init__(self, config):
        super().__init__(config)
        self.launcher = LauncherConfig(config.with_namespace("launcher"))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="faf_replay_launcher",
        description="A replay launcher for FAForever")
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("--executable", "-e",
                        metavar="PATH TO ForgedAlliance.exe",
                        help="Path to the ForgedAlliance.exe")
    parser.add_argument("--local-file", "-f", metavar="FILE",
                        help="Path to the replay file you want to watch")
    parser.add_argument("--wrapper", "-w", metavar="WRAPPER",
                        help="Path to the wrapper script (usually for Linux)")
    parser.add_argument("--replay-id", metavar="ID",
                        help="Replay id passed to the game")
    parser.add_argument("--log-level", metavar="LEVEL")
    parser.add_argument("--config", metavar="FILE",
                        help="YAML config file")
    return parser


def flatten_dict(d, prefix=""):
    newd = {}
    for key, val in d.items():
        if isinstance(val, dict):
            newd.update(flatten_dict(val, f"{prefix}{key}_"))
        elif val is not None:
            newd[f"{prefix}{key}"] = val
    return newd


def get_program_config(args, environ=os.environ):
    overrides = {
        NAMESPACE: {
            "log_level": args.log_level,
            "replay_file": args.local_file,
            "launcher": {
                "executable": args.executable,
                "wrapper": args.wrapper,
                "replay_id": args.replay_id,
            },
        },
    }
    sources = [ConfigDictEnv(flatten_dict(overrides)), ConfigOSEnv()]
    config_file = args.config or environ.get("RL_CONFIG_FILE")
    if config_file is not None:
        sources.append(ConfigYamlEnv(config_file))
    manager = ConfigManager(sources)
    return MainConfig(manager.with_namespace(NAMESPACE))


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = get_program_config(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration was provided! {short_exc(e)}")
        return 1

    logger.setLevel(config.log_level)
    logger.info(f"FAF replay launcher version {VERSION} starting")
    try:
        launcher = Launcher.build(config.launcher)
        launcher.run(config.replay_file)
        logger.info("We launched the game. Check for errors!")
        return 0
    except (ReplayError, LaunchError) as e:
        logger.error(f"Could not watch replay: {short_exc(e)}")
        return 1
    except Exception:
        logger.exception("Critical launcher error!")
        return 1


def extract_replay(source, destination):
    """Write the native replay held by source into destination."""
    with materialize(source) as location:
        try:
            shutil.copyfile(location.path, destination)
        except OSError as e:
            raise ReplayIOError(
                f"Could not write replay to {destination}") from e


def extract_main(argv=None):
    parser = argparse.ArgumentParser(
        prog="faf_replay_extract",
        description="Convert a FAF replay into a raw ForgedAlliance replay")
    parser.add_argument("source", help="Replay file to convert")
    parser.add_argument("destination", help="Where to write the raw replay")
    args = parser.parse_args(argv)

    if not os.path.isfile(args.source):
        logger.error(f"No replay file found at {args.source}")
        return 1
    try:
        extract_replay(args.source, args.destination)
        return 0
    except ReplayError as e:
        logger.error(f"Could not extract replay: {short_exc(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
