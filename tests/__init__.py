from everett.manager import ConfigManager, ConfigDictEnv

__all__ = ["config_from_dict"]


def config_from_dict(d):
    def flatten_dict(d, prefix=""):
        newd = {}
        for key, val in d.items():
            if isinstance(val, dict):
                flatval = flatten_dict(val, f"{prefix}{key}_")
                newd.update(flatval)
            else:
                newd[f"{prefix}{key}"] = val
        return newd

    flatd = flatten_dict(d)
    return ConfigManager([ConfigDictEnv(flatd)])
