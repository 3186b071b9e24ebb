from replaylauncher.launcher import Launcher, LauncherConfig

__all__ = ["Launcher", "LauncherConfig"]
