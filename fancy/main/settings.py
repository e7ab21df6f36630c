from pathlib import Path
import appdirs
from ..utils import config as cfg
from .loggers import LoggerSettings


def default_config_path():
    return Path(appdirs.user_config_dir("fancy")) / "settings.py"


class FancySettings(cfg.Configurable):
    r"""
    Fields
    ------
    newline : bool
        Append a newline to the printed text.
    """
    newline: bool = True

    logger = LoggerSettings

    class markup(cfg.Configurable):
        r"""
        Fields
        ------
        quotes : str
            The characters accepted as string literal delimiters in source
            mode.
        """
        quotes: str = "\"'"
