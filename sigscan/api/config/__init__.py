"""Config API module."""

from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig
from .SigscanConfig import SigscanConfig

__all__ = ["LogConfig", "ScanConfig", "SigscanConfig", "get_config_path", "get_home_dir"]
