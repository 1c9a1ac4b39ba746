from .loader import SelvageConfig, ConfigError, load_config_from_path

__all__ = ["SelvageConfig", "ConfigError", "load_config_from_path"]
