from .loader import CONFIG_ENV_VAR, default_config, load_config
from .models import TrimConfig

__all__ = ["CONFIG_ENV_VAR", "TrimConfig", "default_config", "load_config"]
