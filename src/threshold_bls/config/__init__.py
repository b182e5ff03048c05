from .models import DealerConfig, KeyFormat
from .system import DEALER_CONFIG_ENV_VAR, load_dealer_config, resolve_config_path

__all__ = [
    "DealerConfig",
    "KeyFormat",
    "DEALER_CONFIG_ENV_VAR",
    "load_dealer_config",
    "resolve_config_path",
]
