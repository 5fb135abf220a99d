from .loader import load_config
from .models import OutputConfig, Properties2JsonConfig

__all__ = [
    "OutputConfig",
    "Properties2JsonConfig",
    "load_config",
]
