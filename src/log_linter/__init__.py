from log_linter.checks import iter_findings, process
from log_linter.config import ConfigError, default_config, load_config, load_config_or_default
from log_linter.models import Finding, LinterConfig

__all__ = [
    "ConfigError",
    "Finding",
    "LinterConfig",
    "default_config",
    "iter_findings",
    "load_config",
    "load_config_or_default",
    "process",
]
