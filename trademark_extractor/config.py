"""
Configuration loading and logging setup for the trademark extractor tools.
"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional
import logging
from logging.handlers import RotatingFileHandler

logger = logging.getLogger(__name__)

CONFIG_SEARCH_PATHS = ['config/config.yaml', '../config/config.yaml']
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def default_config() -> Dict[str, Any]:
    return {
        'tsdr': {
            'base_url': 'https://tsdrapi.uspto.gov/ts/cd',
            'api_key': os.environ.get('USPTO_API_KEY'),
            'timeout': 30,
        },
        'logging': {'level': 'INFO'},
    }


def expand_env_vars(obj):
    """Replace '${VAR}' strings with the environment value (None when unset)."""
    if isinstance(obj, dict):
        return {k: expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars(item) for item in obj]
    elif isinstance(obj, str) and obj.startswith('${') and obj.endswith('}'):
        return os.environ.get(obj[2:-1])
    return obj


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the YAML configuration.

    Args:
        config_path: Explicit path; when omitted the usual locations are searched

    Returns:
        Configuration dictionary, the defaults when no file is found
    """
    if config_path is None:
        for path in CONFIG_SEARCH_PATHS:
            if os.path.exists(path):
                config_path = path
                break
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}
            return expand_env_vars(config)
    return default_config()


def setup_logging(config: Dict[str, Any]):
    """Configure the root logger from the 'logging' section."""
    log_config = config.get('logging') or {}
    log_level = getattr(logging, str(log_config.get('level', 'INFO')).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(ch)
    log_file = log_config.get('file')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=10*1024*1024, backupCount=5)
        fh.setLevel(log_level)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(fh)
    logger.debug(f"Logging configured at level {logging.getLevelName(log_level)}")
