"""
User configuration, stored as JSON in ~/.diagtask/config.json.
Missing keys fall back to DEFAULT_CONFIG; a corrupt file is ignored.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type

from ..parsing.task import TaskMessage, WarningTask

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "WARNING",
    "show_unmatched": True,
    "task_type": "warning",
}

# Config name -> payload record type
TASK_TYPES: Dict[str, Type[TaskMessage]] = {
    "warning": WarningTask,
}


def resolve_task_type(name: str) -> Optional[Type[TaskMessage]]:
    return TASK_TYPES.get(name)


class ConfigManager:
    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".diagtask"
        self.config_file = self.config_dir / "config.json"
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config = DEFAULT_CONFIG.copy()

        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    user_config = json.load(f)
                if isinstance(user_config, dict):
                    config.update(user_config)
                else:
                    logger.warning("Ignoring %s: expected a JSON object", self.config_file)
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)

        return config

    def save_config(self):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(self.config, f, indent=4)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        self.config[key] = value
        self.save_config()
