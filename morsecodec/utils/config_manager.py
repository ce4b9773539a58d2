import logging
import os
from dataclasses import dataclass

from PySide6.QtCore import QSettings

from morsecodec.core.codec import MAX_TOKEN_LENGTH
from morsecodec.core.metadata import APP_VERSION


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodecSettings:
    max_token_length: int = MAX_TOKEN_LENGTH
    fold_case: bool = False


class ConfigManager:
    def __init__(self, config_file="config.ini", config_dir="resources/config"):
        self.config_file = os.path.join(config_dir, config_file)
        os.makedirs(config_dir, exist_ok=True)
        self.settings = QSettings(self.config_file, QSettings.IniFormat)
        self.initialize_config()

    def initialize_config(self):
        """Ensure all required keys exist with sensible defaults."""
        default_values = {
            "Version/current_version": APP_VERSION,
            "Codec/max_token_length": MAX_TOKEN_LENGTH,
            "Codec/fold_case": False,
        }

        for key, value in default_values.items():
            if not self.settings.contains(key):
                self.set_value(key, value)
        self.settings.sync()

    @staticmethod
    def _as_bool(value, default=False):
        if isinstance(value, bool):
            return value
        if value is None:
            return default
        return str(value).strip().lower() in ("true", "1", "yes", "on")

    def get_value(self, key, default=None, value_type=str):
        """Read config value and safely coerce type."""
        try:
            self.settings.sync()
            value = self.settings.value(key, default)
            if value is None:
                return default
            if value_type == bool:
                return self._as_bool(value, default if isinstance(default, bool) else False)
            if value_type == int:
                return int(float(value))
            if value_type == float:
                return float(value)
            if value_type == str:
                return str(value).strip().strip('"').strip("'")
            return value_type(value)
        except Exception as e:
            logger.warning("Failed to read config key %s: %s", key, e)
            return default

    def set_value(self, key, value):
        if value is None:
            value = ""
        self.settings.setValue(key, value)

    def sync(self):
        self.settings.sync()

    # App version
    def get_current_version(self):
        return self.get_value("Version/current_version", value_type=str)

    def set_current_version(self, value):
        self.set_value("Version/current_version", value)

    # Codec
    def get_max_token_length(self):
        value = self.get_value("Codec/max_token_length", MAX_TOKEN_LENGTH, value_type=int)
        if value < 1:
            logger.warning("Ignoring max_token_length %s, using %s", value, MAX_TOKEN_LENGTH)
            return MAX_TOKEN_LENGTH
        return value

    def set_max_token_length(self, value):
        self.set_value("Codec/max_token_length", int(value))

    def get_fold_case(self):
        return self.get_value("Codec/fold_case", False, value_type=bool)

    def set_fold_case(self, value):
        self.set_value("Codec/fold_case", bool(value))

    def get_codec_settings(self) -> CodecSettings:
        return CodecSettings(
            max_token_length=self.get_max_token_length(),
            fold_case=self.get_fold_case(),
        )

    def set_codec_settings(self, settings: CodecSettings):
        self.set_max_token_length(settings.max_token_length)
        self.set_fold_case(settings.fold_case)
        self.settings.sync()
