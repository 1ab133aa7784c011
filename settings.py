# settings.py
import json
import logging
import os
import platform
from dataclasses import asdict, dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# =====================
# USTAWIENIA - zapis/odczyt (USER)
# =====================
SETTINGS_FOLDER_NAME = "Dino Runner"
SETTINGS_FILENAME = "setting.json"

JUMP_KEYS = ("w", "space", "up")
MIN_COLUMNS = 60
MAX_LEVEL = 10


@dataclass
class UserSettings:
    jump_key: str = "w"
    columns: int = 100          # szerokość pola gry w znakach
    level: int = 1
    seed: Optional[int] = None  # None = losowo przy każdym starcie
    allow_air_jump: bool = True


def get_settings_path() -> Tuple[str, str]:
    # "lokalizacja użytkownika": na Windows APPDATA, gdzie indziej katalog domowy
    base = None
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA")
    if not base:
        base = os.path.expanduser("~")

    folder = os.path.join(base, SETTINGS_FOLDER_NAME)
    return folder, os.path.join(folder, SETTINGS_FILENAME)


def _apply(settings: UserSettings, data: dict) -> UserSettings:
    if "jump_key" in data:
        v = str(data["jump_key"]).lower().strip()
        if v in JUMP_KEYS:
            settings.jump_key = v

    if "columns" in data:
        try:
            settings.columns = max(MIN_COLUMNS, int(data["columns"]))
        except (TypeError, ValueError):
            logger.warning("ignoring invalid columns value %r", data["columns"])

    if "level" in data:
        try:
            settings.level = max(1, min(MAX_LEVEL, int(data["level"])))
        except (TypeError, ValueError):
            logger.warning("ignoring invalid level value %r", data["level"])

    if "seed" in data:
        seed = data["seed"]
        if seed is None or (isinstance(seed, int) and not isinstance(seed, bool)):
            settings.seed = seed
        else:
            logger.warning("ignoring invalid seed value %r", seed)

    if "allow_air_jump" in data:
        settings.allow_air_jump = bool(data["allow_air_jump"])

    return settings


def load_user_settings(path: Optional[str] = None) -> UserSettings:
    """Read settings from disk; a missing file is created with the defaults."""
    if path is None:
        _folder, path = get_settings_path()

    settings = UserSettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        # pierwszy start: utwórz plik z domyślnymi ustawieniami
        save_user_settings(settings, path)
        return settings
    except (OSError, ValueError) as e:
        # uszkodzony plik / brak uprawnień: zostaw domyślne
        logger.warning("could not read settings from %s: %s", path, e)
        return settings

    if not isinstance(data, dict):
        logger.warning("settings file %s does not hold an object, using defaults", path)
        return settings
    return _apply(settings, data)


def save_user_settings(settings: UserSettings, path: Optional[str] = None) -> bool:
    if path is None:
        _folder, path = get_settings_path()

    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(settings), f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.warning("could not save settings to %s: %s", path, e)
        return False
    return True
