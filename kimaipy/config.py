"""Settings file handling for kimaiPy.

Settings live in an INI file (``settings.ini``) with a ``[serversettings]``
section and an optional ``[argos_bitbar]`` section. The file is searched for
in the locations returned by :func:`settings_search_paths`; the
``KIMAI_CONFIG`` environment variable (also read from ``kimaipy.env``) points
at a specific file.
"""
import configparser
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigError, ConfigMissing

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.ini"
APP_DIRNAME = "kimaipy"
ENV_VAR = "KIMAI_CONFIG"
DEFAULT_BUTTON_LENGTH = 10

SERVER_SECTION = "serversettings"
ARGOS_SECTION = "argos_bitbar"


@dataclass(frozen=True)
class ServerSettings:
    """Connection settings for the Kimai server.

    Surrounding whitespace is removed, as the settings file cannot keep it.
    """

    base_url: str
    username: str
    api_token: str

    def __post_init__(self):
        for name in ("base_url", "username", "api_token"):
            object.__setattr__(self, name, getattr(self, name).strip())


@dataclass(frozen=True)
class ArgosSettings:
    """Settings for the Argos/BitBar status-bar output."""

    kimai_path: str = APP_DIRNAME
    button_length: int = DEFAULT_BUTTON_LENGTH


@dataclass(frozen=True)
class Settings:
    """Everything read from the settings file."""

    server: ServerSettings
    argos: ArgosSettings = field(default_factory=ArgosSettings)
    path: Optional[str] = None


# --- Environment Setup ---
def project_dir() -> str:
    """Directory containing the kimaipy package (the development location)."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

def load_environment() -> None:
    """Load environment variables from the kimaipy.env file, if there is one."""
    env_file = os.path.join(project_dir(), 'kimaipy.env')
    if os.path.exists(env_file):
        load_dotenv(env_file)

def installer_dir() -> Optional[str]:
    appdata = os.getenv("APPDATA")
    return os.path.join(appdata, APP_DIRNAME) if appdata else None

def binary_dir() -> Optional[str]:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return None

def settings_search_paths() -> List[str]:
    """Get candidate settings file locations, most specific first.

    Returns:
        List of file paths (not all of them need to exist)
    """
    paths = []
    env_path = os.getenv(ENV_VAR)
    if env_path:
        logger.debug("Found in %s envvar: %s", ENV_VAR, env_path)
        paths.append(env_path)
    else:
        logger.debug("No %s environment variable found", ENV_VAR)
    for directory in (installer_dir(), binary_dir(), project_dir()):
        if directory:
            paths.append(os.path.join(directory, SETTINGS_FILENAME))
    return paths

def find_settings_path() -> str:
    """Find the settings file.

    Returns:
        Path of the first existing settings file

    Raises:
        ConfigMissing: If none of the candidate locations has a file
    """
    candidates = settings_search_paths()
    logger.debug("Looking for %s in: %s", SETTINGS_FILENAME, candidates)
    env_path = os.getenv(ENV_VAR)
    for path in candidates:
        if os.path.isfile(path):
            return path
        if path == env_path:
            logger.warning("%s points to a missing file: %s", ENV_VAR, path)
    raise ConfigMissing(f"{SETTINGS_FILENAME} not found")

def default_settings_path() -> str:
    """Get the location where new settings are saved, creating its folder if needed.

    Returns:
        Settings file path
    """
    directory = None
    if sys.platform == "win32":
        directory = installer_dir()
        if directory:
            logger.debug("Using installer settings location")
    if not directory:
        directory = binary_dir()
    if not directory:
        directory = project_dir()
    os.makedirs(directory, exist_ok=True)
    return os.path.join(directory, SETTINGS_FILENAME)

def default_argos_settings() -> ArgosSettings:
    if sys.platform == "darwin":
        return ArgosSettings(kimai_path=os.path.abspath(sys.argv[0]))
    return ArgosSettings()

def read_settings(path: str) -> Settings:
    """Read settings from an INI file.

    Args:
        path: Settings file path

    Returns:
        Settings

    Raises:
        ConfigMissing: If the server section or one of its keys is missing
        ConfigError: If the file is not valid INI or a value has the wrong type
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    if not parser.has_section(SERVER_SECTION):
        raise ConfigMissing(f"Section [{SERVER_SECTION}] missing in {path}")
    section = parser[SERVER_SECTION]
    missing = [key for key in ("kimaiurl", "username", "password") if key not in section]
    if missing:
        raise ConfigMissing(f"Missing {', '.join(missing)} in [{SERVER_SECTION}] of {path}")
    server = ServerSettings(
        base_url=section["kimaiurl"],
        username=section["username"],
        api_token=section["password"],
    )

    argos = ArgosSettings()
    if parser.has_section(ARGOS_SECTION):
        argos_section = parser[ARGOS_SECTION]
        try:
            button_length = argos_section.getint("buttonlength", argos.button_length)
        except ValueError as e:
            raise ConfigError(f"buttonlength in [{ARGOS_SECTION}] of {path} is not a number") from e
        argos = ArgosSettings(
            kimai_path=argos_section.get("kimaipath", argos.kimai_path),
            button_length=button_length,
        )
    return Settings(server=server, argos=argos, path=path)

def write_settings(settings: Settings, path: str) -> None:
    """Write settings to an INI file.

    Args:
        settings: Settings to save
        path: Settings file path
    """
    parser = configparser.ConfigParser(interpolation=None)
    parser[SERVER_SECTION] = {
        "kimaiurl": settings.server.base_url,
        "username": settings.server.username,
        "password": settings.server.api_token,
    }
    parser[ARGOS_SECTION] = {
        "kimaipath": settings.argos.kimai_path,
        "buttonlength": str(settings.argos.button_length),
    }
    with open(path, "w", encoding="utf-8") as f:
        parser.write(f)

def load_settings(prompt: Optional[Callable[[], Tuple[str, str, str]]] = None) -> Settings:
    """Load settings, asking for them if there is no settings file yet.

    Args:
        prompt: Callable returning (url, username, api token); used when no
            settings file exists

    Returns:
        Settings

    Raises:
        ConfigMissing: If there is no settings file and no prompt was given
    """
    load_environment()
    try:
        path = find_settings_path()
    except ConfigMissing:
        if prompt is None:
            raise
        print(f"{SETTINGS_FILENAME} not found")
        url, username, api_token = prompt()
        path = default_settings_path()
        settings = Settings(
            server=ServerSettings(url, username, api_token),
            argos=default_argos_settings(),
            path=path,
        )
        logger.debug("Trying to save settings to: %s", path)
        write_settings(settings, path)
        print(f"Settings saved to {path}")
        return settings

    logger.debug("%s found at: %s", SETTINGS_FILENAME, path)
    return read_settings(path)
