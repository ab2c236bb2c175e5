# region Docstring
"""
clipwatch.config.base

Environment detection and application root resolution.

Overview:
- Provides a utility class for detecting the current application environment
    (production, Docker, or development) based on environment variables or
    path-based heuristics.
- Exposes module-level constants for the application root directory and the
    detected environment, used by the settings factory to locate YAML files.

Environment Detection Logic:
- Priority 1: Checks the ENVIRONMENT environment variable for explicit configuration.
- Priority 2: Falls back to path-based detection:
    - Paths starting with "/app" indicate Docker environment.
    - Paths starting with "/srv" indicate production environment.
    - All other paths default to development environment.
"""
# endregion
# region Imports
import os
from pathlib import Path
from typing import Literal

# endregion
# region AppEnv Class


class AppEnv:
    """
    Application environment detection utility.

    Attributes:
        ROOT (Path): The root directory of the application. Defaults to the current working directory.
        PROD (Literal["prod"]): Constant representing the production environment.
        DOCKER (Literal["docker"]): Constant representing the Docker environment.
        DEV (Literal["dev"]): Constant representing the development environment.
    """

    ROOT: Path = Path(os.getenv("CLIPWATCH_ROOT", Path.cwd())).resolve()
    PROD: Literal["prod"] = "prod"
    DOCKER: Literal["docker"] = "docker"
    DEV: Literal["dev"] = "dev"

    @classmethod
    def environment(cls) -> Literal["prod", "docker", "dev"]:
        """Determine the current application environment."""
        if os.getenv("ENVIRONMENT") in {cls.PROD, cls.DOCKER, cls.DEV}:
            return os.getenv("ENVIRONMENT")

        calling_path = Path.cwd().as_posix()
        if calling_path.startswith("/app"):
            return cls.DOCKER
        elif calling_path.startswith("/srv"):
            return cls.PROD
        else:
            return cls.DEV

    @classmethod
    def app_root(cls) -> Path:
        """Get the application root directory."""
        return cls.ROOT


# endregion
# region Module-level Constants

APP_ROOT: Path = AppEnv.app_root()
"""[Path] Root directory of the application."""
APP_ENV: Literal["prod", "docker", "dev"] = AppEnv.environment()
"""[Literal] Environment type."""
# endregion

__all__ = [
    "APP_ENV",
    "APP_ROOT",
    "AppEnv",
]
