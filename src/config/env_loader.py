"""Environment variable loading for the command line entry points.

The CLI and the scripts call this before importing the calculator so that
a ``.env`` file next to (or one level above) the project is honoured.
"""

from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


def load_environment_variables(project_dir: Optional[Path] = None) -> Optional[Path]:
    """Load environment variables from a .env file.

    The parent directory of the project is checked first, then the
    project directory itself. Variables already set in the process
    environment are not overridden.

    Args:
        project_dir: Project root directory. If None, it is derived from
            this file's location (src/config -> project root).

    Returns:
        The .env file that was loaded, or None if none was found.
    """
    if project_dir is None:
        project_dir = Path(__file__).parent.parent.parent

    for env_file in (project_dir.parent / ".env", project_dir / ".env"):
        if env_file.exists():
            load_dotenv(env_file)
            return env_file
    return None
