"""Load and save toll policies as JSON."""

import json
from pathlib import Path
from typing import Optional, Union

from src.models.defaults import DEFAULT_POLICY
from src.models.schema import TollPolicy
from src.config.settings import Settings, get_settings
from src.config.messages import LOG_POLICY_LOADED
from src.config.logging_config import get_logger

logger = get_logger(__name__)


class PolicyLoader:
    """Load toll policies from disk or fall back to the built-in tables.

    All methods are static. A policy file holds the JSON form of a
    TollPolicy (as written by save_to_json); it is validated on load, so
    overlapping fee bands or impossible months fail here rather than
    during a calculation.
    """

    @staticmethod
    def load_from_json(json_path: Union[str, Path]) -> TollPolicy:
        """
        Load a toll policy from a JSON file.

        Args:
            json_path: Path to the policy JSON file

        Returns:
            Validated TollPolicy

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the file content is not a valid policy
        """
        json_path = Path(json_path)
        if not json_path.exists():
            raise FileNotFoundError(f"Toll policy file not found: {json_path}")

        logger.info(f"Loading toll policy from: {json_path}")

        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        policy = TollPolicy.model_validate(data)
        logger.info(
            LOG_POLICY_LOADED,
            policy.version,
            len(policy.fee_schedule.bands),
            len(policy.exempt_vehicle_types),
        )
        return policy

    @staticmethod
    def save_to_json(policy: TollPolicy, json_path: Union[str, Path]) -> Path:
        """
        Write a toll policy to a JSON file.

        Args:
            policy: Policy to write
            json_path: Destination file; parent directories are created

        Returns:
            The path written
        """
        json_path = Path(json_path)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        data = policy.model_dump(mode="json")
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved toll policy {policy.version} to: {json_path}")
        return json_path

    @staticmethod
    def get_default_path(settings: Optional[Settings] = None) -> Optional[Path]:
        """Get the configured policy file path.

        Args:
            settings: Settings to read (if None, uses the global settings)

        Returns:
            Path from the TOLL_POLICY_JSON setting, or None when the
            built-in policy is in use.
        """
        project_dir = Path(__file__).parent.parent.parent
        settings = settings if settings is not None else get_settings()
        return settings.get_toll_policy_path(project_dir)

    @staticmethod
    def load_default(settings: Optional[Settings] = None) -> TollPolicy:
        """
        Load the policy the application is configured to use.

        Args:
            settings: Settings to read (if None, uses the global settings)

        Returns:
            The configured policy file's content if TOLL_POLICY_JSON is set,
            otherwise the built-in policy.
        """
        default_path = PolicyLoader.get_default_path(settings)
        if default_path is not None:
            return PolicyLoader.load_from_json(default_path)

        return DEFAULT_POLICY
