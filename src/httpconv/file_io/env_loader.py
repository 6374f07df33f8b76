"""Discovery and flattening of http-client.env.json environment files."""

import json
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from ..conversion.data_models import Variable
from ..core.conversion_report import ConversionReport
from ..core.errors import CollectionFormatError, ConversionError
from ..utils.constants import ENV_FILE_NAME, VARIABLE_TYPE


def find_env_file(start_dir: Union[str, Path], file_name: str = ENV_FILE_NAME) -> Optional[Path]:
    """
    Look for file_name in start_dir and then in each of its ancestors.

    Returns:
        Path of the first match, or None if the filesystem root is reached
    """
    current = Path(start_dir).resolve()
    for directory in (current, *current.parents):
        candidate = directory / file_name
        if candidate.is_file():
            logger.debug(f"Found environment file: {candidate}")
            return candidate
    logger.debug(f"No {file_name} found above {current}")
    return None


def load_env_variables(
    env_file: Union[str, Path],
    report: Optional[ConversionReport] = None,
) -> List[Variable]:
    """
    Flatten every environment of an env file into one variable list.

    The environment names are dropped; variables keep document order and
    duplicates across environments are all kept.

    Raises:
        CollectionFormatError: If the file is not a JSON object
        ConversionError: If the file cannot be read
    """
    env_file = Path(env_file)
    try:
        with open(env_file, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CollectionFormatError(f"Invalid environment file: {e}", str(env_file)) from e
    except OSError as e:
        raise ConversionError(f"Could not read environment file: {e}", str(env_file)) from e

    if not isinstance(data, dict):
        raise CollectionFormatError("Environment file must contain a JSON object", str(env_file))

    variables: List[Variable] = []
    for env_name, env_vars in data.items():
        if not isinstance(env_vars, dict):
            message = f"Environment '{env_name}' is not an object, ignoring it"
            if report is not None:
                report.record_warning(str(env_file), message)
            else:
                logger.warning(f"{env_file}: {message}")
            continue
        for key, value in env_vars.items():
            text = value if isinstance(value, str) else json.dumps(value)
            variables.append(Variable(key=key, value=text, type=VARIABLE_TYPE))

    logger.info(f"Loaded {len(variables)} variable(s) from {env_file}")
    return variables
