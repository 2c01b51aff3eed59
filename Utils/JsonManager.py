import json
from pathlib import Path
from typing import Optional

from Types import ConfigDict


DEFAULT_PARAMETERS_PATH: Path = Path(__file__).resolve().parent.parent / "Config" / "Parameters.json"
'''Parameters shared by all examples.'''


def load_json(file_path: str) -> ConfigDict:
    """Load JSON file."""
    with open(file_path, 'r') as f:
        return json.load(f)


def load_parameters(section: Optional[str] = None, file_path: Path = DEFAULT_PARAMETERS_PATH) -> ConfigDict:
    """Load the example parameters, or only one section of them.

    Args:
        section: Top level key such as "Mathematical Program". None returns everything.
        file_path: Parameters file to read.

    Raises:
        KeyError: If the requested section is not in the file.
    """
    params: ConfigDict = load_json(str(file_path))
    if section is None:
        return params
    if section not in params:
        raise KeyError(f"Section '{section}' not found in {file_path}. Available: {list(params.keys())}")
    return params[section]
