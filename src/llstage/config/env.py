"""Environment variable helpers."""

import os
from typing import List, Mapping, Optional


def env_fields(key: str, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Get an environment variable split into whitespace-separated fields.

    Args:
        key: Environment variable name
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        List of fields, empty if the variable is unset or blank
    """
    if environ is None:
        environ = os.environ
    return environ.get(key, "").split()
