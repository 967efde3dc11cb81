"""
Centralized configuration for template validation.

Settings come from environment variables; a local .env file is loaded by
the CLI entrypoint and the test suite.
"""

import os
from pathlib import Path


# Template catalog shipped with the package
DEFAULT_TEMPLATE_SPEC = Path(__file__).parent / "spec" / "templates.yaml"


def get_template_spec_path() -> Path:
    """Get path of the YAML template specification (MFNF_TEMPLATE_SPEC)."""
    path = os.getenv("MFNF_TEMPLATE_SPEC")
    if path:
        return Path(path)
    return DEFAULT_TEMPLATE_SPEC


def get_texvccheck_path() -> str:
    """Get the texvccheck executable used to check formulas (TEXVCCHECK_PATH)."""
    return os.getenv("TEXVCCHECK_PATH", "texvccheck")


def get_texvccheck_timeout() -> float:
    """Get the per-formula timeout in seconds (TEXVCCHECK_TIMEOUT)."""
    return float(os.getenv("TEXVCCHECK_TIMEOUT", "10"))
