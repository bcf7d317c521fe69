"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "check.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Check configuration template for action-sequence-checker.
# Replace every <REQUIRED> placeholder before running check.

recorded_events:
  # Provide either a path to a YAML/JSON list of recorded actions or inline actions.
  path: "<REQUIRED>"
  # inline:
  #   - type: "<OPTIONAL>"

check:
  # actions: compare whole actions; types: compare only their discriminant values.
  target: actions
  # exact: the whole recorded sequence, in order; contains: an ordered subsequence.
  mode: exact
  negate: false
  discriminant_field: type
  expected:
    - type: "<REQUIRED>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML check configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder check configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Check configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
