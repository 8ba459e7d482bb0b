"""
Stack output helpers.

Writes resolved stack outputs to a dotenv-style file so local tooling can
find the bucket and function names without querying Pulumi.
"""

from pathlib import Path

import pulumi


def format_env_lines(outputs: dict[str, object]) -> list[str]:
    """Render output values as sorted KEY=value lines."""
    return [f"{key.upper()}={value}" for key, value in sorted(outputs.items())]


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[str]],
    filename: str | Path,
) -> pulumi.Output[str]:
    """
    Write stack outputs to a dotenv file once they resolve.

    Args:
        outputs: Export name to value (plain or Output)
        filename: Target file path

    Returns:
        Output resolving to the written file path
    """
    keys = list(outputs.keys())

    def _write(values: list[object]) -> str:
        path = Path(filename)
        lines = format_env_lines(dict(zip(keys, values)))
        path.write_text("\n".join(lines) + "\n")
        pulumi.log.info(f"Wrote {len(lines)} stack outputs to {path}")
        return str(path)

    return pulumi.Output.all(*outputs.values()).apply(_write)
