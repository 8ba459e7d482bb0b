"""
Lambda artifact resolution.

The searcher and indexer are Rust crates built with `cargo lambda build`,
which writes a self-contained `bootstrap` binary to
`<lambdas_root>/<function>/target/lambda/<function>/`. That directory is
zipped by Pulumi as the function code, so it must exist before any resource
is declared.
"""

from pathlib import Path

from search_infra.configs.constants import BOOTSTRAP_FILENAME


class MissingArtifactError(FileNotFoundError):
    """Raised when a function's prebuilt deployment package is missing."""

    def __init__(self, function: str, path: Path, reason: str) -> None:
        self.function = function
        self.path = path
        super().__init__(
            f"{function} artifact {reason}: {path} "
            f"(run `python -m search_infra.scripts.artifact_builder build --function {function}`)"
        )


def artifact_dir(lambdas_root: str | Path, function: str) -> Path:
    """Return the directory cargo-lambda writes the function's build output to."""
    return Path(lambdas_root) / function / "target" / "lambda" / function


def resolve_artifact(lambdas_root: str | Path, function: str) -> Path:
    """
    Locate and validate a function's deployment package.

    Args:
        lambdas_root: Directory holding one crate per function
        function: Function name (e.g. 'searcher', 'indexer')

    Returns:
        Path: Directory containing the bootstrap binary

    Raises:
        MissingArtifactError: If the directory or its bootstrap binary is absent
    """
    path = artifact_dir(lambdas_root, function)

    if not path.is_dir():
        raise MissingArtifactError(function, path, "directory not found")

    if not (path / BOOTSTRAP_FILENAME).is_file():
        raise MissingArtifactError(function, path / BOOTSTRAP_FILENAME, "bootstrap binary not found")

    return path
