"""
Lambda artifact builder for the Rust functions.

Usage:
    python -m search_infra.scripts.artifact_builder build --function searcher
    python -m search_infra.scripts.artifact_builder build --function all
    python -m search_infra.scripts.artifact_builder verify --function indexer

Purpose:
- Compile each crate with cargo-lambda for the Lambda custom runtime
- Check the bootstrap binary sits where the Pulumi program expects it

Dependencies: cargo, cargo-lambda
System role: CI/CD helper run before `pulumi up`
"""

import logging
import subprocess
import sys
from pathlib import Path

from search_infra.configs.constants import FUNCTION_NAMES
from search_infra.utils.artifacts import MissingArtifactError, resolve_artifact

logger = logging.getLogger(__name__)


class ArtifactBuilder:
    """Build and verify the deployment package of one Lambda function."""

    def __init__(self, function: str, lambdas_root: str | Path = "lambdas"):
        """
        Initialize builder.

        Args:
            function: Function name ('searcher' or 'indexer')
            lambdas_root: Directory holding one crate per function
        """
        if function not in FUNCTION_NAMES.values():
            raise ValueError(f"Unknown function: {function}")

        self.function = function
        self.lambdas_root = Path(lambdas_root)
        self.crate_dir = self.lambdas_root / function
        self.manifest = self.crate_dir / "Cargo.toml"

        if not self.manifest.exists():
            raise FileNotFoundError(f"Cargo.toml not found: {self.manifest}")

    def build(self) -> bool:
        """
        Compile the crate in release mode for the Lambda runtime.

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            logger.info(f"Building {self.function} in {self.crate_dir}")

            subprocess.run(
                ["cargo", "lambda", "build", "--release"],
                check=True,
                capture_output=True,
                text=True,
                cwd=str(self.crate_dir),
            )

            logger.info(f"✓ {self.function} built successfully")
            return True

        except subprocess.CalledProcessError as e:
            logger.error(f"Build failed: {e.stderr}")
            return False
        except FileNotFoundError:
            logger.error("cargo not found. Install Rust and cargo-lambda and try again.")
            return False

    def verify(self) -> Path | None:
        """
        Check the build output is where the stack reads it from.

        Returns:
            Path: Artifact directory, or None if missing
        """
        try:
            path = resolve_artifact(self.lambdas_root, self.function)
        except MissingArtifactError as e:
            logger.error(str(e))
            return None

        logger.info(f"✓ Artifact ready: {path}")
        return path

    def build_and_verify(self) -> Path | None:
        """Build then verify in one operation."""
        if not self.build():
            return None
        return self.verify()


def _parse_functions(argv: list[str]) -> list[str]:
    """Read the --function flag; 'all' expands to every function."""
    if "--function" not in argv:
        return []
    idx = argv.index("--function")
    if idx + 1 >= len(argv):
        return []
    value = argv[idx + 1]
    if value == "all":
        return list(FUNCTION_NAMES.values())
    return [value]


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        print("Usage: python -m search_infra.scripts.artifact_builder COMMAND --function NAME")
        print("Commands: build, verify")
        return 1

    command = argv[0]
    functions = _parse_functions(argv)

    if not functions:
        logger.error("--function flag is required")
        return 1

    lambdas_root = "lambdas"
    if "--lambdas-root" in argv:
        idx = argv.index("--lambdas-root")
        if idx + 1 < len(argv):
            lambdas_root = argv[idx + 1]

    try:
        for function in functions:
            builder = ArtifactBuilder(function, lambdas_root=lambdas_root)

            if command == "build":
                result = builder.build_and_verify()
            elif command == "verify":
                result = builder.verify()
            else:
                logger.error(f"Unknown command: {command}")
                return 1

            if result is None:
                return 1

    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    sys.exit(main())
