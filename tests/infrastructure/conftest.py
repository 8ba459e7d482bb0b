"""Pytest fixtures for infrastructure tests."""

import re
import sys
from pathlib import Path

import pulumi
import pytest
from pulumi.runtime.mocks import MockMonitor


AVAILABILITY_ZONES = ["us-east-1a", "us-east-1b", "us-east-1c"]
REGION = "us-east-1"


class RecordingMocks(pulumi.runtime.Mocks):
    """Pulumi mocks that echo inputs back as state and record every registration."""

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []
        self.retain_on_delete: dict[str, bool] = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        outputs.setdefault("arn", f"arn:aws:mock:{REGION}:123456789012:{args.name}")
        if args.typ == "aws:s3/bucket:Bucket":
            outputs.setdefault("bucket", f"{args.inputs.get('bucketPrefix', args.name)}mock")
        if args.typ == "aws:lambda/functionUrl:FunctionUrl":
            outputs.setdefault("functionUrl", f"https://{args.name}.lambda-url.{REGION}.on.aws/")
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {
                "id": REGION,
                "names": AVAILABILITY_ZONES,
                "zoneIds": ["use1-az1", "use1-az2", "use1-az4"],
            }
        if args.token == "aws:index/getRegion:getRegion":
            return {"id": REGION, "name": REGION, "region": REGION}
        return {}

    def of_type(self, typ: str) -> list[pulumi.runtime.MockResourceArgs]:
        """Registered resources with the given type token."""
        return [resource for resource in self.resources if resource.typ == typ]


class RecordingMonitor(MockMonitor):
    """Mock monitor that also keeps the retain_on_delete option of each registration."""

    def RegisterResource(self, request):
        self.mocks.retain_on_delete[request.name] = request.retainOnDelete
        return super().RegisterResource(request)


_MOCKS = RecordingMocks()
pulumi.runtime.set_mocks(
    _MOCKS,
    project="rust-search",
    stack="test",
    preview=False,
    monitor=RecordingMonitor(_MOCKS),
)


def prop(mapping: dict, name: str):
    """Read a resource input by its Python name, whichever casing the engine used."""
    camel = re.sub(r"_([a-z])", lambda match: match.group(1).upper(), name)
    if camel in mapping:
        return mapping[camel]
    return mapping[name]


@pytest.fixture(scope="session", autouse=True)
def add_project_to_path():
    """Add the project root to Python path for imports."""
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))
    yield
    sys.path.remove(str(project_root))


@pytest.fixture
def iac_project_root():
    """Return the infrastructure package directory."""
    return Path(__file__).parent.parent.parent / "search_infra"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the infrastructure package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def mocks():
    """Shared recording mocks, cleared before each test."""
    _MOCKS.resources.clear()
    _MOCKS.retain_on_delete.clear()
    return _MOCKS


@pytest.fixture
def stack_config():
    """
    Feed values to pulumi.Config under the mocked project.

    Returns a callable taking unprefixed keys; the config map is emptied
    again after the test.
    """

    def _set(values: dict[str, str]) -> None:
        pulumi.runtime.set_all_config({f"rust-search:{key}": value for key, value in values.items()})

    yield _set
    pulumi.runtime.set_all_config({})


@pytest.fixture
def read_prop():
    """Accessor for recorded resource inputs."""
    return prop


@pytest.fixture
def lambdas_root(tmp_path):
    """A lambdas/ tree with built searcher and indexer artifacts."""
    root = tmp_path / "lambdas"
    for function in ("searcher", "indexer"):
        artifact = root / function / "target" / "lambda" / function
        artifact.mkdir(parents=True)
        (artifact / "bootstrap").write_bytes(b"\x7fELF")
        (root / function / "Cargo.toml").write_text(f'[package]\nname = "{function}"\n')
    return root


@pytest.fixture
def declare_stack(mocks, lambdas_root):
    """
    Declare a SearchStack under the mocks.

    Returns a callable taking optional StackConfig overrides and returning the
    stack component once every registration has completed.
    """
    from search_infra.configs.base import StackConfig
    from search_infra.stack import SearchStack
    from search_infra.utils.artifacts import resolve_artifact
    from search_infra.utils.naming import ResourceNamer

    def _declare(**overrides) -> SearchStack:
        config = StackConfig(environment="test", lambdas_root=str(lambdas_root), **overrides)
        namer = ResourceNamer(project="rust-search", environment=config.environment)
        holder = {}

        @pulumi.runtime.test
        def _run():
            holder["stack"] = SearchStack(
                namer.prefix,
                config=config,
                namer=namer,
                searcher_artifact=resolve_artifact(config.lambdas_root, "searcher"),
                indexer_artifact=resolve_artifact(config.lambdas_root, "indexer"),
            )

        _run()
        return holder["stack"]

    return _declare
