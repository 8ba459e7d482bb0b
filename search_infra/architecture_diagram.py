"""
rust-search Architecture Diagram.

Draws the isolated VPC, the S3 gateway endpoint, the shared EFS access point
and the two Rust Lambdas.

Dependencies:
    pip install "rust-search-infra[docs]"  (diagrams, needs graphviz)

Usage:
    python -m search_infra.architecture_diagram
    # Outputs: rust_search_architecture.png
"""

from search_infra.configs.constants import (
    ACCESS_POINT_PERMISSIONS,
    ENV_VARS,
    POSIX_IDENTITY,
    SUBNET_CIDRS,
    VPC_CIDR,
)

graph_attr = {
    "fontsize": "14",
    "bgcolor": "white",
    "pad": "0.5",
    "splines": "ortho",
    "nodesep": "0.8",
    "ranksep": "1.2",
}

node_attr = {
    "fontsize": "11",
}


def render_diagram(
    filename: str = "rust_search_architecture",
    show: bool = False,
    mount_path: str = "/mnt/lambda",
) -> str:
    """
    Render the stack topology to a PNG.

    Args:
        filename: Output file name without extension
        show: Open the image after rendering
        mount_path: Mount path shown on the function nodes

    Returns:
        str: Path of the generated image
    """
    from diagrams import Cluster, Diagram, Edge
    from diagrams.aws.compute import Lambda
    from diagrams.aws.integration import Eventbridge
    from diagrams.aws.network import VPC, Endpoint, PrivateSubnet
    from diagrams.aws.security import IAMRole
    from diagrams.aws.storage import S3, ElasticFileSystemEFS

    identity = f"uid/gid {POSIX_IDENTITY['uid']}, mode {ACCESS_POINT_PERMISSIONS}"

    with Diagram(
        "rust-search Architecture\n(Isolated VPC, S3 Gateway Endpoint, Shared EFS)",
        filename=filename,
        show=show,
        direction="TB",
        graph_attr=graph_attr,
        node_attr=node_attr,
    ):
        schedule = Eventbridge("EventBridge\n(optional schedule)")

        with Cluster("Storage Layer (Outside VPC)"):
            posts = S3("Posts Bucket\nposts/*.json\nDESTROY on teardown")

        with Cluster("IAM"):
            indexer_role = IAMRole("Indexer Role\nS3 read on posts")
            searcher_role = IAMRole("Searcher Role\nno grants")

        with Cluster(f"VPC: {VPC_CIDR}\nNO Internet Gateway | NO NAT Gateway"):
            VPC(f"VPC\n{VPC_CIDR}")
            s3_endpoint = Endpoint("S3 Gateway Endpoint\nRoute Table Entry")

            with Cluster(f"Isolated Subnets: {SUBNET_CIDRS[0]}, {SUBNET_CIDRS[1]}"):
                PrivateSubnet("Isolated Subnets\n2 AZs")
                efs = ElasticFileSystemEFS(f"EFS\nunencrypted\nAccess Point /lambda\n{identity}")

                env = f"{ENV_VARS['backtrace']}, {ENV_VARS['mount_path']}"
                searcher = Lambda(f"Searcher\nprovided.al2\n{mount_path}\n{env}")
                indexer = Lambda(
                    f"Indexer\nprovided.al2\n{mount_path}\n{env},\n{ENV_VARS['posts_bucket']}"
                )

        schedule >> Edge(label="Scheduled Event", color="red", style="dotted") >> indexer
        indexer >> Edge(label="List + Get posts", color="green", style="dashed") >> s3_endpoint
        s3_endpoint >> Edge(label="Private Access", color="green") >> posts
        indexer >> Edge(label="Write index\nNFS 2049", color="darkblue", style="bold") >> efs
        searcher >> Edge(label="Read index\nNFS 2049", color="darkblue", style="bold") >> efs
        indexer_role >> Edge(label="Attached To", color="gray", style="dotted") >> indexer
        searcher_role >> Edge(label="Attached To", color="gray", style="dotted") >> searcher

    return f"{filename}.png"


if __name__ == "__main__":
    path = render_diagram()
    print(f"✅ Diagram generated: {path}")
