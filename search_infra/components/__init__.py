"""
Pulumi component resources for the rust-search infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, isolated subnets, security groups, S3 gateway endpoint
- storage: posts bucket, EFS filesystem and access point
- security: Lambda execution roles and bucket read grant
- compute: custom runtime Lambda functions
- messaging: EventBridge schedule for the indexer
- edge: function URL for the searcher
"""
