"""
Pulumi infrastructure-as-code for the rust-search serverless search engine.

This package defines AWS infrastructure including:
- VPC with isolated subnets in two AZs, no gateways, S3 gateway endpoint
- S3 bucket for the source posts
- EFS filesystem and access point holding the shared search index
- Searcher and indexer Lambdas (Rust, custom runtime) mounting the filesystem
"""
