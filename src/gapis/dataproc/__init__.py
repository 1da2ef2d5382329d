"""
Cloud Dataproc API v1: clusters, jobs, serverless batches, workflow templates
and autoscaling policies.  Resource dataclasses live in .resources, the
endpoint methods on .client.Dataproc.

    from gapis.dataproc import Dataproc
    dp = Dataproc()
    cluster = dp.projectsRegionsClustersGet("my-proj", "us-central1", "my-cluster")
"""
from ..access import gcp
from .client import Dataproc

gcp.append_scopes("cloud-platform")
