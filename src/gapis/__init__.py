"""
Small hand written bindings for a handful of Google Cloud REST APIs: Dataproc,
IAM deny policies, Resource Manager, Street View Publish and the Indexing API.

Python dataclasses are used for the resource structs and most of the logic is
translating between those and the JSON dicts on the wire.  That translation is
done once, generically, in resources.py: each schema only marks which of its
fields are timestamps, int64s, base64 bytes, durations, nested resources or
output only and the rest passes straight through.

Each API module has a client class with one method per REST call, named after
the REST resource path (projectsRegionsClustersGet and so on).  They make
exactly one HTTP request each, through googleapiclient's HttpRequest, using the
credentials held by the access.gcp singleton unless given their own.
"""
