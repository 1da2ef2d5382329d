from ..common import (Empty, GetIamPolicyRequest, ListOperationsResponse, Operation, Policy,
                      SetIamPolicyRequest, TestIamPermissionsRequest, TestIamPermissionsResponse)
from ..transport import ApiClient
from .resources import (AutoscalingPolicy, Batch, CancelJobRequest, Cluster, DiagnoseClusterRequest,
                        InjectCredentialsRequest, InstantiateWorkflowTemplateRequest, Job,
                        ListAutoscalingPoliciesResponse, ListBatchesResponse, ListClustersResponse,
                        ListJobsResponse, ListWorkflowTemplatesResponse, NodeGroup, RepairClusterRequest,
                        ResizeNodeGroupRequest, StartClusterRequest, StopClusterRequest, SubmitJobRequest,
                        WorkflowTemplate)

class Dataproc(ApiClient):
    """
    Dataproc v1.
    Clusters and jobs are addressed by (projectId, region, clusterName / jobId),
    everything else by full relative resource name, e.g.
        projects/my-proj/regions/us-central1/workflowTemplates/my-template
        projects/my-proj/locations/us-central1/batches/my-batch
    Autoscaling policies and workflow templates are reachable under both
    locations/ and regions/, the two method sets are the same calls.
    """
    DEFAULT_BASE_URL = "https://dataproc.googleapis.com/"
    API_VERSION = "v1"

    # autoscaling policies

    def projectsRegionsAutoscalingPoliciesCreate(self, parent: str, req: AutoscalingPolicy) -> AutoscalingPolicy:
        return self._request(self._url(f"v1/{parent}/autoscalingPolicies"), "POST", req, AutoscalingPolicy)

    def projectsRegionsAutoscalingPoliciesDelete(self, name: str) -> Empty:
        return self._request(self._url(f"v1/{name}"), "DELETE", response=Empty)

    def projectsRegionsAutoscalingPoliciesGet(self, name: str) -> AutoscalingPolicy:
        return self._request(self._url(f"v1/{name}"), "GET", response=AutoscalingPolicy)

    def projectsRegionsAutoscalingPoliciesGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def projectsRegionsAutoscalingPoliciesList(self, parent: str, *,
                                               pageSize: int|None = None,
                                               pageToken: str|None = None) -> ListAutoscalingPoliciesResponse:
        return self._request(self._url(f"v1/{parent}/autoscalingPolicies", ("pageSize", pageSize),
                                       ("pageToken", pageToken)),
                             "GET", response=ListAutoscalingPoliciesResponse)

    def projectsRegionsAutoscalingPoliciesSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def projectsRegionsAutoscalingPoliciesTestIamPermissions(self, resource: str,
                                                             req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    def projectsRegionsAutoscalingPoliciesUpdate(self, name: str, req: AutoscalingPolicy) -> AutoscalingPolicy:
        """
        Full replacement (PUT), there is no update mask.
        """
        return self._request(self._url(f"v1/{name}"), "PUT", req, AutoscalingPolicy)

    projectsLocationsAutoscalingPoliciesCreate = projectsRegionsAutoscalingPoliciesCreate
    projectsLocationsAutoscalingPoliciesDelete = projectsRegionsAutoscalingPoliciesDelete
    projectsLocationsAutoscalingPoliciesGet = projectsRegionsAutoscalingPoliciesGet
    projectsLocationsAutoscalingPoliciesGetIamPolicy = projectsRegionsAutoscalingPoliciesGetIamPolicy
    projectsLocationsAutoscalingPoliciesList = projectsRegionsAutoscalingPoliciesList
    projectsLocationsAutoscalingPoliciesSetIamPolicy = projectsRegionsAutoscalingPoliciesSetIamPolicy
    projectsLocationsAutoscalingPoliciesTestIamPermissions = projectsRegionsAutoscalingPoliciesTestIamPermissions
    projectsLocationsAutoscalingPoliciesUpdate = projectsRegionsAutoscalingPoliciesUpdate

    # batches (serverless)

    def projectsLocationsBatchesCreate(self, parent: str, req: Batch, *,
                                       batchId: str|None = None,
                                       requestId: str|None = None) -> Operation:
        """
        The Operation metadata is a BatchOperationMetadata.
        """
        return self._request(self._url(f"v1/{parent}/batches", ("batchId", batchId), ("requestId", requestId)),
                             "POST", req, Operation)

    def projectsLocationsBatchesDelete(self, name: str) -> Empty:
        return self._request(self._url(f"v1/{name}"), "DELETE", response=Empty)

    def projectsLocationsBatchesGet(self, name: str) -> Batch:
        return self._request(self._url(f"v1/{name}"), "GET", response=Batch)

    def projectsLocationsBatchesList(self, parent: str, *,
                                     filter: str|None = None,
                                     orderBy: str|None = None,
                                     pageSize: int|None = None,
                                     pageToken: str|None = None) -> ListBatchesResponse:
        return self._request(self._url(f"v1/{parent}/batches", ("filter", filter), ("orderBy", orderBy),
                                       ("pageSize", pageSize), ("pageToken", pageToken)),
                             "GET", response=ListBatchesResponse)

    # operations

    def projectsRegionsOperationsCancel(self, name: str) -> Empty:
        return self._request(self._url(f"v1/{name}:cancel"), "POST", response=Empty)

    def projectsRegionsOperationsDelete(self, name: str) -> Empty:
        return self._request(self._url(f"v1/{name}"), "DELETE", response=Empty)

    def projectsRegionsOperationsGet(self, name: str) -> Operation:
        return self._request(self._url(f"v1/{name}"), "GET", response=Operation)

    def projectsRegionsOperationsList(self, name: str, *,
                                      filter: str|None = None,
                                      pageSize: int|None = None,
                                      pageToken: str|None = None) -> ListOperationsResponse:
        """
        name is the operations collection, e.g. projects/my-proj/regions/us-central1/operations
        """
        return self._request(self._url(f"v1/{name}", ("filter", filter), ("pageSize", pageSize),
                                       ("pageToken", pageToken)),
                             "GET", response=ListOperationsResponse)

    def projectsRegionsOperationsGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def projectsRegionsOperationsSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def projectsRegionsOperationsTestIamPermissions(self, resource: str,
                                                    req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    projectsLocationsOperationsCancel = projectsRegionsOperationsCancel
    projectsLocationsOperationsDelete = projectsRegionsOperationsDelete
    projectsLocationsOperationsGet = projectsRegionsOperationsGet
    projectsLocationsOperationsList = projectsRegionsOperationsList

    # clusters

    def projectsRegionsClustersCreate(self, projectId: str, region: str, req: Cluster, *,
                                      actionOnFailedPrimaryWorkers: str|None = None,
                                      requestId: str|None = None) -> Operation:
        """
        The Operation metadata is a ClusterOperationMetadata.
        """
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters",
                                       ("actionOnFailedPrimaryWorkers", actionOnFailedPrimaryWorkers),
                                       ("requestId", requestId)),
                             "POST", req, Operation)

    def projectsRegionsClustersDelete(self, projectId: str, region: str, clusterName: str, *,
                                      clusterUuid: str|None = None,
                                      requestId: str|None = None) -> Operation:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}",
                                       ("clusterUuid", clusterUuid), ("requestId", requestId)),
                             "DELETE", response=Operation)

    def projectsRegionsClustersDiagnose(self, projectId: str, region: str, clusterName: str,
                                        req: DiagnoseClusterRequest) -> Operation:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}:diagnose"),
                             "POST", req, Operation)

    def projectsRegionsClustersGet(self, projectId: str, region: str, clusterName: str) -> Cluster:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}"),
                             "GET", response=Cluster)

    def projectsRegionsClustersGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def projectsRegionsClustersInjectCredentials(self, project: str, region: str, cluster: str,
                                                 req: InjectCredentialsRequest) -> Operation:
        """
        Unlike the other cluster calls the three arguments are relative names:
        projects/{projectId}, regions/{region}, clusters/{clusterName}
        """
        return self._request(self._url(f"v1/{project}/{region}/{cluster}:injectCredentials"), "POST", req, Operation)

    def projectsRegionsClustersList(self, projectId: str, region: str, *,
                                    filter: str|None = None,
                                    pageSize: int|None = None,
                                    pageToken: str|None = None) -> ListClustersResponse:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters", ("filter", filter),
                                       ("pageSize", pageSize), ("pageToken", pageToken)),
                             "GET", response=ListClustersResponse)

    def projectsRegionsClustersPatch(self, projectId: str, region: str, clusterName: str, req: Cluster, *,
                                     gracefulDecommissionTimeout: str|None = None,
                                     requestId: str|None = None,
                                     updateMask: str|None = None) -> Operation:
        """
        Resize or relabel.  updateMask is a comma separated list of field paths,
        e.g. config.worker_config.num_instances,labels
        """
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}",
                                       ("gracefulDecommissionTimeout", gracefulDecommissionTimeout),
                                       ("requestId", requestId), ("updateMask", updateMask)),
                             "PATCH", req, Operation)

    def projectsRegionsClustersRepair(self, projectId: str, region: str, clusterName: str,
                                      req: RepairClusterRequest) -> Operation:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}:repair"),
                             "POST", req, Operation)

    def projectsRegionsClustersSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def projectsRegionsClustersStart(self, projectId: str, region: str, clusterName: str,
                                     req: StartClusterRequest|None = None) -> Operation:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}:start"),
                             "POST", req or StartClusterRequest(), Operation)

    def projectsRegionsClustersStop(self, projectId: str, region: str, clusterName: str,
                                    req: StopClusterRequest|None = None) -> Operation:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/clusters/{clusterName}:stop"),
                             "POST", req or StopClusterRequest(), Operation)

    def projectsRegionsClustersTestIamPermissions(self, resource: str,
                                                  req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    # node groups

    def projectsRegionsClustersNodeGroupsCreate(self, parent: str, req: NodeGroup, *,
                                                nodeGroupId: str|None = None,
                                                requestId: str|None = None) -> Operation:
        """
        parent is projects/{projectId}/regions/{region}/clusters/{clusterName}
        The Operation metadata is a NodeGroupOperationMetadata.
        """
        return self._request(self._url(f"v1/{parent}/nodeGroups", ("nodeGroupId", nodeGroupId),
                                       ("requestId", requestId)),
                             "POST", req, Operation)

    def projectsRegionsClustersNodeGroupsGet(self, name: str) -> NodeGroup:
        return self._request(self._url(f"v1/{name}"), "GET", response=NodeGroup)

    def projectsRegionsClustersNodeGroupsResize(self, name: str, req: ResizeNodeGroupRequest) -> Operation:
        return self._request(self._url(f"v1/{name}:resize"), "POST", req, Operation)

    # jobs

    def projectsRegionsJobsCancel(self, projectId: str, region: str, jobId: str,
                                  req: CancelJobRequest|None = None) -> Job:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs/{jobId}:cancel"),
                             "POST", req or CancelJobRequest(), Job)

    def projectsRegionsJobsDelete(self, projectId: str, region: str, jobId: str) -> Empty:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs/{jobId}"),
                             "DELETE", response=Empty)

    def projectsRegionsJobsGet(self, projectId: str, region: str, jobId: str) -> Job:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs/{jobId}"),
                             "GET", response=Job)

    def projectsRegionsJobsGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def projectsRegionsJobsList(self, projectId: str, region: str, *,
                                clusterName: str|None = None,
                                filter: str|None = None,
                                jobStateMatcher: str|None = None,
                                pageSize: int|None = None,
                                pageToken: str|None = None) -> ListJobsResponse:
        """
        jobStateMatcher is ALL, ACTIVE or NON_ACTIVE.
        """
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs",
                                       ("clusterName", clusterName), ("filter", filter),
                                       ("jobStateMatcher", jobStateMatcher), ("pageSize", pageSize),
                                       ("pageToken", pageToken)),
                             "GET", response=ListJobsResponse)

    def projectsRegionsJobsPatch(self, projectId: str, region: str, jobId: str, req: Job, *,
                                 updateMask: str|None = None) -> Job:
        """
        Only labels can be updated, so updateMask is 'labels'.
        """
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs/{jobId}",
                                       ("updateMask", updateMask)),
                             "PATCH", req, Job)

    def projectsRegionsJobsSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def projectsRegionsJobsSubmit(self, projectId: str, region: str, req: SubmitJobRequest) -> Job:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs:submit"), "POST", req, Job)

    def projectsRegionsJobsSubmitAsOperation(self, projectId: str, region: str, req: SubmitJobRequest) -> Operation:
        return self._request(self._url(f"v1/projects/{projectId}/regions/{region}/jobs:submitAsOperation"),
                             "POST", req, Operation)

    def projectsRegionsJobsTestIamPermissions(self, resource: str,
                                              req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    # workflow templates

    def projectsRegionsWorkflowTemplatesCreate(self, parent: str, req: WorkflowTemplate) -> WorkflowTemplate:
        return self._request(self._url(f"v1/{parent}/workflowTemplates"), "POST", req, WorkflowTemplate)

    def projectsRegionsWorkflowTemplatesDelete(self, name: str, *, version: int|None = None) -> Empty:
        return self._request(self._url(f"v1/{name}", ("version", version)), "DELETE", response=Empty)

    def projectsRegionsWorkflowTemplatesGet(self, name: str, *, version: int|None = None) -> WorkflowTemplate:
        """
        Without version the latest is returned.
        """
        return self._request(self._url(f"v1/{name}", ("version", version)), "GET", response=WorkflowTemplate)

    def projectsRegionsWorkflowTemplatesGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def projectsRegionsWorkflowTemplatesInstantiate(self, name: str,
                                                    req: InstantiateWorkflowTemplateRequest) -> Operation:
        """
        The Operation metadata is a WorkflowMetadata.
        """
        return self._request(self._url(f"v1/{name}:instantiate"), "POST", req, Operation)

    def projectsRegionsWorkflowTemplatesInstantiateInline(self, parent: str, req: WorkflowTemplate, *,
                                                          requestId: str|None = None) -> Operation:
        return self._request(self._url(f"v1/{parent}/workflowTemplates:instantiateInline", ("requestId", requestId)),
                             "POST", req, Operation)

    def projectsRegionsWorkflowTemplatesList(self, parent: str, *,
                                             pageSize: int|None = None,
                                             pageToken: str|None = None) -> ListWorkflowTemplatesResponse:
        return self._request(self._url(f"v1/{parent}/workflowTemplates", ("pageSize", pageSize),
                                       ("pageToken", pageToken)),
                             "GET", response=ListWorkflowTemplatesResponse)

    def projectsRegionsWorkflowTemplatesSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def projectsRegionsWorkflowTemplatesTestIamPermissions(self, resource: str,
                                                           req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    def projectsRegionsWorkflowTemplatesUpdate(self, name: str, req: WorkflowTemplate) -> WorkflowTemplate:
        """
        req.version must be the current server version, the result has it incremented.
        """
        return self._request(self._url(f"v1/{name}"), "PUT", req, WorkflowTemplate)

    projectsLocationsWorkflowTemplatesCreate = projectsRegionsWorkflowTemplatesCreate
    projectsLocationsWorkflowTemplatesDelete = projectsRegionsWorkflowTemplatesDelete
    projectsLocationsWorkflowTemplatesGet = projectsRegionsWorkflowTemplatesGet
    projectsLocationsWorkflowTemplatesGetIamPolicy = projectsRegionsWorkflowTemplatesGetIamPolicy
    projectsLocationsWorkflowTemplatesInstantiate = projectsRegionsWorkflowTemplatesInstantiate
    projectsLocationsWorkflowTemplatesInstantiateInline = projectsRegionsWorkflowTemplatesInstantiateInline
    projectsLocationsWorkflowTemplatesList = projectsRegionsWorkflowTemplatesList
    projectsLocationsWorkflowTemplatesSetIamPolicy = projectsRegionsWorkflowTemplatesSetIamPolicy
    projectsLocationsWorkflowTemplatesTestIamPermissions = projectsRegionsWorkflowTemplatesTestIamPermissions
    projectsLocationsWorkflowTemplatesUpdate = projectsRegionsWorkflowTemplatesUpdate
