"""
Dataproc v1 resources.
https://cloud.google.com/dataproc/docs/reference/rest

Only the parts of the schema tree that carry a timestamp, int64, duration or
output only field (or lead down to one) get their own dataclass.  Everything
else (InstanceGroupConfig, GceClusterConfig, the individual job types, ...) stays
a plain dict, exactly as it is on the wire.

Durations are kept as the wire string, e.g. "600s".
"""
from dataclasses import dataclass, field
from typing import List
import datetime

from ..resources import ApiResource, duration, int64, nested, output_only, timestamp

# autoscaling policies

@dataclass
class BasicYarnAutoscalingConfig(ApiResource):
    gracefulDecommissionTimeout: str|None = duration()
    scaleUpFactor: float|None = field(default=None)
    scaleDownFactor: float|None = field(default=None)
    scaleUpMinWorkerFraction: float|None = field(default=None)
    scaleDownMinWorkerFraction: float|None = field(default=None)

@dataclass
class SparkStandaloneAutoscalingConfig(ApiResource):
    gracefulDecommissionTimeout: str|None = duration()
    scaleUpFactor: float|None = field(default=None)
    scaleDownFactor: float|None = field(default=None)
    scaleUpMinWorkerFraction: float|None = field(default=None)
    scaleDownMinWorkerFraction: float|None = field(default=None)

@dataclass
class BasicAutoscalingAlgorithm(ApiResource):
    yarnConfig: BasicYarnAutoscalingConfig|None = nested(BasicYarnAutoscalingConfig)
    sparkStandaloneConfig: SparkStandaloneAutoscalingConfig|None = nested(SparkStandaloneAutoscalingConfig)
    cooldownPeriod: str|None = duration()

@dataclass
class InstanceGroupAutoscalingPolicyConfig(ApiResource):
    minInstances: int|None = field(default=None)
    maxInstances: int|None = field(default=None)
    weight: int|None = field(default=None)

@dataclass
class AutoscalingPolicy(ApiResource):
    id: str|None = field(default=None)
    name: str|None = output_only()
    basicAlgorithm: BasicAutoscalingAlgorithm|None = nested(BasicAutoscalingAlgorithm)
    workerConfig: InstanceGroupAutoscalingPolicyConfig|None = nested(InstanceGroupAutoscalingPolicyConfig)
    secondaryWorkerConfig: InstanceGroupAutoscalingPolicyConfig|None = nested(InstanceGroupAutoscalingPolicyConfig)
    labels: dict[str, str]|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.id) or bool(self.name)

@dataclass
class ListAutoscalingPoliciesResponse(ApiResource):
    policies: List[AutoscalingPolicy]|None = nested(AutoscalingPolicy, repeated=True, readonly=True)
    nextPageToken: str|None = output_only()

# batches

@dataclass
class ExecutionConfig(ApiResource):
    serviceAccount: str|None = field(default=None)
    networkUri: str|None = field(default=None)
    subnetworkUri: str|None = field(default=None)
    networkTags: List[str]|None = field(default=None)
    kmsKey: str|None = field(default=None)
    idleTtl: str|None = duration()
    ttl: str|None = duration()
    stagingBucket: str|None = field(default=None)

@dataclass
class EnvironmentConfig(ApiResource):
    executionConfig: ExecutionConfig|None = nested(ExecutionConfig)
    peripheralsConfig: dict|None = field(default=None)

@dataclass
class UsageMetrics(ApiResource):
    milliDcuSeconds: int|None = int64()
    shuffleStorageGbSeconds: int|None = int64()

@dataclass
class UsageSnapshot(ApiResource):
    milliDcu: int|None = int64()
    shuffleStorageGb: int|None = int64()
    snapshotTime: datetime.datetime|None = timestamp()

@dataclass
class RuntimeInfo(ApiResource):
    endpoints: dict[str, str]|None = output_only()
    outputUri: str|None = output_only()
    diagnosticOutputUri: str|None = output_only()
    approximateUsage: UsageMetrics|None = nested(UsageMetrics, readonly=True)
    currentUsage: UsageSnapshot|None = nested(UsageSnapshot, readonly=True)

@dataclass
class StateHistory(ApiResource):
    state: str|None = output_only()
    stateMessage: str|None = output_only()
    stateStartTime: datetime.datetime|None = timestamp(readonly=True)

@dataclass
class Batch(ApiResource):
    """
    Exactly one of pysparkBatch, sparkBatch, sparkRBatch, sparkSqlBatch is expected.
    """
    name: str|None = output_only()
    uuid: str|None = output_only()
    createTime: datetime.datetime|None = timestamp(readonly=True)
    pysparkBatch: dict|None = field(default=None)
    sparkBatch: dict|None = field(default=None)
    sparkRBatch: dict|None = field(default=None)
    sparkSqlBatch: dict|None = field(default=None)
    runtimeInfo: RuntimeInfo|None = nested(RuntimeInfo, readonly=True)
    state: str|None = output_only()
    stateMessage: str|None = output_only()
    stateTime: datetime.datetime|None = timestamp(readonly=True)
    creator: str|None = output_only()
    labels: dict[str, str]|None = field(default=None)
    runtimeConfig: dict|None = field(default=None)
    environmentConfig: EnvironmentConfig|None = nested(EnvironmentConfig)
    operation: str|None = output_only()
    stateHistory: List[StateHistory]|None = nested(StateHistory, repeated=True, readonly=True)

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self:
            return f"{self.name}:{self.state}"
        return "<empty>"

@dataclass
class ListBatchesResponse(ApiResource):
    batches: List[Batch]|None = nested(Batch, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class BatchOperationMetadata(ApiResource):
    batch: str|None = field(default=None)
    batchUuid: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp()
    doneTime: datetime.datetime|None = timestamp()
    operationType: str|None = field(default=None)
    description: str|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    warnings: List[str]|None = field(default=None)

@dataclass
class SessionOperationMetadata(ApiResource):
    session: str|None = field(default=None)
    sessionUuid: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp()
    doneTime: datetime.datetime|None = timestamp()
    operationType: str|None = field(default=None)
    description: str|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    warnings: List[str]|None = field(default=None)

# clusters

@dataclass
class NodeInitializationAction(ApiResource):
    executableFile: str|None = field(default=None)
    executionTimeout: str|None = duration()

@dataclass
class LifecycleConfig(ApiResource):
    """
    Scheduled deletion.  Either an absolute autoDeleteTime or a relative
    autoDeleteTtl, plus an optional idleDeleteTtl.
    """
    idleDeleteTtl: str|None = duration()
    autoDeleteTime: datetime.datetime|None = timestamp()
    autoDeleteTtl: str|None = duration()
    idleStartTime: datetime.datetime|None = timestamp(readonly=True)

@dataclass
class GkeNodePoolAcceleratorConfig(ApiResource):
    acceleratorCount: int|None = int64()
    acceleratorType: str|None = field(default=None)
    gpuPartitionSize: str|None = field(default=None)

@dataclass
class GkeNodeConfig(ApiResource):
    machineType: str|None = field(default=None)
    localSsdCount: int|None = field(default=None)
    preemptible: bool|None = field(default=None)
    accelerators: List[GkeNodePoolAcceleratorConfig]|None = nested(GkeNodePoolAcceleratorConfig, repeated=True)
    minCpuPlatform: str|None = field(default=None)
    bootDiskKmsKey: str|None = field(default=None)
    spot: bool|None = field(default=None)

@dataclass
class GkeNodePoolConfig(ApiResource):
    config: GkeNodeConfig|None = nested(GkeNodeConfig)
    locations: List[str]|None = field(default=None)
    autoscaling: dict|None = field(default=None)

@dataclass
class GkeNodePoolTarget(ApiResource):
    nodePool: str|None = field(default=None)
    roles: List[str]|None = field(default=None)
    nodePoolConfig: GkeNodePoolConfig|None = nested(GkeNodePoolConfig)

@dataclass
class GkeClusterConfig(ApiResource):
    namespacedGkeDeploymentTarget: dict|None = field(default=None)
    gkeClusterTarget: str|None = field(default=None)
    nodePoolTarget: List[GkeNodePoolTarget]|None = nested(GkeNodePoolTarget, repeated=True)

@dataclass
class KubernetesClusterConfig(ApiResource):
    kubernetesNamespace: str|None = field(default=None)
    gkeClusterConfig: GkeClusterConfig|None = nested(GkeClusterConfig)
    kubernetesSoftwareConfig: dict|None = field(default=None)

@dataclass
class VirtualClusterConfig(ApiResource):
    stagingBucket: str|None = field(default=None)
    kubernetesClusterConfig: KubernetesClusterConfig|None = nested(KubernetesClusterConfig)
    auxiliaryServicesConfig: dict|None = field(default=None)

@dataclass
class NodeGroup(ApiResource):
    name: str|None = field(default=None)
    roles: List[str]|None = field(default=None)
    nodeGroupConfig: dict|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)

@dataclass
class AuxiliaryNodeGroup(ApiResource):
    nodeGroup: NodeGroup|None = nested(NodeGroup)
    nodeGroupId: str|None = field(default=None)

@dataclass
class ClusterConfig(ApiResource):
    """
    masterConfig / workerConfig / secondaryWorkerConfig are InstanceGroupConfig dicts.
    """
    configBucket: str|None = field(default=None)
    tempBucket: str|None = field(default=None)
    gceClusterConfig: dict|None = field(default=None)
    masterConfig: dict|None = field(default=None)
    workerConfig: dict|None = field(default=None)
    secondaryWorkerConfig: dict|None = field(default=None)
    softwareConfig: dict|None = field(default=None)
    initializationActions: List[NodeInitializationAction]|None = nested(NodeInitializationAction, repeated=True)
    encryptionConfig: dict|None = field(default=None)
    autoscalingConfig: dict|None = field(default=None)
    securityConfig: dict|None = field(default=None)
    lifecycleConfig: LifecycleConfig|None = nested(LifecycleConfig)
    endpointConfig: dict|None = field(default=None)
    metastoreConfig: dict|None = field(default=None)
    gkeClusterConfig: GkeClusterConfig|None = nested(GkeClusterConfig)
    dataprocMetricConfig: dict|None = field(default=None)
    auxiliaryNodeGroups: List[AuxiliaryNodeGroup]|None = nested(AuxiliaryNodeGroup, repeated=True)

@dataclass
class ClusterStatus(ApiResource):
    state: str|None = output_only()
    detail: str|None = output_only()
    stateStartTime: datetime.datetime|None = timestamp(readonly=True)
    substate: str|None = output_only()

@dataclass
class ClusterMetrics(ApiResource):
    """HDFS and YARN counters, name -> int64"""
    hdfsMetrics: dict[str, int]|None = int64(mapped=True)
    yarnMetrics: dict[str, int]|None = int64(mapped=True)

@dataclass
class Cluster(ApiResource):
    projectId: str|None = field(default=None)
    clusterName: str|None = field(default=None)
    config: ClusterConfig|None = nested(ClusterConfig)
    virtualClusterConfig: VirtualClusterConfig|None = nested(VirtualClusterConfig)
    labels: dict[str, str]|None = field(default=None)
    status: ClusterStatus|None = nested(ClusterStatus, readonly=True)
    statusHistory: List[ClusterStatus]|None = nested(ClusterStatus, repeated=True, readonly=True)
    clusterUuid: str|None = output_only()
    metrics: ClusterMetrics|None = nested(ClusterMetrics, readonly=True)

    def __bool__(self) -> bool:
        return bool(self.clusterName)

    def __str__(self) -> str:
        if self:
            state = self.status.state if self.status else None
            return f"{self.projectId}/{self.clusterName}:{state}"
        return "<empty>"

@dataclass
class ListClustersResponse(ApiResource):
    clusters: List[Cluster]|None = nested(Cluster, repeated=True, readonly=True)
    nextPageToken: str|None = output_only()

@dataclass
class Interval(ApiResource):
    startTime: datetime.datetime|None = timestamp()
    endTime: datetime.datetime|None = timestamp()

@dataclass
class DiagnoseClusterRequest(ApiResource):
    diagnosisInterval: Interval|None = nested(Interval)
    job: str|None = field(default=None)
    yarnApplicationId: str|None = field(default=None)

@dataclass
class RepairClusterRequest(ApiResource):
    clusterUuid: str|None = field(default=None)
    requestId: str|None = field(default=None)
    nodePools: List[dict]|None = field(default=None)
    gracefulDecommissionTimeout: str|None = duration()
    parentOperationId: str|None = field(default=None)

@dataclass
class InjectCredentialsRequest(ApiResource):
    clusterUuid: str|None = field(default=None)
    credentialsCiphertext: str|None = field(default=None)

@dataclass
class StartClusterRequest(ApiResource):
    clusterUuid: str|None = field(default=None)
    requestId: str|None = field(default=None)

@dataclass
class StopClusterRequest(ApiResource):
    clusterUuid: str|None = field(default=None)
    requestId: str|None = field(default=None)

@dataclass
class ResizeNodeGroupRequest(ApiResource):
    size: int|None = field(default=None)
    requestId: str|None = field(default=None)
    gracefulDecommissionTimeout: str|None = duration()

@dataclass
class ClusterOperationStatus(ApiResource):
    state: str|None = output_only()
    innerState: str|None = output_only()
    details: str|None = output_only()
    stateStartTime: datetime.datetime|None = timestamp(readonly=True)

@dataclass
class ClusterOperationMetadata(ApiResource):
    clusterName: str|None = output_only()
    clusterUuid: str|None = output_only()
    status: ClusterOperationStatus|None = nested(ClusterOperationStatus, readonly=True)
    statusHistory: List[ClusterOperationStatus]|None = nested(ClusterOperationStatus, repeated=True, readonly=True)
    operationType: str|None = output_only()
    description: str|None = output_only()
    labels: dict[str, str]|None = output_only()
    warnings: List[str]|None = output_only()
    childOperationIds: List[str]|None = output_only()

@dataclass
class NodeGroupOperationMetadata(ApiResource):
    nodeGroupId: str|None = output_only()
    clusterUuid: str|None = output_only()
    status: ClusterOperationStatus|None = nested(ClusterOperationStatus, readonly=True)
    statusHistory: List[ClusterOperationStatus]|None = nested(ClusterOperationStatus, repeated=True, readonly=True)
    operationType: str|None = field(default=None)
    description: str|None = output_only()
    labels: dict[str, str]|None = output_only()
    warnings: List[str]|None = output_only()

# jobs

@dataclass
class JobReference(ApiResource):
    projectId: str|None = field(default=None)
    jobId: str|None = field(default=None)

@dataclass
class JobPlacement(ApiResource):
    clusterName: str|None = field(default=None)
    clusterUuid: str|None = output_only()
    clusterLabels: dict[str, str]|None = field(default=None)

@dataclass
class JobStatus(ApiResource):
    state: str|None = output_only()
    details: str|None = output_only()
    stateStartTime: datetime.datetime|None = timestamp(readonly=True)
    substate: str|None = output_only()

@dataclass
class Job(ApiResource):
    """
    Exactly one of the *Job fields (hadoopJob, sparkJob, pysparkJob, ...) is expected,
    each is the plain dict for that job type.
    """
    reference: JobReference|None = nested(JobReference)
    placement: JobPlacement|None = nested(JobPlacement)
    hadoopJob: dict|None = field(default=None)
    sparkJob: dict|None = field(default=None)
    pysparkJob: dict|None = field(default=None)
    hiveJob: dict|None = field(default=None)
    pigJob: dict|None = field(default=None)
    sparkRJob: dict|None = field(default=None)
    sparkSqlJob: dict|None = field(default=None)
    prestoJob: dict|None = field(default=None)
    trinoJob: dict|None = field(default=None)
    status: JobStatus|None = nested(JobStatus, readonly=True)
    statusHistory: List[JobStatus]|None = nested(JobStatus, repeated=True, readonly=True)
    yarnApplications: List[dict]|None = output_only()
    driverOutputResourceUri: str|None = output_only()
    driverControlFilesUri: str|None = output_only()
    labels: dict[str, str]|None = field(default=None)
    scheduling: dict|None = field(default=None)
    jobUuid: str|None = output_only()
    done: bool|None = output_only()
    driverSchedulingConfig: dict|None = field(default=None)

    def __bool__(self) -> bool:
        return self.reference is not None and bool(self.reference.jobId)

    def __str__(self) -> str:
        if self:
            state = self.status.state if self.status else None
            return f"{self.reference.jobId}:{state}"
        return "<empty>"

@dataclass
class ListJobsResponse(ApiResource):
    jobs: List[Job]|None = nested(Job, repeated=True, readonly=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class SubmitJobRequest(ApiResource):
    job: Job|None = nested(Job)
    requestId: str|None = field(default=None)

@dataclass
class CancelJobRequest(ApiResource):
    pass

# node groups reuse NodeGroup above

# workflow templates

@dataclass
class ManagedCluster(ApiResource):
    clusterName: str|None = field(default=None)
    config: ClusterConfig|None = nested(ClusterConfig)
    labels: dict[str, str]|None = field(default=None)

@dataclass
class ClusterSelector(ApiResource):
    zone: str|None = field(default=None)
    clusterLabels: dict[str, str]|None = field(default=None)

@dataclass
class WorkflowTemplatePlacement(ApiResource):
    managedCluster: ManagedCluster|None = nested(ManagedCluster)
    clusterSelector: ClusterSelector|None = nested(ClusterSelector)

@dataclass
class WorkflowTemplate(ApiResource):
    """
    jobs are OrderedJob dicts (stepId, prerequisiteStepIds and one job type).
    version must match the stored version on update.
    """
    id: str|None = field(default=None)
    name: str|None = output_only()
    version: int|None = field(default=None)
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    labels: dict[str, str]|None = field(default=None)
    placement: WorkflowTemplatePlacement|None = nested(WorkflowTemplatePlacement)
    jobs: List[dict]|None = field(default=None)
    parameters: List[dict]|None = field(default=None)
    dagTimeout: str|None = duration()

    def __bool__(self) -> bool:
        return bool(self.id) or bool(self.name)

@dataclass
class ListWorkflowTemplatesResponse(ApiResource):
    templates: List[WorkflowTemplate]|None = nested(WorkflowTemplate, repeated=True, readonly=True)
    nextPageToken: str|None = output_only()

@dataclass
class InstantiateWorkflowTemplateRequest(ApiResource):
    version: int|None = field(default=None)
    requestId: str|None = field(default=None)
    parameters: dict[str, str]|None = field(default=None)

@dataclass
class WorkflowMetadata(ApiResource):
    """metadata of the Operation returned by the instantiate calls"""
    template: str|None = output_only()
    version: int|None = output_only()
    createCluster: dict|None = output_only()
    graph: dict|None = output_only()
    deleteCluster: dict|None = output_only()
    state: str|None = output_only()
    clusterName: str|None = output_only()
    parameters: dict[str, str]|None = field(default=None)
    startTime: datetime.datetime|None = timestamp(readonly=True)
    endTime: datetime.datetime|None = timestamp(readonly=True)
    clusterUuid: str|None = output_only()
    dagTimeout: str|None = duration(readonly=True)
    dagStartTime: datetime.datetime|None = timestamp(readonly=True)
    dagEndTime: datetime.datetime|None = timestamp(readonly=True)
