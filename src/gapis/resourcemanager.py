"""
Cloud Resource Manager API v3
https://cloud.google.com/resource-manager/reference/rest

The resource hierarchy (organizations, folders, projects), liens that block
project deletion, and the tag keys / values / bindings / holds used for
conditional IAM and firewall policy.  Names are the full relative resource
names, e.g. folders/123, projects/my-project, tagKeys/456.
"""
from dataclasses import dataclass, field
from typing import List
import datetime

from .access import gcp
from .common import (Empty, GetIamPolicyRequest, Operation, Policy, SetIamPolicyRequest,
                     TestIamPermissionsRequest, TestIamPermissionsResponse)
from .resources import ApiResource, nested, output_only, timestamp
from .transport import ApiClient

gcp.append_scopes("cloud-platform")

@dataclass
class Folder(ApiResource):
    """
    Create / patch only look at parent and displayName, everything else is set
    by the server.
    """
    name: str|None = output_only()
    parent: str|None = field(default=None)
    displayName: str|None = field(default=None)
    state: str|None = output_only()
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    deleteTime: datetime.datetime|None = timestamp(readonly=True)
    etag: str|None = output_only()

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self:
            return f"{self.displayName}<{self.name}>"
        return "<empty>"

@dataclass
class Project(ApiResource):
    name: str|None = output_only()
    parent: str|None = field(default=None)
    projectId: str|None = field(default=None)
    state: str|None = output_only()
    displayName: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    deleteTime: datetime.datetime|None = timestamp(readonly=True)
    etag: str|None = output_only()
    labels: dict[str, str]|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.name) or bool(self.projectId)

    def __str__(self) -> str:
        if self:
            return f"{self.projectId}<{self.name}>"
        return "<empty>"

@dataclass
class Organization(ApiResource):
    """Entirely output only apart from directoryCustomerId."""
    name: str|None = output_only()
    displayName: str|None = output_only()
    directoryCustomerId: str|None = field(default=None)
    state: str|None = output_only()
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    deleteTime: datetime.datetime|None = timestamp(readonly=True)
    etag: str|None = output_only()

@dataclass
class Lien(ApiResource):
    name: str|None = field(default=None)
    parent: str|None = field(default=None)
    restrictions: List[str]|None = field(default=None)
    reason: str|None = field(default=None)
    origin: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp()

@dataclass
class TagBinding(ApiResource):
    name: str|None = output_only()
    parent: str|None = field(default=None)
    tagValue: str|None = field(default=None)

@dataclass
class TagKey(ApiResource):
    name: str|None = field(default=None)
    parent: str|None = field(default=None)
    shortName: str|None = field(default=None)
    namespacedName: str|None = output_only()
    description: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    etag: str|None = field(default=None)
    purpose: str|None = field(default=None)
    purposeData: dict[str, str]|None = field(default=None)

@dataclass
class TagValue(ApiResource):
    name: str|None = field(default=None)
    parent: str|None = field(default=None)
    shortName: str|None = field(default=None)
    namespacedName: str|None = output_only()
    description: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    etag: str|None = field(default=None)

@dataclass
class TagHold(ApiResource):
    name: str|None = output_only()
    holder: str|None = field(default=None)
    origin: str|None = field(default=None)
    helpLink: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp(readonly=True)

@dataclass
class EffectiveTag(ApiResource):
    tagValue: str|None = field(default=None)
    namespacedTagValue: str|None = field(default=None)
    tagKey: str|None = field(default=None)
    namespacedTagKey: str|None = field(default=None)
    tagKeyParentName: str|None = field(default=None)
    inherited: bool|None = field(default=None)

@dataclass
class MoveFolderRequest(ApiResource):
    destinationParent: str|None = field(default=None)

@dataclass
class MoveProjectRequest(ApiResource):
    destinationParent: str|None = field(default=None)

@dataclass
class UndeleteFolderRequest(ApiResource):
    pass

@dataclass
class UndeleteProjectRequest(ApiResource):
    pass

@dataclass
class ListEffectiveTagsResponse(ApiResource):
    effectiveTags: List[EffectiveTag]|None = nested(EffectiveTag, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListFoldersResponse(ApiResource):
    folders: List[Folder]|None = nested(Folder, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class SearchFoldersResponse(ApiResource):
    folders: List[Folder]|None = nested(Folder, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListLiensResponse(ApiResource):
    liens: List[Lien]|None = nested(Lien, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class SearchOrganizationsResponse(ApiResource):
    organizations: List[Organization]|None = nested(Organization, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListProjectsResponse(ApiResource):
    projects: List[Project]|None = nested(Project, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class SearchProjectsResponse(ApiResource):
    projects: List[Project]|None = nested(Project, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListTagBindingsResponse(ApiResource):
    tagBindings: List[TagBinding]|None = nested(TagBinding, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListTagKeysResponse(ApiResource):
    tagKeys: List[TagKey]|None = nested(TagKey, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListTagValuesResponse(ApiResource):
    tagValues: List[TagValue]|None = nested(TagValue, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListTagHoldsResponse(ApiResource):
    tagHolds: List[TagHold]|None = nested(TagHold, repeated=True)
    nextPageToken: str|None = field(default=None)

# Operation.metadata payloads

@dataclass
class ProjectCreationStatus(ApiResource):
    createTime: datetime.datetime|None = timestamp()
    gettable: bool|None = field(default=None)
    ready: bool|None = field(default=None)

@dataclass
class CreateProjectMetadata(ApiResource):
    createTime: datetime.datetime|None = timestamp()
    gettable: bool|None = field(default=None)
    ready: bool|None = field(default=None)

@dataclass
class CreateFolderMetadata(ApiResource):
    displayName: str|None = field(default=None)
    parent: str|None = field(default=None)

@dataclass
class MoveFolderMetadata(ApiResource):
    displayName: str|None = field(default=None)
    sourceParent: str|None = field(default=None)
    destinationParent: str|None = field(default=None)

@dataclass
class FolderOperation(ApiResource):
    displayName: str|None = field(default=None)
    operationType: str|None = field(default=None)
    sourceParent: str|None = field(default=None)
    destinationParent: str|None = field(default=None)

@dataclass
class FolderOperationError(ApiResource):
    errorMessageId: str|None = field(default=None)


class CloudResourceManager(ApiClient):
    DEFAULT_BASE_URL = "https://cloudresourcemanager.googleapis.com/"
    API_VERSION = "v3"

    def effectiveTagsList(self, *,
                          pageSize: int|None = None,
                          pageToken: str|None = None,
                          parent: str|None = None) -> ListEffectiveTagsResponse:
        """
        Tags attached to parent directly or inherited from its ancestors.
        parent is a full resource name, e.g. //cloudresourcemanager.googleapis.com/projects/123
        """
        return self._request(self._url("v3/effectiveTags", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent)),
                             "GET", response=ListEffectiveTagsResponse)

    # folders

    def foldersCreate(self, req: Folder) -> Operation:
        return self._request(self._url("v3/folders"), "POST", req, Operation)

    def foldersDelete(self, name: str) -> Operation:
        return self._request(self._url(f"v3/{name}"), "DELETE", response=Operation)

    def foldersGet(self, name: str) -> Folder:
        return self._request(self._url(f"v3/{name}"), "GET", response=Folder)

    def foldersGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def foldersList(self, *,
                    pageSize: int|None = None,
                    pageToken: str|None = None,
                    parent: str|None = None,
                    showDeleted: bool|None = None) -> ListFoldersResponse:
        """
        Direct children of parent (folders/{id} or organizations/{id}).
        """
        return self._request(self._url("v3/folders", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent), ("showDeleted", showDeleted)),
                             "GET", response=ListFoldersResponse)

    def foldersMove(self, name: str, req: MoveFolderRequest) -> Operation:
        return self._request(self._url(f"v3/{name}:move"), "POST", req, Operation)

    def foldersPatch(self, name: str, req: Folder, *, updateMask: str|None = None) -> Operation:
        """
        Only displayName can be changed.
        """
        return self._request(self._url(f"v3/{name}", ("updateMask", updateMask)), "PATCH", req, Operation)

    def foldersSearch(self, *,
                      pageSize: int|None = None,
                      pageToken: str|None = None,
                      query: str|None = None) -> SearchFoldersResponse:
        return self._request(self._url("v3/folders:search", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("query", query)),
                             "GET", response=SearchFoldersResponse)

    def foldersSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def foldersTestIamPermissions(self, resource: str, req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    def foldersUndelete(self, name: str, req: UndeleteFolderRequest|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}:undelete"), "POST", req or UndeleteFolderRequest(), Operation)

    # liens

    def liensCreate(self, req: Lien) -> Lien:
        return self._request(self._url("v3/liens"), "POST", req, Lien)

    def liensDelete(self, name: str) -> Empty:
        return self._request(self._url(f"v3/{name}"), "DELETE", response=Empty)

    def liensGet(self, name: str) -> Lien:
        return self._request(self._url(f"v3/{name}"), "GET", response=Lien)

    def liensList(self, *,
                  pageSize: int|None = None,
                  pageToken: str|None = None,
                  parent: str|None = None) -> ListLiensResponse:
        return self._request(self._url("v3/liens", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent)),
                             "GET", response=ListLiensResponse)

    # operations

    def operationsGet(self, name: str) -> Operation:
        return self._request(self._url(f"v3/{name}"), "GET", response=Operation)

    # organizations

    def organizationsGet(self, name: str) -> Organization:
        return self._request(self._url(f"v3/{name}"), "GET", response=Organization)

    def organizationsGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def organizationsSearch(self, *,
                            pageSize: int|None = None,
                            pageToken: str|None = None,
                            query: str|None = None) -> SearchOrganizationsResponse:
        return self._request(self._url("v3/organizations:search", ("pageSize", pageSize),
                                       ("pageToken", pageToken), ("query", query)),
                             "GET", response=SearchOrganizationsResponse)

    def organizationsSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def organizationsTestIamPermissions(self, resource: str,
                                        req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    # projects

    def projectsCreate(self, req: Project) -> Operation:
        """
        The Operation metadata is a CreateProjectMetadata, the response the new Project.
        """
        return self._request(self._url("v3/projects"), "POST", req, Operation)

    def projectsDelete(self, name: str) -> Operation:
        return self._request(self._url(f"v3/{name}"), "DELETE", response=Operation)

    def projectsGet(self, name: str) -> Project:
        return self._request(self._url(f"v3/{name}"), "GET", response=Project)

    def projectsGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def projectsList(self, *,
                     pageSize: int|None = None,
                     pageToken: str|None = None,
                     parent: str|None = None,
                     showDeleted: bool|None = None) -> ListProjectsResponse:
        return self._request(self._url("v3/projects", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent), ("showDeleted", showDeleted)),
                             "GET", response=ListProjectsResponse)

    def projectsMove(self, name: str, req: MoveProjectRequest) -> Operation:
        return self._request(self._url(f"v3/{name}:move"), "POST", req, Operation)

    def projectsPatch(self, name: str, req: Project, *, updateMask: str|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}", ("updateMask", updateMask)), "PATCH", req, Operation)

    def projectsSearch(self, *,
                       pageSize: int|None = None,
                       pageToken: str|None = None,
                       query: str|None = None) -> SearchProjectsResponse:
        return self._request(self._url("v3/projects:search", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("query", query)),
                             "GET", response=SearchProjectsResponse)

    def projectsSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def projectsTestIamPermissions(self, resource: str, req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    def projectsUndelete(self, name: str, req: UndeleteProjectRequest|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}:undelete"), "POST", req or UndeleteProjectRequest(), Operation)

    # tag bindings

    def tagBindingsCreate(self, req: TagBinding, *, validateOnly: bool|None = None) -> Operation:
        return self._request(self._url("v3/tagBindings", ("validateOnly", validateOnly)), "POST", req, Operation)

    def tagBindingsDelete(self, name: str) -> Operation:
        return self._request(self._url(f"v3/{name}"), "DELETE", response=Operation)

    def tagBindingsList(self, *,
                        pageSize: int|None = None,
                        pageToken: str|None = None,
                        parent: str|None = None) -> ListTagBindingsResponse:
        return self._request(self._url("v3/tagBindings", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent)),
                             "GET", response=ListTagBindingsResponse)

    # tag keys

    def tagKeysCreate(self, req: TagKey, *, validateOnly: bool|None = None) -> Operation:
        return self._request(self._url("v3/tagKeys", ("validateOnly", validateOnly)), "POST", req, Operation)

    def tagKeysDelete(self, name: str, *,
                      etag: str|None = None,
                      validateOnly: bool|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}", ("etag", etag), ("validateOnly", validateOnly)),
                             "DELETE", response=Operation)

    def tagKeysGet(self, name: str) -> TagKey:
        return self._request(self._url(f"v3/{name}"), "GET", response=TagKey)

    def tagKeysGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def tagKeysList(self, *,
                    pageSize: int|None = None,
                    pageToken: str|None = None,
                    parent: str|None = None) -> ListTagKeysResponse:
        return self._request(self._url("v3/tagKeys", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent)),
                             "GET", response=ListTagKeysResponse)

    def tagKeysPatch(self, name: str, req: TagKey, *,
                     updateMask: str|None = None,
                     validateOnly: bool|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}", ("updateMask", updateMask), ("validateOnly", validateOnly)),
                             "PATCH", req, Operation)

    def tagKeysSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def tagKeysTestIamPermissions(self, resource: str, req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    # tag values

    def tagValuesCreate(self, req: TagValue, *, validateOnly: bool|None = None) -> Operation:
        return self._request(self._url("v3/tagValues", ("validateOnly", validateOnly)), "POST", req, Operation)

    def tagValuesDelete(self, name: str, *,
                        etag: str|None = None,
                        validateOnly: bool|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}", ("etag", etag), ("validateOnly", validateOnly)),
                             "DELETE", response=Operation)

    def tagValuesGet(self, name: str) -> TagValue:
        return self._request(self._url(f"v3/{name}"), "GET", response=TagValue)

    def tagValuesGetIamPolicy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._get_iam_policy(resource, req)

    def tagValuesList(self, *,
                      pageSize: int|None = None,
                      pageToken: str|None = None,
                      parent: str|None = None) -> ListTagValuesResponse:
        return self._request(self._url("v3/tagValues", ("pageSize", pageSize), ("pageToken", pageToken),
                                       ("parent", parent)),
                             "GET", response=ListTagValuesResponse)

    def tagValuesPatch(self, name: str, req: TagValue, *,
                       updateMask: str|None = None,
                       validateOnly: bool|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}", ("updateMask", updateMask), ("validateOnly", validateOnly)),
                             "PATCH", req, Operation)

    def tagValuesSetIamPolicy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._set_iam_policy(resource, req)

    def tagValuesTestIamPermissions(self, resource: str,
                                    req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._test_iam_permissions(resource, req)

    def tagValuesTagHoldsCreate(self, parent: str, req: TagHold, *, validateOnly: bool|None = None) -> Operation:
        return self._request(self._url(f"v3/{parent}/tagHolds", ("validateOnly", validateOnly)),
                             "POST", req, Operation)

    def tagValuesTagHoldsDelete(self, name: str, *, validateOnly: bool|None = None) -> Operation:
        return self._request(self._url(f"v3/{name}", ("validateOnly", validateOnly)), "DELETE", response=Operation)

    def tagValuesTagHoldsList(self, parent: str, *,
                              filter: str|None = None,
                              pageSize: int|None = None,
                              pageToken: str|None = None) -> ListTagHoldsResponse:
        return self._request(self._url(f"v3/{parent}/tagHolds", ("filter", filter), ("pageSize", pageSize),
                                       ("pageToken", pageToken)),
                             "GET", response=ListTagHoldsResponse)
