"""
Identity and Access Management API v2, deny policies.
https://cloud.google.com/iam/docs/reference/rest/v2/policies

Not to be confused with gapis.common.Policy, the allow policy returned by every
getIamPolicy endpoint.  A v2 Policy here is a named resource attached to a
project, folder or organization, e.g.
    policies/cloudresourcemanager.googleapis.com%2Fprojects%2Fmy-project/denypolicies
The attachment point is URL encoded inside the name and must stay that way,
path parameters are used exactly as given.
"""
from dataclasses import dataclass, field
from typing import List
import datetime

from .access import gcp
from .common import Expr, Operation
from .resources import ApiResource, nested, output_only, timestamp
from .transport import ApiClient

gcp.append_scopes("cloud-platform")

@dataclass
class DenyRule(ApiResource):
    deniedPrincipals: List[str]|None = field(default=None)
    exceptionPrincipals: List[str]|None = field(default=None)
    deniedPermissions: List[str]|None = field(default=None)
    exceptionPermissions: List[str]|None = field(default=None)
    denialCondition: Expr|None = nested(Expr)

@dataclass
class PolicyRule(ApiResource):
    description: str|None = field(default=None)
    denyRule: DenyRule|None = nested(DenyRule)

@dataclass
class Policy(ApiResource):
    name: str|None = field(default=None)
    uid: str|None = field(default=None)
    kind: str|None = output_only()
    displayName: str|None = field(default=None)
    annotations: dict[str, str]|None = field(default=None)
    etag: str|None = field(default=None)
    createTime: datetime.datetime|None = timestamp(readonly=True)
    updateTime: datetime.datetime|None = timestamp(readonly=True)
    deleteTime: datetime.datetime|None = timestamp(readonly=True)
    rules: List[PolicyRule]|None = nested(PolicyRule, repeated=True)

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self:
            return f"{self.displayName or ''}<{self.name}>"
        return "<empty>"

@dataclass
class ListPoliciesResponse(ApiResource):
    policies: List[Policy]|None = nested(Policy, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class PolicyOperationMetadata(ApiResource):
    """metadata of the Operations returned by the mutating policy calls"""
    createTime: datetime.datetime|None = timestamp()


class IAM(ApiClient):
    DEFAULT_BASE_URL = "https://iam.googleapis.com/"
    API_VERSION = "v2"

    def policiesCreatePolicy(self, parent: str, req: Policy, *, policyId: str|None = None) -> Operation:
        """
        parent is policies/{attachment_point}/denypolicies
        """
        return self._request(self._url(f"v2/{parent}", ("policyId", policyId)), "POST", req, Operation)

    def policiesDelete(self, name: str, *, etag: str|None = None) -> Operation:
        return self._request(self._url(f"v2/{name}", ("etag", etag)), "DELETE", response=Operation)

    def policiesGet(self, name: str) -> Policy:
        return self._request(self._url(f"v2/{name}"), "GET", response=Policy)

    def policiesListPolicies(self, parent: str, *,
                             pageSize: int|None = None,
                             pageToken: str|None = None) -> ListPoliciesResponse:
        return self._request(self._url(f"v2/{parent}", ("pageSize", pageSize), ("pageToken", pageToken)),
                             "GET", response=ListPoliciesResponse)

    def policiesOperationsGet(self, name: str) -> Operation:
        return self._request(self._url(f"v2/{name}"), "GET", response=Operation)

    def policiesUpdate(self, name: str, req: Policy) -> Operation:
        """
        Replace the policy.  Include the etag from policiesGet to avoid
        clobbering a concurrent change.
        """
        return self._request(self._url(f"v2/{name}"), "PUT", req, Operation)
