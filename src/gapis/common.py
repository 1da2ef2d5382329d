"""
Schemas shared by several of the APIs: long running operations, status and
the IAM policy family used by every getIamPolicy/setIamPolicy endpoint.
"""
from dataclasses import dataclass, field
from typing import List

from .resources import ApiResource, byte_buffer, nested

@dataclass
class Empty(ApiResource):
    """Body of calls that take or return nothing, i.e. {}"""
    pass

@dataclass
class Status(ApiResource):
    """
    https://cloud.google.com/apis/design/errors#error_model
    """
    code: int|None = field(default=None)
    message: str|None = field(default=None)
    details: List[dict]|None = field(default=None)

@dataclass
class Operation(ApiResource):
    """
    Long running operation.  metadata and response are left as the raw dicts
    with their '@type' keys, the payload type depends on the call.
    """
    name: str|None = field(default=None)
    metadata: dict|None = field(default=None)
    done: bool|None = field(default=None)
    error: Status|None = nested(Status)
    response: dict|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self:
            return f"{self.name}:{'done' if self.done else 'running'}"
        return "<empty>"

@dataclass
class ListOperationsResponse(ApiResource):
    operations: List[Operation]|None = nested(Operation, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class Expr(ApiResource):
    """
    CEL expression used for conditional role bindings and deny rules.
    https://github.com/google/cel-spec
    """
    expression: str|None = field(default=None)
    title: str|None = field(default=None)
    description: str|None = field(default=None)
    location: str|None = field(default=None)

@dataclass
class Binding(ApiResource):
    role: str|None = field(default=None)
    members: List[str]|None = field(default=None)
    condition: Expr|None = nested(Expr)

@dataclass
class AuditLogConfig(ApiResource):
    logType: str|None = field(default=None)
    exemptedMembers: List[str]|None = field(default=None)

@dataclass
class AuditConfig(ApiResource):
    service: str|None = field(default=None)
    auditLogConfigs: List[AuditLogConfig]|None = nested(AuditLogConfig, repeated=True)

@dataclass
class Policy(ApiResource):
    """
    https://cloud.google.com/iam/docs/reference/rest/v1/Policy
    etag is opaque bytes, base64 on the wire.  Send back the one you read
    to get read-modify-write protection on setIamPolicy.
    """
    version: int|None = field(default=None)
    bindings: List[Binding]|None = nested(Binding, repeated=True)
    auditConfigs: List[AuditConfig]|None = nested(AuditConfig, repeated=True)
    etag: bytes|None = byte_buffer()

@dataclass
class GetPolicyOptions(ApiResource):
    requestedPolicyVersion: int|None = field(default=None)

@dataclass
class GetIamPolicyRequest(ApiResource):
    options: GetPolicyOptions|None = nested(GetPolicyOptions)

@dataclass
class SetIamPolicyRequest(ApiResource):
    policy: Policy|None = nested(Policy)
    updateMask: str|None = field(default=None)

@dataclass
class TestIamPermissionsRequest(ApiResource):
    permissions: List[str]|None = field(default=None)

@dataclass
class TestIamPermissionsResponse(ApiResource):
    permissions: List[str]|None = field(default=None)
