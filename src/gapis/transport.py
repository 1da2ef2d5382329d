"""
The plumbing every API client shares.

An endpoint method is always the same four steps: build the URL, turn the
request resource into JSON, make exactly one HTTP call, turn the JSON that
comes back into the response resource.  ApiClient does steps 1, 3 and 4 with
googleapiclient's HttpRequest/JsonModel so retries, auth headers and the
HttpError mapping behave exactly as they do for discovery built services.
Nothing here loops over pages or retries on its own (num_retries defaults to 0),
use paginate() when you want every page.
"""
from collections.abc import Callable, Iterator
from typing import Any
from urllib.parse import urlencode
import logging

import google.auth.credentials
import httplib2
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.http import HttpRequest, build_http
from googleapiclient.model import JsonModel

from .access import gcp
from .common import (GetIamPolicyRequest, Policy, SetIamPolicyRequest,
                     TestIamPermissionsRequest, TestIamPermissionsResponse)
from .resources import ApiResource

logger = logging.getLogger(__name__)

class ApiClient():
    """
    Base for the per API clients.
    http selection, first that applies:
        http= as given (an httplib2.Http or googleapiclient's HttpMock*)
        credentials= wrapped in an AuthorizedHttp
        the gapis.access.gcp session
        a plain unauthenticated httplib2.Http
    """
    DEFAULT_BASE_URL = ""
    API_VERSION = ""

    def __init__(self,
                 credentials: google.auth.credentials.Credentials|None = None,
                 http: httplib2.Http|None = None,
                 base_url: str|None = None,
                 num_retries: int|None = None) -> None:
        self.base_url = base_url or self.DEFAULT_BASE_URL
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self._credentials = credentials
        self._http = http
        self._num_retries = num_retries

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self.base_url}"

    @property
    def http(self) -> httplib2.Http:
        if self._http is None:
            if self._credentials is not None:
                self._http = AuthorizedHttp(self._credentials, http=build_http())
            else:
                h = gcp.authorized_http()
                if h is None:
                    logger.warning("no Google credentials available, requests to %s will be unauthenticated", self.base_url)
                    h = build_http()
                self._http = h
        return self._http

    @property
    def num_retries(self) -> int:
        return gcp.num_retries if self._num_retries is None else self._num_retries

    def _url(self, path: str, *query: tuple[str, Any]) -> str:
        """
        base_url + path, where path already has the path parameters substituted
        verbatim, plus the query string built by _query.
        """
        url = self.base_url + path
        q = self._query(*query)
        if q:
            url = f"{url}?{q}"
        return url

    @staticmethod
    def _query(*pairs: tuple[str, Any]) -> str:
        """
        Query string from (name, value) pairs, kept in the order given.
        None is skipped, bools are lower case like JSON, lists repeat the name.
        """
        params = []
        for name, value in pairs:
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            for v in values:
                if isinstance(v, bool):
                    v = "true" if v else "false"
                params.append((name, str(v)))
        return urlencode(params)

    def _request(self, url: str, method: str, body: ApiResource|None = None, response: type|None = None) -> Any:
        """
        One HTTP exchange.  body is sent in its request form (output only fields dropped),
        the JSON returned is parsed into response if given.  HttpError and transport
        exceptions are not caught.
        """
        model = JsonModel()
        headers = {"accept": model.accept}
        payload = None
        if body is not None:
            payload = model.serialize(body.trim())
            headers["content-type"] = model.content_type
        logger.debug("%s %s", method, url)
        req = HttpRequest(self.http, model.response, url, method=method, body=payload, headers=headers)
        data = req.execute(num_retries=self.num_retries)
        if response is None:
            return data
        return response.from_base(data or {})

    def _get_iam_policy(self, resource: str, req: GetIamPolicyRequest) -> Policy:
        return self._request(self._url(f"{self.API_VERSION}/{resource}:getIamPolicy"), "POST", req, Policy)

    def _set_iam_policy(self, resource: str, req: SetIamPolicyRequest) -> Policy:
        return self._request(self._url(f"{self.API_VERSION}/{resource}:setIamPolicy"), "POST", req, Policy)

    def _test_iam_permissions(self, resource: str, req: TestIamPermissionsRequest) -> TestIamPermissionsResponse:
        return self._request(self._url(f"{self.API_VERSION}/{resource}:testIamPermissions"), "POST", req,
                             TestIamPermissionsResponse)


def paginate(method: Callable[..., ApiResource], *args, items: str, **kwargs) -> Iterator[Any]:
    """
    Follow nextPageToken for a list style endpoint and yield every entry of
    the 'items' field across all pages.
        for cluster in paginate(dp.projectsRegionsClustersList, "my-proj", "us-central1", items="clusters"):
    """
    page_token = kwargs.pop("pageToken", None)
    while True:
        response = method(*args, pageToken=page_token, **kwargs)
        for entry in getattr(response, items, None) or []:
            yield entry
        page_token = getattr(response, "nextPageToken", None)
        if not page_token:
            break
