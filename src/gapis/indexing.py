"""
Web Search Indexing API v3
https://developers.google.com/search/apis/indexing-api/v3/reference/indexing/rest
"""
from dataclasses import dataclass, field
import datetime

from .access import gcp
from .resources import ApiResource, nested, timestamp
from .transport import ApiClient

gcp.append_scopes("indexing")

@dataclass
class UrlNotification(ApiResource):
    """
    Publish this to tell Google a URL was updated or removed.
    notifyTime is filled in by the server.
    """
    url: str|None = field(default=None)
    type: str|None = field(default=None)
    notifyTime: datetime.datetime|None = timestamp()

    def __bool__(self) -> bool:
        return bool(self.url)

    def __str__(self) -> str:
        if self:
            return f"{self.type}:{self.url}"
        return "<empty>"

@dataclass
class UrlNotificationMetadata(ApiResource):
    url: str|None = field(default=None)
    latestUpdate: UrlNotification|None = nested(UrlNotification)
    latestRemove: UrlNotification|None = nested(UrlNotification)

@dataclass
class PublishUrlNotificationResponse(ApiResource):
    urlNotificationMetadata: UrlNotificationMetadata|None = nested(UrlNotificationMetadata)


class Indexing(ApiClient):
    DEFAULT_BASE_URL = "https://indexing.googleapis.com/"
    API_VERSION = "v3"

    def urlNotificationsGetMetadata(self, *, url: str|None = None) -> UrlNotificationMetadata:
        """
        Latest update and remove notifications received for a URL.
        """
        return self._request(self._url("v3/urlNotifications/metadata", ("url", url)),
                             "GET", response=UrlNotificationMetadata)

    def urlNotificationsPublish(self, req: UrlNotification) -> PublishUrlNotificationResponse:
        """
        Notify that a URL has been updated or deleted.
        """
        return self._request(self._url("v3/urlNotifications:publish"), "POST", req,
                             PublishUrlNotificationResponse)
