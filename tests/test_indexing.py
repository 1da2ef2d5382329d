import datetime
import json

from gapis.indexing import Indexing, UrlNotification

BASE = "https://indexing.googleapis.com/v3/"

def test_get_metadata(mock_http):
    http = mock_http((200, {
        "url": "https://example.com/page",
        "latestUpdate": {"url": "https://example.com/page", "type": "URL_UPDATED",
                         "notifyTime": "2023-06-01T10:20:30.123456789Z"},
    }))
    meta = Indexing(http=http).urlNotificationsGetMetadata(url="https://example.com/page")
    uri, method, body, _ = http.request_sequence[0]
    assert(uri == BASE + "urlNotifications/metadata?url=https%3A%2F%2Fexample.com%2Fpage")
    assert(method == "GET")
    assert(body is None)
    assert(meta.url == "https://example.com/page")
    assert(meta.latestRemove is None)
    assert(meta.latestUpdate.notifyTime ==
           datetime.datetime(2023, 6, 1, 10, 20, 30, 123456, tzinfo=datetime.timezone.utc))
    assert(str(meta.latestUpdate) == "URL_UPDATED:https://example.com/page")

def test_get_metadata_without_url(mock_http):
    http = mock_http((200, {}))
    Indexing(http=http).urlNotificationsGetMetadata()
    assert(http.request_sequence[0][0] == BASE + "urlNotifications/metadata")

def test_publish(mock_http):
    http = mock_http((200, {"urlNotificationMetadata": {
        "url": "https://example.com/gone",
        "latestRemove": {"type": "URL_DELETED", "notifyTime": "2023-06-01T10:20:30Z"},
    }}))
    n = UrlNotification(url="https://example.com/gone", type="URL_DELETED")
    r = Indexing(http=http).urlNotificationsPublish(n)
    uri, method, body, _ = http.request_sequence[0]
    assert(uri == BASE + "urlNotifications:publish")
    assert(method == "POST")
    assert(json.loads(body) == {"url": "https://example.com/gone", "type": "URL_DELETED"})
    assert(r.urlNotificationMetadata.latestRemove.notifyTime.year == 2023)
    # the request object is left alone
    assert(n.notifyTime is None)
