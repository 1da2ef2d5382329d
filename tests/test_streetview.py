import datetime
import json

from gapis.streetview import BatchDeletePhotosRequest, BatchUpdatePhotosRequest, LatLng, Photo, PhotoId, \
    PhotoSequence, Pose, StreetViewPublish, UpdatePhotoRequest, UploadRef
from gapis.resources import deserialize

BASE = "https://streetviewpublish.googleapis.com/v1/"
UTC = datetime.timezone.utc
UPLOAD_URL = "https://streetviewpublish.googleapis.com/media/user/1234/photo/5678"

PHOTO = {
    "photoId": {"id": "CAoSLEFGMVFpcE"},
    "uploadReference": {"uploadUrl": UPLOAD_URL},
    "downloadUrl": "https://lh3.googleusercontent.com/d",
    "thumbnailUrl": "https://lh3.googleusercontent.com/t",
    "shareLink": "https://www.google.com/maps/@?api=1",
    "pose": {"latLngPair": {"latitude": 37.422, "longitude": -122.084}, "heading": 105.0,
             "gpsRecordTimestampUnixEpoch": "2023-05-01T08:00:00Z"},
    "captureTime": "2023-05-01T08:00:01.5Z",
    "uploadTime": "2023-05-02T09:00:00Z",
    "viewCount": "12345678901234567",
    "mapsPublishStatus": "PUBLISHED",
}

def test_upload_and_create(mock_http):
    http = mock_http((200, {"uploadUrl": UPLOAD_URL}), (200, PHOTO))
    sv = StreetViewPublish(http=http)
    ref = sv.photoStartUpload()
    assert(ref.uploadUrl == UPLOAD_URL)
    uri, method, body, _ = http.request_sequence[0]
    assert(uri == BASE + "photo:startUpload")
    assert(method == "POST")
    assert(json.loads(body) == {})

    req = Photo(uploadReference=ref,
                pose=Pose(latLngPair=LatLng(latitude=37.422, longitude=-122.084), heading=105.0),
                captureTime=datetime.datetime(2023, 5, 1, 8, 0, 1, 500000, tzinfo=UTC))
    p = sv.photoCreate(req)
    uri, method, body, _ = http.request_sequence[1]
    assert(uri == BASE + "photo")
    assert(json.loads(body) == {"uploadReference": {"uploadUrl": UPLOAD_URL},
                                "pose": {"latLngPair": {"latitude": 37.422, "longitude": -122.084}, "heading": 105.0},
                                "captureTime": "2023-05-01T08:00:01.500000Z"})
    assert(p.viewCount == 12345678901234567)
    assert(p.uploadTime == datetime.datetime(2023, 5, 2, 9, tzinfo=UTC))
    assert(p.pose.gpsRecordTimestampUnixEpoch == datetime.datetime(2023, 5, 1, 8, tzinfo=UTC))
    assert(str(p) == "CAoSLEFGMVFpcE:PUBLISHED")

def test_get(mock_http):
    http = mock_http((200, PHOTO))
    p = StreetViewPublish(http=http).photoGet("CAoSLEFGMVFpcE", view="INCLUDE_DOWNLOAD_URL", languageCode="en")
    assert(http.request_sequence[0][0] == BASE + "photo/CAoSLEFGMVFpcE?languageCode=en&view=INCLUDE_DOWNLOAD_URL")
    assert(p.downloadUrl == PHOTO["downloadUrl"])

def test_update_sends_only_writable(mock_http):
    http = mock_http((200, PHOTO))
    sv = StreetViewPublish(http=http)
    p = Photo.from_base(PHOTO)
    p.pose.heading = 110.0
    sv.photoUpdate(p.photoId.id, p, updateMask="pose.heading")
    uri, method, body, _ = http.request_sequence[0]
    assert(uri == BASE + "photo/CAoSLEFGMVFpcE?updateMask=pose.heading")
    assert(method == "PUT")
    sent = json.loads(body)
    for k in ("downloadUrl", "thumbnailUrl", "shareLink", "uploadTime", "viewCount", "mapsPublishStatus"):
        assert(k not in sent)
    assert(sent["photoId"] == {"id": "CAoSLEFGMVFpcE"})
    assert(sent["pose"]["heading"] == 110.0)
    assert(sent["pose"]["gpsRecordTimestampUnixEpoch"] == "2023-05-01T08:00:00Z")

def test_batch_get_repeats_ids(mock_http):
    http = mock_http((200, {"results": [{"photo": PHOTO}, {"status": {"code": 5, "message": "not found"}}]}))
    r = StreetViewPublish(http=http).photosBatchGet(photoIds=["a", "b c"], view="BASIC")
    assert(http.request_sequence[0][0] == BASE + "photos:batchGet?photoIds=a&photoIds=b+c&view=BASIC")
    assert(http.request_sequence[0][1] == "GET")
    assert(r.results[0].photo.viewCount == 12345678901234567)
    assert(r.results[1].photo is None)
    assert(r.results[1].status.code == 5)

def test_batch_update_and_delete(mock_http):
    http = mock_http((200, {"results": [{"photo": {"photoId": {"id": "a"}}}]}),
                     (200, {"status": [{"code": 0}, {"code": 5}]}))
    sv = StreetViewPublish(http=http)
    upd = UpdatePhotoRequest(photo=Photo(photoId=PhotoId(id="a"), viewCount=5, shareLink="x"), updateMask="places")
    sv.photosBatchUpdate(BatchUpdatePhotosRequest(updatePhotoRequests=[upd]))
    r = sv.photosBatchDelete(BatchDeletePhotosRequest(photoIds=["a", "b"]))
    uri, method, body, _ = http.request_sequence[0]
    assert(uri == BASE + "photos:batchUpdate")
    assert(json.loads(body) == {"updatePhotoRequests": [{"photo": {"photoId": {"id": "a"}}, "updateMask": "places"}]})
    uri, method, body, _ = http.request_sequence[1]
    assert(uri == BASE + "photos:batchDelete")
    assert(method == "POST")
    assert(json.loads(body) == {"photoIds": ["a", "b"]})
    assert([s.code for s in r.status] == [0, 5])

def test_list(mock_http):
    http = mock_http((200, {"photos": [PHOTO], "nextPageToken": "n"}))
    r = StreetViewPublish(http=http).photosList(view="BASIC", filter="placeId=ChIJ", pageSize=1)
    assert(http.request_sequence[0][0] == BASE + "photos?filter=placeId%3DChIJ&pageSize=1&view=BASIC")
    assert(len(r.photos) == 1)
    assert(r.nextPageToken == "n")

def test_sequence_lifecycle(mock_http):
    seq = {"id": "seq1", "processingState": "PROCESSED", "uploadTime": "2023-05-02T09:00:00Z",
           "viewCount": "42", "distanceMeters": 12.5,
           "sequenceBounds": {"southwest": {"latitude": 1.0, "longitude": 2.0}},
           "failureDetails": {"noOverlapGpsDetails": {"gpsStartTime": "2023-05-01T08:00:00Z"}},
           "photos": [PHOTO]}
    http = mock_http((200, {"uploadUrl": UPLOAD_URL}),
                     (200, {"name": "photoSequence/seq1", "done": False}),
                     (200, {"name": "photoSequence/seq1", "done": True,
                            "response": dict(seq, **{"@type": "type.googleapis.com/google.streetview.publish.v1.PhotoSequence"})}),
                     (200, {}))
    sv = StreetViewPublish(http=http)
    ref = sv.photoSequenceStartUpload()
    op = sv.photoSequenceCreate(PhotoSequence(uploadReference=ref, gpsSource="CAMERA_MOTION_METADATA_TRACK",
                                              captureTimeOverride=datetime.datetime(2023, 5, 1, tzinfo=UTC)),
                                inputType="VIDEO")
    assert(op)
    assert(not op.done)
    done = sv.photoSequenceGet("seq1", view="BASIC", filter="")
    sv.photoSequenceDelete("seq1")

    assert(http.request_sequence[0][0] == BASE + "photoSequence:startUpload")
    uri, method, body, _ = http.request_sequence[1]
    assert(uri == BASE + "photoSequence?inputType=VIDEO")
    assert(json.loads(body) == {"uploadReference": {"uploadUrl": UPLOAD_URL},
                                "captureTimeOverride": "2023-05-01T00:00:00Z",
                                "gpsSource": "CAMERA_MOTION_METADATA_TRACK"})
    # an empty string is a value, only None is skipped
    assert(http.request_sequence[2][0] == BASE + "photoSequence/seq1?filter=&view=BASIC")
    assert(http.request_sequence[3][1] == "DELETE")

    s = deserialize(PhotoSequence, done.response)
    assert(s)
    assert(s.viewCount == 42)
    assert(s.photos[0].viewCount == 12345678901234567)
    assert(s.failureDetails.noOverlapGpsDetails.gpsStartTime == datetime.datetime(2023, 5, 1, 8, tzinfo=UTC))
    assert(s.sequenceBounds.southwest.latitude == 1.0)
    assert(s.trim() == {"@type": "type.googleapis.com/google.streetview.publish.v1.PhotoSequence"})

def test_sequences_list(mock_http):
    http = mock_http((200, {"photoSequences": [{"name": "a", "done": True}, {"name": "b"}]}))
    r = StreetViewPublish(http=http).photoSequencesList(pageSize=2, filter="imagery_type=SPHERICAL")
    assert(http.request_sequence[0][0] == BASE + "photoSequences?filter=imagery_type%3DSPHERICAL&pageSize=2")
    assert([str(o) for o in r.photoSequences] == ["a:done", "b:running"])

def test_upload_ref_passthrough():
    assert(UploadRef(uploadUrl=UPLOAD_URL).trim() == {"uploadUrl": UPLOAD_URL})
