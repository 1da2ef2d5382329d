"""
Street View Publish API v1
https://developers.google.com/streetview/publish/reference/rest

Uploading is three steps: photoStartUpload() for an UploadRef, send the bytes to
uploadRef.uploadUrl yourself, then photoCreate() with the UploadRef and metadata.
Sequences (videos) go the same way through photoSequenceStartUpload() and
photoSequenceCreate().
"""
from dataclasses import dataclass, field
from typing import List
import datetime

from .access import gcp
from .common import Empty, Operation, Status
from .resources import ApiResource, duration, int64, nested, output_only, timestamp
from .transport import ApiClient

gcp.append_scopes("streetviewpublish")

@dataclass
class UploadRef(ApiResource):
    uploadUrl: str|None = field(default=None)

@dataclass
class PhotoId(ApiResource):
    id: str|None = field(default=None)

@dataclass
class LatLng(ApiResource):
    latitude: float|None = field(default=None)
    longitude: float|None = field(default=None)

@dataclass
class LatLngBounds(ApiResource):
    southwest: LatLng|None = nested(LatLng)
    northeast: LatLng|None = nested(LatLng)

@dataclass
class Level(ApiResource):
    number: float|None = field(default=None)
    name: str|None = field(default=None)

@dataclass
class Pose(ApiResource):
    """
    Where and which way the camera was pointing.
    gpsRecordTimestampUnixEpoch is a timestamp, not a number, despite the name.
    """
    latLngPair: LatLng|None = nested(LatLng)
    altitude: float|None = field(default=None)
    heading: float|None = field(default=None)
    pitch: float|None = field(default=None)
    roll: float|None = field(default=None)
    gpsRecordTimestampUnixEpoch: datetime.datetime|None = timestamp()
    level: Level|None = nested(Level)
    accuracyMeters: float|None = field(default=None)

@dataclass
class Connection(ApiResource):
    target: PhotoId|None = nested(PhotoId)

@dataclass
class Place(ApiResource):
    placeId: str|None = field(default=None)
    name: str|None = output_only()
    languageCode: str|None = output_only()

@dataclass
class Photo(ApiResource):
    """
    viewCount is an int64 and regularly beyond what a JSON number can carry
    exactly, it always comes through as a python int.
    """
    # output only on create but required by photoUpdate and photosBatchUpdate
    photoId: PhotoId|None = nested(PhotoId)
    uploadReference: UploadRef|None = nested(UploadRef)
    downloadUrl: str|None = output_only()
    thumbnailUrl: str|None = output_only()
    shareLink: str|None = output_only()
    pose: Pose|None = nested(Pose)
    connections: List[Connection]|None = nested(Connection, repeated=True)
    captureTime: datetime.datetime|None = timestamp()
    uploadTime: datetime.datetime|None = timestamp(readonly=True)
    places: List[Place]|None = nested(Place, repeated=True)
    viewCount: int|None = int64(readonly=True)
    transferStatus: str|None = output_only()
    mapsPublishStatus: str|None = output_only()

    def __bool__(self) -> bool:
        return self.photoId is not None and bool(self.photoId.id)

    def __str__(self) -> str:
        if self:
            return f"{self.photoId.id}:{self.mapsPublishStatus}"
        return "<empty>"

@dataclass
class PhotoResponse(ApiResource):
    status: Status|None = nested(Status)
    photo: Photo|None = nested(Photo)

@dataclass
class UpdatePhotoRequest(ApiResource):
    photo: Photo|None = nested(Photo)
    updateMask: str|None = field(default=None)

@dataclass
class BatchDeletePhotosRequest(ApiResource):
    photoIds: List[str]|None = field(default=None)

@dataclass
class BatchDeletePhotosResponse(ApiResource):
    status: List[Status]|None = nested(Status, repeated=True)

@dataclass
class BatchGetPhotosResponse(ApiResource):
    results: List[PhotoResponse]|None = nested(PhotoResponse, repeated=True)

@dataclass
class BatchUpdatePhotosRequest(ApiResource):
    updatePhotoRequests: List[UpdatePhotoRequest]|None = nested(UpdatePhotoRequest, repeated=True)

@dataclass
class BatchUpdatePhotosResponse(ApiResource):
    results: List[PhotoResponse]|None = nested(PhotoResponse, repeated=True)

@dataclass
class ListPhotosResponse(ApiResource):
    photos: List[Photo]|None = nested(Photo, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListPhotoSequencesResponse(ApiResource):
    """photoSequences are Operations whose response, once done, is a PhotoSequence"""
    photoSequences: List[Operation]|None = nested(Operation, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class Measurement3d(ApiResource):
    captureTime: datetime.datetime|None = timestamp()
    x: float|None = field(default=None)
    y: float|None = field(default=None)
    z: float|None = field(default=None)

@dataclass
class Imu(ApiResource):
    accelMpsps: List[Measurement3d]|None = nested(Measurement3d, repeated=True)
    gyroRps: List[Measurement3d]|None = nested(Measurement3d, repeated=True)
    magUt: List[Measurement3d]|None = nested(Measurement3d, repeated=True)

@dataclass
class InsufficientGpsFailureDetails(ApiResource):
    gpsPointsFound: int|None = field(default=None)

@dataclass
class GpsDataGapFailureDetails(ApiResource):
    gapDuration: str|None = duration()
    gapStartTime: str|None = duration()

@dataclass
class ImuDataGapFailureDetails(ApiResource):
    gapDuration: str|None = duration()
    gapStartTime: str|None = duration()

@dataclass
class NotOutdoorsFailureDetails(ApiResource):
    startTime: str|None = duration()

@dataclass
class NoOverlapGpsFailureDetails(ApiResource):
    gpsStartTime: datetime.datetime|None = timestamp()
    gpsEndTime: datetime.datetime|None = timestamp()
    videoStartTime: datetime.datetime|None = timestamp()
    videoEndTime: datetime.datetime|None = timestamp()

@dataclass
class ProcessingFailureDetails(ApiResource):
    insufficientGpsDetails: InsufficientGpsFailureDetails|None = nested(InsufficientGpsFailureDetails)
    gpsDataGapDetails: GpsDataGapFailureDetails|None = nested(GpsDataGapFailureDetails)
    imuDataGapDetails: ImuDataGapFailureDetails|None = nested(ImuDataGapFailureDetails)
    notOutdoorsDetails: NotOutdoorsFailureDetails|None = nested(NotOutdoorsFailureDetails)
    noOverlapGpsDetails: NoOverlapGpsFailureDetails|None = nested(NoOverlapGpsFailureDetails)

@dataclass
class PhotoSequence(ApiResource):
    id: str|None = output_only()
    photos: List[Photo]|None = nested(Photo, repeated=True, readonly=True)
    uploadReference: UploadRef|None = nested(UploadRef)
    captureTimeOverride: datetime.datetime|None = timestamp()
    uploadTime: datetime.datetime|None = timestamp(readonly=True)
    rawGpsTimeline: List[Pose]|None = nested(Pose, repeated=True)
    gpsSource: str|None = field(default=None)
    imu: Imu|None = nested(Imu)
    processingState: str|None = output_only()
    failureReason: str|None = output_only()
    failureDetails: ProcessingFailureDetails|None = nested(ProcessingFailureDetails, readonly=True)
    distanceMeters: float|None = output_only()
    sequenceBounds: LatLngBounds|None = nested(LatLngBounds, readonly=True)
    viewCount: int|None = int64(readonly=True)
    filename: str|None = output_only()

    def __bool__(self) -> bool:
        return bool(self.id)


class StreetViewPublish(ApiClient):
    DEFAULT_BASE_URL = "https://streetviewpublish.googleapis.com/"
    API_VERSION = "v1"

    def photoCreate(self, req: Photo) -> Photo:
        """
        Publish an uploaded photo.  req needs uploadReference from photoStartUpload.
        """
        return self._request(self._url("v1/photo"), "POST", req, Photo)

    def photoDelete(self, photoId: str) -> Empty:
        return self._request(self._url(f"v1/photo/{photoId}"), "DELETE", response=Empty)

    def photoGet(self, photoId: str, *,
                 languageCode: str|None = None,
                 view: str|None = None) -> Photo:
        """
        view is BASIC or INCLUDE_DOWNLOAD_URL, the latter to get downloadUrl filled in.
        """
        return self._request(self._url(f"v1/photo/{photoId}", ("languageCode", languageCode), ("view", view)),
                             "GET", response=Photo)

    def photoStartUpload(self, req: Empty|None = None) -> UploadRef:
        return self._request(self._url("v1/photo:startUpload"), "POST", req or Empty(), UploadRef)

    def photoUpdate(self, id: str, req: Photo, *, updateMask: str|None = None) -> Photo:
        """
        id is the photoId.id of the photo.  Without updateMask every field is replaced.
        """
        return self._request(self._url(f"v1/photo/{id}", ("updateMask", updateMask)), "PUT", req, Photo)

    def photosBatchDelete(self, req: BatchDeletePhotosRequest) -> BatchDeletePhotosResponse:
        return self._request(self._url("v1/photos:batchDelete"), "POST", req, BatchDeletePhotosResponse)

    def photosBatchGet(self, *,
                       languageCode: str|None = None,
                       photoIds: List[str]|None = None,
                       view: str|None = None) -> BatchGetPhotosResponse:
        """
        photoIds goes on the query string as photoIds=a&photoIds=b
        """
        return self._request(self._url("v1/photos:batchGet", ("languageCode", languageCode),
                                       ("photoIds", photoIds), ("view", view)),
                             "GET", response=BatchGetPhotosResponse)

    def photosBatchUpdate(self, req: BatchUpdatePhotosRequest) -> BatchUpdatePhotosResponse:
        return self._request(self._url("v1/photos:batchUpdate"), "POST", req, BatchUpdatePhotosResponse)

    def photosList(self, *,
                   filter: str|None = None,
                   languageCode: str|None = None,
                   pageSize: int|None = None,
                   pageToken: str|None = None,
                   view: str|None = None) -> ListPhotosResponse:
        return self._request(self._url("v1/photos", ("filter", filter), ("languageCode", languageCode),
                                       ("pageSize", pageSize), ("pageToken", pageToken), ("view", view)),
                             "GET", response=ListPhotosResponse)

    def photoSequenceCreate(self, req: PhotoSequence, *, inputType: str|None = None) -> Operation:
        return self._request(self._url("v1/photoSequence", ("inputType", inputType)), "POST", req, Operation)

    def photoSequenceDelete(self, sequenceId: str) -> Empty:
        return self._request(self._url(f"v1/photoSequence/{sequenceId}"), "DELETE", response=Empty)

    def photoSequenceGet(self, sequenceId: str, *,
                         filter: str|None = None,
                         view: str|None = None) -> Operation:
        """
        The returned Operation's response holds the PhotoSequence once processing is done,
        use deserialize(PhotoSequence, op.response) to get at it.
        """
        return self._request(self._url(f"v1/photoSequence/{sequenceId}", ("filter", filter), ("view", view)),
                             "GET", response=Operation)

    def photoSequenceStartUpload(self, req: Empty|None = None) -> UploadRef:
        return self._request(self._url("v1/photoSequence:startUpload"), "POST", req or Empty(), UploadRef)

    def photoSequencesList(self, *,
                           filter: str|None = None,
                           pageSize: int|None = None,
                           pageToken: str|None = None) -> ListPhotoSequencesResponse:
        return self._request(self._url("v1/photoSequences", ("filter", filter), ("pageSize", pageSize),
                                       ("pageToken", pageToken)),
                             "GET", response=ListPhotoSequencesResponse)
