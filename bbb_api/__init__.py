from bbb_api.exceptions import BBBError, BBBTransportError, BBBApiError
from bbb_api.services.bbb_service import BBBService
from bbb_api.utils.bbb_helpers import serialize, build_request, generate_checksum
from bbb_api.models import (
    ConnectionConfig,
    CreateMeetingRequest,
    CreateMeetingResponse,
    JoinMeetingRequest,
    JoinMeetingResponse,
    EndMeetingRequest,
    Attendee,
    BreakoutInfo,
    MeetingInfo,
)

__all__ = [
    "BBBService",
    "BBBError",
    "BBBTransportError",
    "BBBApiError",
    "serialize",
    "build_request",
    "generate_checksum",
    "ConnectionConfig",
    "CreateMeetingRequest",
    "CreateMeetingResponse",
    "JoinMeetingRequest",
    "JoinMeetingResponse",
    "EndMeetingRequest",
    "Attendee",
    "BreakoutInfo",
    "MeetingInfo",
]
