from bbb_api.models.bbb_schemas import (
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
