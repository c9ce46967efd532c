"""Mapping of parsed BBB responses onto the client's models.

Each function takes the dict produced by ``parse_xml_response`` (or one
item of it) and returns a model. None of them perform I/O. Callers check
the returncode before mapping.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any, List, Optional

from bbb_api.config.logger_config import logger
from bbb_api.models.bbb_schemas import (
    CreateMeetingResponse,
    JoinMeetingResponse,
    Attendee,
    BreakoutInfo,
    MeetingInfo,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_sequence(value: Any) -> List[Any]:
    """Absent -> [], a list -> itself, a single item -> [item]."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _unwrap(container: Any, item_tag: str) -> List[Any]:
    # An empty container element (<attendees/>) parses to None
    if not isinstance(container, dict):
        return []
    return ensure_sequence(container.get(item_tag))


def _omit_absent(**fields: Any) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def _created_from(create_time: Any) -> Optional[datetime]:
    if create_time is None:
        return None
    return EPOCH + timedelta(milliseconds=int(create_time))


def _is_true(value: Any) -> bool:
    return str(value).lower() == "true"


def map_create_response(response: Dict[str, Any]) -> CreateMeetingResponse:
    return CreateMeetingResponse(
        meetingID=response.get("meetingID"),
        internalMeetingID=response.get("internalMeetingID"),
        attendeePW=response.get("attendeePW"),
        moderatorPW=response.get("moderatorPW"),
        createTime=response.get("createTime"),
        created=_created_from(response.get("createTime")),
        hasUserJoined=response.get("hasUserJoined"),
        duration=response.get("duration"),
        hasBeenForciblyEnded=response.get("hasBeenForciblyEnded"),
        **_omit_absent(
            parentMeetingID=response.get("parentMeetingID"),
            voiceBridge=response.get("voiceBridge"),
            dialNumber=response.get("dialNumber"),
        ),
    )


def map_join_response(response: Dict[str, Any]) -> JoinMeetingResponse:
    return JoinMeetingResponse(
        meetingID=response.get("meeting_id"),
        userID=response.get("user_id"),
        authToken=response.get("auth_token"),
        sessionToken=response.get("session_token"),
        url=response.get("url"),
    )


def map_running_response(response: Dict[str, Any]) -> bool:
    return _is_true(response.get("running"))


def map_attendee(item: Any) -> Attendee:
    if not isinstance(item, dict):
        item = {}
    return Attendee(
        userID=item.get("userID"),
        fullName=item.get("fullName"),
        role=item.get("role"),
        isPresenter=item.get("isPresenter"),
        isListeningOnly=item.get("isListeningOnly"),
        hasJoinedVoice=item.get("hasJoinedVoice"),
        hasVideo=item.get("hasVideo"),
        clientType=item.get("clientType"),
    )


def _map_breakout(response: Dict[str, Any]) -> Optional[BreakoutInfo]:
    if not _is_true(response.get("isBreakout")):
        return None
    return BreakoutInfo(
        parentMeetingID=response.get("parentMeetingID"),
        sequence=response.get("sequence"),
        freeJoin=response.get("freeJoin"),
    )


def _map_metadata(metadata: Any) -> Dict[str, Optional[str]]:
    if not isinstance(metadata, dict):
        return {}
    result: Dict[str, Optional[str]] = {}
    for key, value in metadata.items():
        if value is None or isinstance(value, str):
            result[key] = value
        else:
            # Nested or repeated elements have no string form
            logger.debug(f"Dropping non-scalar metadata entry: {key}")
    return result


def map_meeting_info(response: Dict[str, Any]) -> MeetingInfo:
    """Maps a getMeetingInfo response, or one <meeting> of getMeetings."""
    breakout_rooms = None
    if "breakoutRooms" in response:
        breakout_rooms = _unwrap(response["breakoutRooms"], "breakout")

    return MeetingInfo(
        meetingName=response.get("meetingName"),
        meetingID=response.get("meetingID"),
        internalMeetingID=response.get("internalMeetingID"),
        createTime=response.get("createTime"),
        created=_created_from(response.get("createTime")),
        attendeePW=response.get("attendeePW"),
        moderatorPW=response.get("moderatorPW"),
        running=response.get("running"),
        duration=response.get("duration"),
        hasUserJoined=response.get("hasUserJoined"),
        recording=response.get("recording"),
        hasBeenForciblyEnded=response.get("hasBeenForciblyEnded"),
        participantCount=response.get("participantCount"),
        listenerCount=response.get("listenerCount"),
        voiceParticipantCount=response.get("voiceParticipantCount"),
        videoCount=response.get("videoCount"),
        maxUsers=response.get("maxUsers"),
        moderatorCount=response.get("moderatorCount"),
        attendees=[
            map_attendee(item)
            for item in _unwrap(response.get("attendees"), "attendee")
        ],
        isBreakout=response.get("isBreakout"),
        metadata=_map_metadata(response.get("metadata")),
        **_omit_absent(
            voiceBridge=response.get("voiceBridge"),
            dialNumber=response.get("dialNumber"),
            startTime=response.get("startTime"),
            endTime=response.get("endTime"),
            breakoutRooms=breakout_rooms,
            breakout=_map_breakout(response),
        ),
    )


def map_meetings(response: Dict[str, Any]) -> List[MeetingInfo]:
    return [
        map_meeting_info(item)
        for item in _unwrap(response.get("meetings"), "meeting")
        if isinstance(item, dict)
    ]
