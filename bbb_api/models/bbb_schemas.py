from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Literal


class ConnectionConfig(BaseModel):
    """
    Server location and shared secret used to sign every request
    """

    host: str
    secret: str

    model_config = {"frozen": True}


class CreateMeetingRequest(BaseModel):
    meeting_id: str = Field(alias="meetingID")
    name: Optional[str] = None
    attendee_pw: Optional[str] = Field(None, alias="attendeePW")
    moderator_pw: Optional[str] = Field(None, alias="moderatorPW")
    welcome: Optional[str] = None
    dial_number: Optional[str] = Field(None, alias="dialNumber")
    voice_bridge: Optional[str] = Field(None, alias="voiceBridge")
    max_participants: Optional[int] = Field(None, alias="maxParticipants")
    logout_url: Optional[str] = Field(None, alias="logoutURL")
    record: Optional[bool] = None
    duration: Optional[int] = None
    is_breakout: Optional[bool] = Field(None, alias="isBreakout")
    parent_meeting_id: Optional[str] = Field(None, alias="parentMeetingID")
    sequence: Optional[int] = None
    free_join: Optional[bool] = Field(None, alias="freeJoin")
    moderator_only_message: Optional[str] = Field(None, alias="moderatorOnlyMessage")
    auto_start_recording: Optional[bool] = Field(None, alias="autoStartRecording")
    allow_start_stop_recording: Optional[bool] = Field(
        None, alias="allowStartStopRecording"
    )
    webcams_only_for_moderator: Optional[bool] = Field(
        None, alias="webcamsOnlyForModerator"
    )
    logo: Optional[str] = None
    banner_text: Optional[str] = Field(None, alias="bannerText")
    banner_color: Optional[str] = Field(None, alias="bannerColor")
    copyright: Optional[str] = None
    mute_on_start: Optional[bool] = Field(None, alias="muteOnStart")
    allow_mods_to_unmute_users: Optional[bool] = Field(
        None, alias="allowModsToUnmuteUsers"
    )
    lock_settings_disable_cam: Optional[bool] = Field(
        None, alias="lockSettingsDisableCam"
    )
    lock_settings_disable_mic: Optional[bool] = Field(
        None, alias="lockSettingsDisableMic"
    )
    lock_settings_disable_private_chat: Optional[bool] = Field(
        None, alias="lockSettingsDisablePrivateChat"
    )
    lock_settings_disable_public_chat: Optional[bool] = Field(
        None, alias="lockSettingsDisablePublicChat"
    )
    lock_settings_disable_note: Optional[bool] = Field(
        None, alias="lockSettingsDisableNote"
    )
    lock_settings_locked_layout: Optional[bool] = Field(
        None, alias="lockSettingsLockedLayout"
    )
    lock_settings_lock_on_join: Optional[bool] = Field(
        None, alias="lockSettingsLockOnJoin"
    )
    lock_settings_lock_on_join_configurable: Optional[bool] = Field(
        None, alias="lockSettingsLockOnJoinConfigurable"
    )
    guest_policy: Optional[Literal["ALWAYS_ACCEPT", "ALWAYS_DENY", "ASK_MODERATOR"]] = (
        Field(None, alias="guestPolicy")
    )
    # Sent as meta_<key>=<value>
    meta: Optional[Dict[str, str]] = None

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "meetingID": "test-meeting-123",
                "name": "Test Meeting",
                "attendeePW": "attendPW",
                "moderatorPW": "modPW",
                "welcome": "Welcome to the meeting!",
                "maxParticipants": 100,
                "duration": 60,
                "record": True,
                "autoStartRecording": False,
                "allowStartStopRecording": True,
                "guestPolicy": "ASK_MODERATOR",
                "meta": {"endCallbackUrl": "https://example.com/meeting-ended"},
            }
        },
    }

    def to_params(self) -> Dict[str, Any]:
        """Query parameters in wire spelling; unset fields stay None."""
        params = self.model_dump(by_alias=True, exclude={"meta"})
        for key, value in (self.meta or {}).items():
            params[f"meta_{key}"] = value
        return params


class CreateMeetingResponse(BaseModel):
    meetingID: Optional[str] = None
    internalMeetingID: Optional[str] = None
    parentMeetingID: Optional[str] = None
    attendeePW: Optional[str] = None
    moderatorPW: Optional[str] = None
    createTime: Optional[int] = None
    created: Optional[datetime] = None
    voiceBridge: Optional[str] = None
    dialNumber: Optional[str] = None
    hasUserJoined: Optional[bool] = None
    duration: Optional[int] = None
    hasBeenForciblyEnded: Optional[bool] = None


class JoinMeetingRequest(BaseModel):
    full_name: str = Field(alias="fullName")
    meeting_id: str = Field(alias="meetingID")
    password: str
    create_time: Optional[int] = Field(None, alias="createTime")
    user_id: Optional[str] = Field(None, alias="userID")
    web_voice_conf: Optional[str] = Field(None, alias="webVoiceConf")
    config_token: Optional[str] = Field(None, alias="configToken")
    default_layout: Optional[str] = Field(None, alias="defaultLayout")
    avatar_url: Optional[str] = Field(None, alias="avatarURL")
    client_url: Optional[str] = Field(None, alias="clientURL")
    guest: Optional[bool] = None

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "fullName": "John Doe",
                "meetingID": "test-meeting-123",
                "password": "modPW",
                "userID": "user-123",
            }
        },
    }

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class JoinMeetingResponse(BaseModel):
    meetingID: Optional[str] = None
    userID: Optional[str] = None
    authToken: Optional[str] = None
    sessionToken: Optional[str] = None
    url: Optional[str] = None


class EndMeetingRequest(BaseModel):
    meeting_id: str = Field(alias="meetingID")
    password: str

    model_config = {"populate_by_name": True}

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Attendee(BaseModel):
    """
    Model for an attendee in a BBB meeting
    """

    userID: Optional[str] = None
    fullName: Optional[str] = None
    role: Optional[Literal["VIEWER", "MODERATOR"]] = None
    isPresenter: Optional[bool] = None
    isListeningOnly: Optional[bool] = None
    hasJoinedVoice: Optional[bool] = None
    hasVideo: Optional[bool] = None
    clientType: Optional[str] = None


class BreakoutInfo(BaseModel):
    """
    Parent link of a breakout room
    """

    parentMeetingID: Optional[str] = None
    sequence: Optional[int] = None
    freeJoin: Optional[bool] = None


class MeetingInfo(BaseModel):
    """
    Model for a BBB meeting
    """

    meetingName: Optional[str] = None
    meetingID: Optional[str] = None
    internalMeetingID: Optional[str] = None
    createTime: Optional[int] = None
    created: Optional[datetime] = None
    voiceBridge: Optional[str] = None
    dialNumber: Optional[str] = None
    attendeePW: Optional[str] = None
    moderatorPW: Optional[str] = None
    running: Optional[bool] = None
    duration: Optional[int] = None
    hasUserJoined: Optional[bool] = None
    recording: Optional[bool] = None
    hasBeenForciblyEnded: Optional[bool] = None
    startTime: Optional[int] = None
    endTime: Optional[int] = None
    participantCount: Optional[int] = None
    listenerCount: Optional[int] = None
    voiceParticipantCount: Optional[int] = None
    videoCount: Optional[int] = None
    maxUsers: Optional[int] = None
    moderatorCount: Optional[int] = None
    attendees: List[Attendee] = []
    isBreakout: Optional[bool] = None
    breakoutRooms: Optional[List[str]] = None
    breakout: Optional[BreakoutInfo] = None
    metadata: Dict[str, Optional[str]] = {}
