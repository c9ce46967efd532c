import hashlib
import pytest
import httpx
from typing import Callable, List

from bbb_api.services.bbb_service import BBBService


TEST_HOST = "https://bbb.example.com/bigbluebutton"
TEST_SECRET = "test-secret"


@pytest.fixture
def bbb_host() -> str:
    return TEST_HOST


@pytest.fixture
def bbb_secret() -> str:
    return TEST_SECRET


@pytest.fixture
def expected_checksum(bbb_secret: str) -> Callable[[str, str], str]:
    """Checksum the server expects for a call name and query string"""

    def _expected_checksum(call_name: str, query: str) -> str:
        checksum_string = call_name + query + bbb_secret
        return hashlib.sha1(checksum_string.encode("utf-8")).hexdigest()

    return _expected_checksum


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests received by the mocked BBB server"""
    return []


@pytest.fixture
def make_service(
    sent_requests: List[httpx.Request], bbb_host: str, bbb_secret: str
) -> Callable[..., BBBService]:
    """Build a BBBService whose server answers every call with `body`"""

    def _make_service(body: str, status_code: int = 200) -> BBBService:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return httpx.Response(status_code, text=body)

        return BBBService(
            host=bbb_host,
            secret=bbb_secret,
            transport=httpx.MockTransport(handler),
        )

    return _make_service


@pytest.fixture
def create_success_xml() -> str:
    return """<?xml version="1.0" encoding="UTF-8"?>
<response>
  <returncode>SUCCESS</returncode>
  <meetingID>test-meeting-123</meetingID>
  <internalMeetingID>183f0bf3a0982a127bdb8161e0c44eb696b3e75c-1000</internalMeetingID>
  <parentMeetingID>bbb-none</parentMeetingID>
  <attendeePW>ap</attendeePW>
  <moderatorPW>mp</moderatorPW>
  <createTime>1000</createTime>
  <createDate>Thu Jan 01 00:00:01 UTC 1970</createDate>
  <hasUserJoined>false</hasUserJoined>
  <duration>0</duration>
  <hasBeenForciblyEnded>false</hasBeenForciblyEnded>
  <messageKey></messageKey>
  <message></message>
</response>"""


@pytest.fixture
def failed_xml() -> str:
    return """<response>
  <returncode>FAILED</returncode>
  <messageKey>idNotUnique</messageKey>
  <message>idNotUnique</message>
</response>"""


@pytest.fixture
def join_success_xml() -> str:
    return """<response>
  <returncode>SUCCESS</returncode>
  <messageKey>successfullyJoined</messageKey>
  <message>You have joined successfully.</message>
  <meeting_id>183f0bf3a0982a127bdb8161e0c44eb696b3e75c-1000</meeting_id>
  <user_id>w_euxnssffnsbs</user_id>
  <auth_token>dgfgh4u3p7ck</auth_token>
  <session_token>0wzsph6uaelwc68z</session_token>
  <guestStatus>ALLOW</guestStatus>
  <url>https://bbb.example.com/html5client/join?sessionToken=0wzsph6uaelwc68z</url>
</response>"""


@pytest.fixture
def meeting_info_xml() -> str:
    return """<response>
  <returncode>SUCCESS</returncode>
  <meetingName>Demo Meeting</meetingName>
  <meetingID>random-9887584</meetingID>
  <internalMeetingID>b4cdb1d1bf8a5e8a4e2cd8b2fd8d2f1c-1531241258036</internalMeetingID>
  <createTime>1531241258036</createTime>
  <createDate>Tue Jul 10 16:47:38 UTC 2018</createDate>
  <voiceBridge>70066</voiceBridge>
  <dialNumber>613-555-1234</dialNumber>
  <attendeePW>ap</attendeePW>
  <moderatorPW>mp</moderatorPW>
  <running>true</running>
  <duration>0</duration>
  <hasUserJoined>true</hasUserJoined>
  <recording>false</recording>
  <hasBeenForciblyEnded>false</hasBeenForciblyEnded>
  <startTime>1531241258074</startTime>
  <endTime>0</endTime>
  <participantCount>2</participantCount>
  <listenerCount>1</listenerCount>
  <voiceParticipantCount>1</voiceParticipantCount>
  <videoCount>0</videoCount>
  <maxUsers>20</maxUsers>
  <moderatorCount>1</moderatorCount>
  <attendees>
    <attendee>
      <userID>w_2wzzszfaptsp</userID>
      <fullName>stu</fullName>
      <role>VIEWER</role>
      <isPresenter>false</isPresenter>
      <isListeningOnly>true</isListeningOnly>
      <hasJoinedVoice>false</hasJoinedVoice>
      <hasVideo>false</hasVideo>
      <clientType>HTML5</clientType>
    </attendee>
    <attendee>
      <userID>w_eo7lxnx3vwuj</userID>
      <fullName>mod</fullName>
      <role>MODERATOR</role>
      <isPresenter>true</isPresenter>
      <isListeningOnly>false</isListeningOnly>
      <hasJoinedVoice>true</hasJoinedVoice>
      <hasVideo>false</hasVideo>
      <clientType>HTML5</clientType>
    </attendee>
  </attendees>
  <metadata>
    <bbb-origin>Greenlight</bbb-origin>
    <bbb-origin-version>v2</bbb-origin-version>
  </metadata>
  <isBreakout>false</isBreakout>
</response>"""


@pytest.fixture
def single_meeting_xml() -> str:
    return """<response>
  <returncode>SUCCESS</returncode>
  <meetings>
    <meeting>
      <meetingName>Room One</meetingName>
      <meetingID>room-1</meetingID>
      <createTime>2000</createTime>
      <running>true</running>
      <participantCount>1</participantCount>
      <attendees>
        <attendee>
          <userID>w_1</userID>
          <fullName>Alice</fullName>
          <role>MODERATOR</role>
          <isPresenter>true</isPresenter>
          <isListeningOnly>false</isListeningOnly>
          <hasJoinedVoice>true</hasJoinedVoice>
          <hasVideo>true</hasVideo>
          <clientType>HTML5</clientType>
        </attendee>
      </attendees>
      <isBreakout>false</isBreakout>
    </meeting>
  </meetings>
</response>"""


@pytest.fixture
def two_meetings_xml() -> str:
    return """<response>
  <returncode>SUCCESS</returncode>
  <meetings>
    <meeting>
      <meetingName>Room One</meetingName>
      <meetingID>room-1</meetingID>
      <createTime>2000</createTime>
      <running>true</running>
      <participantCount>1</participantCount>
      <attendees>
        <attendee>
          <userID>w_1</userID>
          <fullName>Alice</fullName>
          <role>MODERATOR</role>
          <isPresenter>true</isPresenter>
          <isListeningOnly>false</isListeningOnly>
          <hasJoinedVoice>true</hasJoinedVoice>
          <hasVideo>true</hasVideo>
          <clientType>HTML5</clientType>
        </attendee>
      </attendees>
      <isBreakout>false</isBreakout>
    </meeting>
    <meeting>
      <meetingName>Room One (Room 1)</meetingName>
      <meetingID>room-1-breakout-1</meetingID>
      <createTime>3000</createTime>
      <running>false</running>
      <participantCount>0</participantCount>
      <attendees/>
      <isBreakout>true</isBreakout>
      <parentMeetingID>room-1-internal</parentMeetingID>
      <sequence>1</sequence>
      <freeJoin>false</freeJoin>
    </meeting>
  </meetings>
</response>"""


@pytest.fixture
def no_meetings_xml() -> str:
    return """<response>
  <returncode>SUCCESS</returncode>
  <meetings/>
  <messageKey>noMeetings</messageKey>
  <message>no meetings were found on this server</message>
</response>"""
