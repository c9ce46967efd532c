import httpx
from typing import Dict, Any, List, Optional

from bbb_api.config.settings import Settings, get_settings
from bbb_api.config.logger_config import get_logger, logger
from bbb_api.exceptions import BBBApiError, BBBTransportError
from bbb_api.models.bbb_schemas import (
    ConnectionConfig,
    CreateMeetingRequest,
    CreateMeetingResponse,
    JoinMeetingRequest,
    JoinMeetingResponse,
    EndMeetingRequest,
    MeetingInfo,
)
from bbb_api.utils.bbb_helpers import (
    serialize,
    build_request,
    parse_xml_response,
    check_response,
)
from bbb_api.utils.bbb_mappers import (
    map_create_response,
    map_join_response,
    map_running_response,
    map_meeting_info,
    map_meetings,
)


class BBBService:
    """
    Client for the BigBlueButton administrative API.

    Every operation performs a single signed GET against
    ``{host}/api/{call}`` and maps the XML answer onto a model. Failures
    raise ``BBBTransportError`` (non-200 status) or ``BBBApiError``
    (returncode other than SUCCESS).
    """

    def __init__(
        self,
        host: str,
        secret: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = ConnectionConfig(host=host.rstrip("/"), secret=secret)
        # Only set in tests; None means httpx's default network transport
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "BBBService":
        """Build a client from BBB_SERVER_BASE_URL / BBB_SECRET."""
        settings = settings or get_settings()
        get_logger(logger.name, settings.log_level.upper())
        return cls(
            host=settings.bbb_server_base_url,
            secret=settings.bbb_secret,
            transport=transport,
        )

    async def create_meeting(self, request: CreateMeetingRequest) -> CreateMeetingResponse:
        """Create a new BBB meeting."""
        response = await self._call_bbb_api("create", request.to_params())
        meeting = map_create_response(response)
        logger.info(f"Meeting created with ID: {meeting.meetingID}")
        return meeting

    async def join_meeting(self, request: JoinMeetingRequest) -> JoinMeetingResponse:
        """Join a BBB meeting, returning the session tokens and client URL."""
        params = {**request.to_params(), "redirect": "false", "joinViaHtml5": "true"}
        response = await self._call_bbb_api("join", params)
        return map_join_response(response)

    async def is_meeting_running(self, meeting_id: str) -> bool:
        """Check if a meeting is running."""
        response = await self._call_bbb_api("isMeetingRunning", {"meetingID": meeting_id})
        return map_running_response(response)

    async def end_meeting(self, request: EndMeetingRequest) -> bool:
        """End a BBB meeting."""
        await self._call_bbb_api("end", request.to_params())
        logger.info(f"Meeting ended: {request.meeting_id}")
        return True

    async def get_meeting_info(self, meeting_id: str) -> MeetingInfo:
        """Get detailed information about a meeting."""
        response = await self._call_bbb_api("getMeetingInfo", {"meetingID": meeting_id})
        return map_meeting_info(response)

    async def get_meetings(self) -> List[MeetingInfo]:
        """Get the list of all meetings."""
        response = await self._call_bbb_api("getMeetings", {})
        return map_meetings(response)

    def get_join_url(self, request: JoinMeetingRequest) -> str:
        """Generate a join URL for a browser to follow."""
        return self._build_url("join", request.to_params())

    def get_is_meeting_running_url(self, meeting_id: str) -> str:
        """Generate a URL to check if a meeting is running."""
        return self._build_url("isMeetingRunning", {"meetingID": meeting_id})

    def _build_url(self, api_call: str, params: Dict[str, Any]) -> str:
        return build_request(
            f"{self.config.host}/api/{api_call}",
            api_call,
            serialize(params),
            self.config.secret,
        )

    async def _call_bbb_api(self, api_call: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Makes a call to the BBB API and returns the checked, parsed response."""
        full_url = self._build_url(api_call, params)
        logger.debug(f"BBB API URL: {full_url}")

        async with httpx.AsyncClient(
            transport=self._transport, follow_redirects=True
        ) as client:
            response = await client.get(full_url)

        if response.status_code != 200:
            logger.warning(f"BBB API {api_call} returned HTTP {response.status_code}")
            raise BBBTransportError(status_code=response.status_code)

        result = parse_xml_response(response.content)
        try:
            check_response(result)
        except BBBApiError:
            logger.warning(
                f"BBB API {api_call} failed: {result.get('messageKey')} {result.get('message')}"
            )
            raise
        return result
