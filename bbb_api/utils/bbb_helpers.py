import hashlib
import xml.etree.ElementTree as ET
from urllib.parse import urlencode, quote
from typing import Dict, Any, Mapping, Union

from bbb_api.exceptions import BBBApiError

# Characters left unescaped, same set as JavaScript's encodeURIComponent
_SAFE_CHARS = "-_.!~*'()"


def serialize(params: Mapping[str, Any]) -> str:
    """Flattens a parameter mapping into a percent-encoded query string."""
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, str(value)))
    return urlencode(pairs, safe=_SAFE_CHARS, quote_via=quote)


def generate_checksum(call_name: str, query_params: str, shared_secret: str) -> str:
    """Generates the checksum required for BBB API calls."""
    checksum_string = call_name + query_params + shared_secret
    return hashlib.sha1(checksum_string.encode("utf-8")).hexdigest()


def build_request(base_url: str, call_name: str, query_params: str, shared_secret: str) -> str:
    """
    Builds the signed request URL.

    The query segment is kept even when empty, which yields "?&checksum=...".
    """
    checksum = generate_checksum(call_name, query_params, shared_secret)
    return f"{base_url}?{query_params}&checksum={checksum}"


def parse_xml_response(xml_content: Union[bytes, str]) -> Dict[str, Any]:
    """Parses the XML response from BBB API into nested dicts."""
    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError:
        raise BBBApiError(
            message="Failed to parse BBB response", message_key="invalidResponse"
        )

    result = _extract_element_data(root)
    if not isinstance(result, dict):
        return {}
    return result


def _extract_element_data(element: ET.Element) -> Any:
    """
    Helper function to recursively extract data from XML elements.

    Leaves become their stripped text (None when empty). Repeated sibling
    tags collapse into a list; a single occurrence is kept as is.
    """
    if len(element) == 0:
        text = (element.text or "").strip()
        return text or None

    target_dict: Dict[str, Any] = {}
    for child in element:
        value = _extract_element_data(child)
        if child.tag not in target_dict:
            target_dict[child.tag] = value
        elif isinstance(target_dict[child.tag], list):
            target_dict[child.tag].append(value)
        else:
            target_dict[child.tag] = [target_dict[child.tag], value]
    return target_dict


def check_response(response: Dict[str, Any]) -> None:
    """Raises BBBApiError unless the returncode is SUCCESS."""
    if response.get("returncode") != "SUCCESS":
        raise BBBApiError(
            message=response.get("message"), message_key=response.get("messageKey")
        )
