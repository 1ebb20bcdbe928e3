"""
TSDR client for retrieving trademark status XML from the USPTO.
Feeds downloaded documents to the XML parser.
"""

import requests
from typing import Optional, Dict, Any
import logging

from .models import TrademarkRecord
from .xml_parser import parse_trademark_xml

logger = logging.getLogger(__name__)


class TSDRClient:
    """
    Fetches trademark status documents from the TSDR API.
    """

    # TSDR API base URL
    TSDR_API_URL = "https://tsdrapi.uspto.gov/ts/cd"

    def __init__(self, api_key: str = None, base_url: str = None, timeout: int = 30):
        """
        Initialize the client.

        Args:
            api_key: USPTO API key (TSDR rejects most anonymous requests)
            base_url: Override for the TSDR API base URL
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = (base_url or self.TSDR_API_URL).rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'TrademarkExtractor/1.0'
        })

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'TSDRClient':
        tsdr_config = config.get('tsdr') or {}
        return cls(
            api_key=tsdr_config.get('api_key'),
            base_url=tsdr_config.get('base_url'),
            timeout=tsdr_config.get('timeout', 30),
        )

    @staticmethod
    def clean_serial(serial_number: str) -> str:
        return serial_number.strip().replace('/', '').replace('-', '')

    def fetch_status_xml(self, serial_number: str) -> Optional[str]:
        """
        Download the status XML document for a trademark.

        Args:
            serial_number: USPTO serial number

        Returns:
            XML text or None if it could not be retrieved
        """
        serial = self.clean_serial(serial_number)
        url = f"{self.base_url}/casestatus/sn{serial}/info.xml"

        headers = {}
        if self.api_key:
            headers['USPTO-API-KEY'] = self.api_key

        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)

            if response.status_code == 200:
                logger.info(f"Downloaded status document for {serial}")
                return response.text
            elif response.status_code == 401:
                logger.warning("TSDR API requires authentication. Get an API key at developer.uspto.gov")
                return None
            elif response.status_code == 404:
                logger.debug(f"Trademark not found: {serial_number}")
                return None
            else:
                logger.warning(f"TSDR API error {response.status_code} for {serial_number}")
                return None

        except requests.exceptions.RequestException as e:
            logger.error(f"Error looking up trademark {serial_number}: {e}")
            return None

    def fetch_record(self, serial_number: str) -> Optional[TrademarkRecord]:
        """
        Download and parse the status document for a trademark.

        Args:
            serial_number: USPTO serial number

        Returns:
            Parsed record or None if the document could not be retrieved

        Raises:
            MalformedXMLError: if TSDR returned a document that is not XML
        """
        xml = self.fetch_status_xml(serial_number)
        if xml is None:
            return None
        return parse_trademark_xml(xml)

    def get_tsdr_link(self, serial_number: str) -> str:
        """
        Generate TSDR website link for a trademark.

        Args:
            serial_number: USPTO serial number

        Returns:
            URL to TSDR page
        """
        serial = self.clean_serial(serial_number)
        return f"https://tsdr.uspto.gov/#caseNumber={serial}&caseSearchType=US_APPLICATION&caseType=DEFAULT&searchType=statusSearch"
