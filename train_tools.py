#!/usr/bin/env python3
"""
Train Tools - National Rail OpenLDBSVWS Client

This module fetches service details from the National Rail Live Departure
Boards Staff Version web service (OpenLDBSVWS, SOAP) and parses them into
ServiceDetails models with service_parser.

Main class: TrainTools
Provides a method for retrieving the full schedule and real-time state of a
train service by its RTTI ID (RID).

Usage:
    from train_tools import TrainTools

    tt = TrainTools(ldb_token='your_token')
    details = tt.get_service_details('202406078712345')

Environment Variables:
    LDB_TOKEN - National Rail OpenLDBSVWS access token
"""

import logging
from typing import Optional, Union

import requests
from zeep import Client, Settings, xsd
from zeep.exceptions import Error as ZeepError
from zeep.transports import Transport

from config import get_config
from models import ServiceDetails, ServiceDetailsError
from parsing_errors import InvalidField, MissingField, ParsingError
from service_parser import parse_service_details

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration Constants
# ============================================================================

TOKEN_NAMESPACE = 'http://thalesgroup.com/RTTI/2013-11-28/Token/types'

# ============================================================================
# TrainTools Class
# ============================================================================

class TrainTools:
    """
    National Rail OpenLDBSVWS client

    Authentication:
    - Requires an OpenLDBSVWS token (LDB_TOKEN). OpenLDBWS (public) tokens
      are not accepted by the staff version service.

    Example:
        >>> tt = TrainTools(ldb_token=os.getenv('LDB_TOKEN'))
        >>> details = tt.get_service_details('202406078712345')
        >>> if isinstance(details, ServiceDetails):
        ...     print(f"{details.trainid}: {len(details.locations)} locations")
    """

    def __init__(self, ldb_token: Optional[str] = None, wsdl: Optional[str] = None,
                 timeout: Optional[float] = None):
        """
        Initialize TrainTools client.

        Args:
            ldb_token: OpenLDBSVWS access token.
                      Falls back to LDB_TOKEN from configuration if not provided.
            wsdl: Custom WSDL URL for the SOAP API. Uses configured default if not provided.
            timeout: Request timeout in seconds. Uses configured default if not provided.
        """
        config = get_config()
        self.ldb_token = ldb_token or config.ldb_token
        self.wsdl = wsdl or config.ldbsv_wsdl
        self.timeout = timeout or config.request_timeout

    # ------------------------------------------------------------------------
    # Private Helper Methods
    # ------------------------------------------------------------------------

    def _make_header(self) -> xsd.Element:
        """Create SOAP authentication header for National Rail API."""
        header = xsd.Element(
            f'{{{TOKEN_NAMESPACE}}}AccessToken',
            xsd.ComplexType([
                xsd.Element(
                    f'{{{TOKEN_NAMESPACE}}}TokenValue',
                    xsd.String()),
            ])
        )
        return header(TokenValue=self.ldb_token)

    def _create_soap_client(self) -> Client:
        """
        Create and configure SOAP client for National Rail API.

        Responses are returned raw so that service_parser reads the XML itself.
        """
        settings = Settings(strict=False, raw_response=True)
        transport = Transport(timeout=self.timeout, operation_timeout=self.timeout)
        return Client(wsdl=self.wsdl, settings=settings, transport=transport)

    # ------------------------------------------------------------------------
    # Public API Methods - Service Details
    # ------------------------------------------------------------------------

    def fetch_service_xml(self, rid: str) -> str:
        """
        Fetch the raw GetServiceDetailsByRID response for a service.

        Args:
            rid: RTTI ID of the service

        Returns:
            Response body (SOAP envelope) as text

        Raises:
            requests.HTTPError: If the service replies with a non-2xx status
            requests.RequestException: On transport failures
            zeep.exceptions.Error: If the WSDL cannot be loaded or used
        """
        client = self._create_soap_client()
        response = client.service.GetServiceDetailsByRID(
            rid=rid,
            _soapheaders=[self._make_header()],
        )
        response.raise_for_status()
        return response.text

    def get_service_details(self, rid: str) -> Union[ServiceDetails, ServiceDetailsError]:
        """
        Retrieve details of a specific train service.

        Fetches the service from OpenLDBSVWS and parses the response into a
        ServiceDetails model with the full, ordered list of locations.

        Args:
            rid: RTTI ID of the service (e.g. from an association or departure board)

        Returns:
            Union[ServiceDetails, ServiceDetailsError]

            On Success - ServiceDetails (see models.service_details)

            On Error - ServiceDetailsError with attributes:
                - error (str): Error kind (e.g. "HTTP 500", "MissingField")
                - message (str): Detailed error description
                - field (Optional[str]): Feed field involved, for parsing errors

        Important Notes:
            - Non-train services (buses, ferries) are reported as UnsupportedServiceType
            - A document with any malformed mandatory field is rejected as a whole
        """
        if not self.ldb_token:
            return ServiceDetailsError(
                error='Missing API key',
                message='LDB_TOKEN is not set in environment.'
            )

        try:
            document = self.fetch_service_xml(rid)
            details = parse_service_details(document)
            logger.info(f"Service details retrieved for {rid}: {len(details.locations)} location(s)")
            return details

        except requests.HTTPError as http_err:
            status = getattr(http_err.response, 'status_code', 'unknown')
            logger.warning(f"Service details request for {rid} failed with status {status}")
            return ServiceDetailsError(
                error=f"HTTP {status}",
                message=f"Service details request failed with status {status}: {http_err}"
            )
        except requests.RequestException as e:
            logger.warning(f"Unable to fetch service details for {rid}: {e}")
            return ServiceDetailsError(
                error=str(e),
                message=f"Unable to fetch service details: {str(e)}"
            )
        except ZeepError as e:
            logger.error(f"SOAP error fetching service details for {rid}: {e}")
            return ServiceDetailsError(
                error=type(e).__name__,
                message=f"SOAP error: {str(e)}"
            )
        except ParsingError as e:
            logger.error(f"Error parsing service details for {rid}: {e}")
            return ServiceDetailsError(
                error=type(e).__name__,
                message=f"Error parsing service details: {str(e)}",
                field=_error_field(e),
            )


def _error_field(error: ParsingError) -> Optional[str]:
    if isinstance(error, MissingField):
        return error.name
    if isinstance(error, InvalidField):
        return error.field
    return None


# ============================================================================
# Module-level convenience functions
# ============================================================================

def get_service_details(rid: str) -> Union[ServiceDetails, ServiceDetailsError]:
    """Module-level wrapper for TrainTools.get_service_details."""
    return TrainTools().get_service_details(rid)
