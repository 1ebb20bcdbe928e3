"""
Prosecution history, current status and associated-mark extraction.
"""

import xml.etree.ElementTree as ET
from typing import List
import logging

from .dates import normalize_date, parse_date
from .field_selectors import FieldId, resolve_all, resolve_element, resolve_text
from .models import Association, ProsecutionEvent, StatusInfo

logger = logging.getLogger(__name__)


def sort_events(events: List[ProsecutionEvent]) -> List[ProsecutionEvent]:
    """
    Order events newest first by calendar date.

    Events whose date text cannot be parsed follow the dated ones, and
    undated events go last; both groups keep their document order.
    """
    dated = []
    unparsed = []
    undated = []
    for event in events:
        if not event.date:
            undated.append(event)
            continue
        parsed = parse_date(event.date)
        if parsed is None:
            unparsed.append(event)
        else:
            dated.append((parsed, event))

    # list.sort() stays stable with reverse=True
    dated.sort(key=lambda item: item[0], reverse=True)
    return [event for _, event in dated] + unparsed + undated


def extract_prosecution_history(context: ET.Element) -> List[ProsecutionEvent]:
    """Extract prosecution history events, newest first."""
    logger.debug("Extracting prosecution history")

    elements = resolve_all(context, FieldId.MARK_EVENT)
    if not elements:
        logger.debug("No prosecution history events found")
        return []

    events = []
    for elem in elements:
        event = ProsecutionEvent(
            date=normalize_date(resolve_text(elem, FieldId.EVENT_DATE)),
            code=resolve_text(elem, FieldId.EVENT_CODE),
            description=resolve_text(elem, FieldId.EVENT_DESCRIPTION),
            entry_number=resolve_text(elem, FieldId.EVENT_ENTRY_NUMBER),
            category=resolve_text(elem, FieldId.EVENT_CATEGORY),
            additional_text=resolve_text(elem, FieldId.EVENT_ADDITIONAL_TEXT),
        )
        # Events with neither date nor description carry nothing useful
        if event.date or event.description:
            events.append(event)

    logger.debug(f"Kept {len(events)} of {len(elements)} prosecution history events")
    return sort_events(events)


def extract_status(context: ET.Element) -> StatusInfo:
    """Extract the current status record. Always returns a record."""
    logger.debug("Extracting status information")

    return StatusInfo(
        code=resolve_text(context, FieldId.STATUS_CODE),
        date=normalize_date(resolve_text(context, FieldId.STATUS_DATE)),
        description=resolve_text(context, FieldId.STATUS_DESCRIPTION),
    )


def _extract_association(assoc: ET.Element) -> Association:
    # The US number sits in ApplicationNumber; InternationalApplicationNumber
    # holds its own ApplicationNumberText and must not be read as the US one
    application = resolve_element(assoc, FieldId.ASSOCIATED_APPLICATION)
    return Association(
        category=resolve_text(assoc, FieldId.ASSOCIATION_CATEGORY),
        application_number=resolve_text(application, FieldId.ASSOCIATED_APPLICATION_NUMBER),
        international_number=resolve_text(assoc, FieldId.INTERNATIONAL_NUMBER),
    )


def extract_international_associations(context: ET.Element) -> List[Association]:
    """Extract associated and international filing cross-references."""
    return [_extract_association(assoc) for assoc in resolve_all(context, FieldId.ASSOCIATED_MARK)]
