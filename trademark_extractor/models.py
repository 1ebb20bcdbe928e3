"""
Data models for parsed trademark registration records.

Every field that the source document may omit is Optional; a missing element
is None rather than an empty string. Records are frozen and hold tuples, so a
parsed record cannot change after it is handed to the caller.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Tuple, Dict, Any
import json


@dataclass(frozen=True)
class BasicInfo:
    """Registration identifiers."""
    registration_number: Optional[str] = None
    application_number: Optional[str] = None
    registration_office: Optional[str] = None
    filing_place: Optional[str] = None
    mark_category: Optional[str] = None


@dataclass(frozen=True)
class DateSet:
    """Key dates, normalized to YYYY-MM-DD where recognized."""
    application_date: Optional[str] = None
    registration_date: Optional[str] = None
    status_date: Optional[str] = None
    publication_date: Optional[str] = None
    first_use_date: Optional[str] = None
    first_use_in_commerce_date: Optional[str] = None


@dataclass(frozen=True)
class Address:
    """Postal address of a party."""
    lines: Tuple[str, ...] = ()
    city: Optional[str] = None
    state_or_region: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None


@dataclass(frozen=True)
class Owner:
    """Current owner (registrant) of the mark."""
    name: Optional[str] = None
    legal_entity_name: Optional[str] = None
    incorporation_state: Optional[str] = None
    incorporation_country: Optional[str] = None
    address: Optional[Address] = None


@dataclass(frozen=True)
class Correspondent:
    """Party that receives USPTO correspondence."""
    name: Optional[str] = None
    organization: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    address: Optional[Address] = None


@dataclass(frozen=True)
class Attorney:
    """Attorney of record."""
    name: Optional[str] = None
    docket_number: Optional[str] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class MarkDescriptor:
    """Textual and visual description of the mark."""
    text: Optional[str] = None
    is_standard_character: bool = False
    description: Optional[str] = None
    disclaimer: Optional[str] = None
    significant_text: Optional[str] = None


@dataclass(frozen=True)
class GoodsServiceEntry:
    """One goods/services container with its classification."""
    class_number: Optional[str] = None
    nice_class: Optional[str] = None
    description: Optional[str] = None
    domestic_classes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BasisFlags:
    """Filing basis indicators."""
    use: bool = False
    intent_to_use: bool = False
    foreign: bool = False  # foreign registration, Section 44(e)
    foreign_application: bool = False  # Section 44(d)


@dataclass(frozen=True)
class FilingBasis:
    """
    Current and original filing basis.

    A half is None when the document does not state it, which is different
    from a basis stated with every flag false.
    """
    current: Optional[BasisFlags] = None
    original: Optional[BasisFlags] = None


@dataclass(frozen=True)
class Association:
    """Cross-reference to a related (associated or international) filing."""
    category: Optional[str] = None
    application_number: Optional[str] = None
    international_number: Optional[str] = None


@dataclass(frozen=True)
class ProsecutionEvent:
    """Single entry of the prosecution history."""
    date: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    entry_number: Optional[str] = None
    category: Optional[str] = None
    additional_text: Optional[str] = None


# Status code the USPTO uses for a live registration
REGISTERED_STATUS_CODE = '700'


@dataclass(frozen=True)
class StatusInfo:
    """Current status of the mark."""
    code: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_registered(self) -> bool:
        return self.code == REGISTERED_STATUS_CODE


@dataclass(frozen=True)
class TrademarkRecord:
    """Normalized trademark registration record produced by the parser."""
    basic_info: BasicInfo
    dates: DateSet
    status: StatusInfo
    owner: Optional[Owner] = None
    correspondent: Optional[Correspondent] = None
    attorney: Optional[Attorney] = None
    mark: Optional[MarkDescriptor] = None
    goods_services: Tuple[GoodsServiceEntry, ...] = ()
    filing_basis: Optional[FilingBasis] = None
    international_associations: Tuple[Association, ...] = ()
    prosecution_history: Tuple[ProsecutionEvent, ...] = ()
    fallback_mode: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary form, with nested records as dictionaries."""
        return asdict(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON. Identical records give identical output."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
