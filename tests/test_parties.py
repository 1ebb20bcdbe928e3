# tests/test_parties.py
"""Tests for the address, owner, correspondent and attorney extractors."""

from conftest import element
from trademark_extractor.address import extract_address
from trademark_extractor.field_selectors import FieldId, element_text, resolve_all
from trademark_extractor.parties import (
    OWNER_ROLE_MARKERS,
    extract_attorney,
    extract_correspondent,
    extract_owner,
    select_owner,
)


def applicant(name: str, extra: str = "") -> str:
    return (
        "<ns2:Applicant><ns1:Contact><ns1:Name>"
        f"<ns1:EntityName>{name}</ns1:EntityName>"
        f"</ns1:Name></ns1:Contact>{extra}</ns2:Applicant>"
    )


# --- Owner selection ---

def test_owner_with_role_marker_is_selected() -> None:
    """The applicant flagged as original registrant is the owner."""
    context = element(
        applicant("Acme Corp", "<ns2:CommentText>ORIGINAL REGISTRANT</ns2:CommentText>")
        + applicant("Generic LLC")
    )
    owner = extract_owner(context)
    assert owner is not None
    assert owner.name == "Acme Corp"


def test_marker_on_later_applicant_wins_over_first() -> None:
    context = element(
        applicant("Generic LLC")
        + applicant("Acme Corp", "<ns2:CommentText>OWNER</ns2:CommentText>")
    )
    assert extract_owner(context).name == "Acme Corp"


def test_without_marker_first_applicant_is_owner() -> None:
    context = element(applicant("First Co") + applicant("Second Co"))
    assert extract_owner(context).name == "First Co"


def test_role_marker_is_case_sensitive() -> None:
    """Lower-case phrasing is not recognized and falls back to the first entry."""
    context = element(
        applicant("First Co")
        + applicant("Second Co", "<ns2:CommentText>original registrant</ns2:CommentText>")
    )
    assert extract_owner(context).name == "First Co"


def test_select_owner_on_element_list() -> None:
    context = element(applicant("A") + applicant("B", "<x>CURRENT OWNER</x>") + applicant("C", "<x>OWNER</x>"))
    applicants = resolve_all(context, FieldId.APPLICANT)
    chosen = select_owner(applicants)
    assert "B" in element_text(chosen)
    assert select_owner([]) is None
    assert "OWNER" in OWNER_ROLE_MARKERS


def test_owner_fields_and_address() -> None:
    context = element(applicant(
        "Acme Corp",
        "<ns2:LegalEntityName>corporation</ns2:LegalEntityName>"
        "<ns2:IncorporationState>DELAWARE</ns2:IncorporationState>"
        "<ns2:IncorporationCountryCode>US</ns2:IncorporationCountryCode>"
        "<ns1:PostalStructuredAddress>"
        "<ns1:AddressLineText>1 Main St</ns1:AddressLineText>"
        "<ns1:CityName>Springfield</ns1:CityName>"
        "</ns1:PostalStructuredAddress>",
    ))
    owner = extract_owner(context)
    assert owner.legal_entity_name == "corporation"
    assert owner.incorporation_state == "DELAWARE"
    assert owner.incorporation_country == "US"
    assert owner.address.lines == ("1 Main St",)
    assert owner.address.city == "Springfield"
    assert owner.address.postal_code is None


def test_no_applicant_means_no_owner() -> None:
    assert extract_owner(element("<ns2:MarkCategory>Trademark</ns2:MarkCategory>")) is None


def test_owner_without_address() -> None:
    owner = extract_owner(element(applicant("Acme Corp")))
    assert owner.address is None


# --- Address ---

def test_address_lines_keep_source_order_and_duplicates() -> None:
    context = element(
        "<ns1:PostalStructuredAddress>"
        "<ns1:AddressLineText>Suite 5</ns1:AddressLineText>"
        "<ns1:AddressLineText>100 Main Street</ns1:AddressLineText>"
        "<ns1:AddressLineText>Suite 5</ns1:AddressLineText>"
        "<ns1:AddressLineText>   </ns1:AddressLineText>"
        "<ns1:CityName>Springfield</ns1:CityName>"
        "<ns1:GeographicRegionName>IL</ns1:GeographicRegionName>"
        "<ns1:CountryCode>US</ns1:CountryCode>"
        "<ns1:PostalCode>62701</ns1:PostalCode>"
        "</ns1:PostalStructuredAddress>",
        root="Applicant",
    )
    address = extract_address(context)
    assert address.lines == ("Suite 5", "100 Main Street", "Suite 5")
    assert address.city == "Springfield"
    assert address.state_or_region == "IL"
    assert address.country == "US"
    assert address.postal_code == "62701"


def test_plain_address_container_is_recognized() -> None:
    context = element("<Address><CityName>Austin</CityName></Address>", root="Correspondent")
    address = extract_address(context)
    assert address.lines == ()
    assert address.city == "Austin"


def test_missing_address_is_none() -> None:
    assert extract_address(element("<ns1:CityName>Nowhere</ns1:CityName>", root="Applicant")) is None


# --- Correspondent ---

def test_correspondent_fields() -> None:
    context = element(
        "<ns2:NationalCorrespondent><ns1:Contact>"
        "<ns1:Name>"
        "<ns1:PersonName><ns1:PersonFullName>Jane Counsel</ns1:PersonFullName></ns1:PersonName>"
        "<ns1:OrganizationName><ns1:OrganizationStandardName>Counsel LLP</ns1:OrganizationStandardName></ns1:OrganizationName>"
        "</ns1:Name>"
        "<ns1:PhoneNumber>312-555-0100</ns1:PhoneNumber>"
        "<ns1:FaxNumber>312-555-0101</ns1:FaxNumber>"
        "<ns1:EmailAddressText>jane@counsel.example</ns1:EmailAddressText>"
        "<ns1:PostalStructuredAddress><ns1:CityName>Chicago</ns1:CityName></ns1:PostalStructuredAddress>"
        "</ns1:Contact></ns2:NationalCorrespondent>"
    )
    correspondent = extract_correspondent(context)
    assert correspondent.name == "Jane Counsel"
    assert correspondent.organization == "Counsel LLP"
    assert correspondent.phone == "312-555-0100"
    assert correspondent.fax == "312-555-0101"
    assert correspondent.email == "jane@counsel.example"
    assert correspondent.address.city == "Chicago"


def test_correspondent_prefers_main_email() -> None:
    context = element(
        "<ns2:NationalCorrespondent>"
        '<ns1:EmailAddressText ns1:emailAddressPurposeCategory="Secondary">docket@x.example</ns1:EmailAddressText>'
        '<ns1:EmailAddressText ns1:emailAddressPurposeCategory="Main">main@x.example</ns1:EmailAddressText>'
        "</ns2:NationalCorrespondent>"
    )
    assert extract_correspondent(context).email == "main@x.example"


def test_correspondent_email_falls_back_to_first_non_empty() -> None:
    context = element(
        "<ns2:NationalCorrespondent>"
        "<ns1:EmailAddressText> </ns1:EmailAddressText>"
        "<ns1:EmailAddressText>first@x.example</ns1:EmailAddressText>"
        "<ns1:EmailAddressText>second@x.example</ns1:EmailAddressText>"
        "</ns2:NationalCorrespondent>"
    )
    assert extract_correspondent(context).email == "first@x.example"


def test_generic_correspondent_container() -> None:
    context = element("<Correspondent><PersonFullName>Pat Doe</PersonFullName></Correspondent>")
    correspondent = extract_correspondent(context)
    assert correspondent.name == "Pat Doe"
    assert correspondent.email is None
    assert correspondent.address is None


def test_missing_correspondent_is_none() -> None:
    assert extract_correspondent(element("")) is None


# --- Attorney ---

def test_attorney_fields() -> None:
    context = element(
        "<ns2:RecordAttorney>"
        "<ns1:Contact><ns1:Name><ns1:PersonName>"
        "<ns1:PersonFullName>John Q. Attorney</ns1:PersonFullName>"
        "</ns1:PersonName></ns1:Name></ns1:Contact>"
        "<ns2:DocketText>ACME-TM-001</ns2:DocketText>"
        "</ns2:RecordAttorney>"
    )
    attorney = extract_attorney(context)
    assert attorney.name == "John Q. Attorney"
    assert attorney.docket_number == "ACME-TM-001"
    assert attorney.comment is None
    assert not hasattr(attorney, "address")


def test_missing_attorney_is_none() -> None:
    assert extract_attorney(element("<ns2:NationalCorrespondent/>")) is None
