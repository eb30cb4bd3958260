"""Sanction-screening scenarios: list entries derived from pooled customers."""

from __future__ import annotations

import re

from aml_synth.violations.records import Actor, Built, RecordFactory, scenario

PEP_POSITIONS = (
    "Member of Parliament",
    "Minister of Finance",
    "Central Bank Governor",
    "Senior Military Officer",
    "State Enterprise Director",
)


def name_aliases(name: str) -> list[str]:
    """The name, its words reversed, and every 'a' swapped for 'e'."""
    return [name, " ".join(reversed(name.split())), re.sub("a", "e", name, flags=re.IGNORECASE)]


@scenario("SANCTION_INDIVIDUAL")
def sanction_individual(f: RecordFactory, actor: Actor) -> Built:
    c = actor.customer
    name = f.name_of(c)
    entry = f.sanction_entry(
        {
            "name": name,
            "caption": name,
            "aliases": name_aliases(name),
            "dateOfBirth": c.date_of_birth or "1980-01-15",
            "nationality": [c.nationality or "Bangladeshi"],
            "citizenships": [c.country or "BD"],
            "countryCodes": [c.country or "BD"],
            "entityType": "Individual",
            "schema": "Person",
            "searchText": name,
            "riskLevel": "CRITICAL",
        }
    )
    return Built(
        [entry],
        f'Sanction entry matching customer "{name}" from pool. Fuzzy matching will trigger '
        "individual screening alert.",
    )


@scenario("SANCTION_CORPORATE")
def sanction_corporate(f: RecordFactory, actor: Actor) -> Built:
    c = actor.customer
    if c.customer_name_eng:
        business = f"{c.customer_name_eng} Enterprises Ltd"
    else:
        business = f"{f.company()} Trading Ltd"
    entry = f.sanction_entry(
        {
            "name": business,
            "caption": business,
            "aliases": [
                business,
                business.replace("Ltd", "Limited"),
                f"{business.split()[0]} Corp",
            ],
            "entityType": "Company",
            "schema": "Company",
            "organization": business,
            "searchText": business,
            "topics": ["sanction", "crime.fin", "entity"],
        }
    )
    return Built([entry], f'Corporate sanction entry matching pool customer: "{business}".')


@scenario("SANCTION_PEP")
def sanction_pep(f: RecordFactory, actor: Actor) -> Built:
    c = actor.customer
    name = f.name_of(c)
    position = f.choice(PEP_POSITIONS)
    entry = f.sanction_entry(
        {
            "name": name,
            "caption": f"{name} - Politically Exposed Person",
            "aliases": [name],
            "dateOfBirth": c.date_of_birth or "1965-03-20",
            "position": position,
            "entityType": "Individual",
            "schema": "Person",
            "topics": ["role.pep", "gov.national", "poi"],
            "datasets": ["PEP_DATABASE", "WORLD_CHECK"],
            "searchText": name,
            "riskLevel": "HIGH",
        }
    )
    return Built([entry], f'PEP entry matching customer "{name}"; position: {position}.')


@scenario("SANCTION_VESSEL")
def sanction_vessel(f: RecordFactory, actor: Actor) -> Built:
    imo = str(f.integer(9_000_000, 9_999_999))
    entry = f.sanction_entry(
        {
            "name": f"MV {f.company().split()[0]} Star",
            "caption": "Sanctioned Vessel",
            "entityType": "Vessel",
            "schema": "Thing",
            "properties": {"imoNumber": [imo], "flag": ["KP"], "vesselType": ["Cargo"]},
            "topics": ["sanction", "transport", "debarment"],
            "datasets": ["OFAC_SDN", "UN_VESSELS"],
            "countryCodes": ["KP"],
            "searchText": "MV Star vessel sanctioned",
        }
    )
    return Built([entry], f'Sanctioned vessel entry: "{entry["name"]}" with IMO {imo}.')


@scenario("SANCTION_ASSET")
def sanction_asset(f: RecordFactory, actor: Actor) -> Built:
    entry = f.sanction_entry(
        {
            "name": f"Property {f.faker.street_address()}",
            "caption": "Sanctioned Asset",
            "entityType": "Asset",
            "schema": "Thing",
            "properties": {"type": ["Real Estate"], "registrationCountry": ["IR"]},
            "topics": ["sanction", "asset.frozen", "debarment"],
            "datasets": ["OFAC_SDN", "EU_SANCTIONS"],
            "countryCodes": ["IR"],
            "searchText": "property asset frozen sanctioned",
        }
    )
    return Built(
        [entry], f'Frozen asset entry: "{entry["name"]}" in {entry["countryCodes"][0]}.'
    )


@scenario("SANCTION_ADVERSE_MEDIA")
def sanction_adverse_media(f: RecordFactory, actor: Actor) -> Built:
    name = f.name_of(actor.customer)
    entry = f.sanction_entry(
        {
            "name": name,
            "caption": f"{name} - Adverse Media",
            "aliases": [name],
            "entityType": "Individual",
            "schema": "Person",
            "topics": ["crime.fraud", "crime.fin", "media"],
            "datasets": ["ADVERSE_MEDIA_DB", "WORLD_CHECK"],
            "searchText": f"{name} fraud money laundering investigation",
            "riskLevel": "MEDIUM",
            "sourceUrl": "https://news.example.com/financial-crime-investigation",
        }
    )
    return Built(
        [entry], f'Adverse media entry for "{name}"; linked to financial crime investigation.'
    )
