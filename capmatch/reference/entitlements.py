"""Entitlement types and permit filings per supported city."""

ENTITLEMENT_TYPES: dict[str, list[str]] = {
    "denver": ["Rezoning", "Site Plan", "Building Permit", "Landmark Designation", "Conditional Use"],
    "chicago": ["Building Permit", "Zoning Change", "Planned Development", "Landmark Designation"],
    "charlotte": ["Rezoning Petition", "Commercial Building Permit", "Subdivision", "Urban District Review"],
    "raleigh": ["Site Plan", "Building Permit", "Rezoning", "Administrative Site Review"],
    "nashville": ["Building Permit", "Zoning Change", "Subdivision", "Historic Overlay"],
    "new york": ["New Building", "Alteration Type 1", "Alteration Type 2", "Special Permit", "Variance"],
    "los angeles": ["Building Permit", "Entitlement", "Coastal Development Permit", "Specific Plan Approval"],
    "miami": ["Building Permit", "Zoning Verification", "Warrant", "Special Exception", "Variance"],
    "dallas": ["Building Permit", "Zoning Change", "Specific Use Permit", "Board of Adjustment"],
}

PERMIT_FILINGS: dict[str, list[dict]] = {
    "denver": [
        {
            "type": "Rezoning",
            "status": "Approved",
            "reference_number": "Z-2023-10456",
            "filing_date": "2023-05-15",
            "last_update": "2023-09-22",
            "description": "Rezoning from C-MX-5 to C-MX-8",
        },
    ],
    "chicago": [
        {
            "type": "Building Permit",
            "status": "Issued",
            "reference_number": "100123456",
            "filing_date": "2023-04-10",
            "last_update": "2023-05-01",
            "description": "New Construction - Multifamily Building",
        },
    ],
    "charlotte": [
        {
            "type": "Rezoning Petition",
            "status": "Approved",
            "reference_number": "2023-056",
            "filing_date": "2023-03-15",
            "last_update": "2023-08-22",
            "description": "Rezoning from R-3 to UR-2(CD)",
        },
        {
            "type": "Commercial Building Permit",
            "status": "Under Review",
            "reference_number": "BLDG-2023-12345",
            "filing_date": "2023-09-01",
            "last_update": "2023-09-15",
            "description": "New 5-story mixed-use building",
        },
    ],
    "raleigh": [
        {
            "type": "Site Plan",
            "status": "Approved",
            "reference_number": "SP-123-2023",
            "filing_date": "2023-02-10",
            "last_update": "2023-07-15",
            "description": "Mixed-use development with ground floor retail",
        },
        {
            "type": "Building Permit",
            "status": "Issued",
            "reference_number": "BP-2023-45678",
            "filing_date": "2023-07-20",
            "last_update": "2023-08-05",
            "description": "Commercial interior renovation",
        },
    ],
    "nashville": [
        {
            "type": "Building Permit",
            "status": "Issued",
            "reference_number": "BLDC-2023-045678",
            "filing_date": "2023-06-12",
            "last_update": "2023-07-03",
            "description": "New Multi-Family Building - 45 Units",
        },
        {
            "type": "Zoning Change",
            "status": "Approved",
            "reference_number": "ZN-2023-1234",
            "filing_date": "2023-04-20",
            "last_update": "2023-09-10",
            "description": "Rezoning from RS5 to RM20-A",
        },
    ],
    "new york": [
        {
            "type": "New Building",
            "status": "Issued",
            "reference_number": "121345678",
            "filing_date": "2023-01-15",
            "last_update": "2023-05-10",
            "description": "New 12-story residential building",
        },
        {
            "type": "Alteration Type 1",
            "status": "In Process",
            "reference_number": "140987654",
            "filing_date": "2023-03-21",
            "last_update": "2023-04-15",
            "description": "Change of use from commercial to residential with structural work",
        },
    ],
    "los angeles": [
        {
            "type": "Building Permit",
            "status": "Issued",
            "reference_number": "23010-10000-12345",
            "filing_date": "2023-05-20",
            "last_update": "2023-06-15",
            "description": "New 5-story apartment building",
        },
        {
            "type": "Entitlement",
            "status": "Approved with Conditions",
            "reference_number": "DIR-2023-1234-TOC",
            "filing_date": "2023-02-10",
            "last_update": "2023-08-22",
            "description": "Transit Oriented Communities Approval for density bonus",
        },
    ],
    "miami": [
        {
            "type": "Building Permit",
            "status": "Issued",
            "reference_number": "B-2023-054321",
            "filing_date": "2023-04-05",
            "last_update": "2023-05-20",
            "description": "New Construction - Mixed Use Tower",
        },
        {
            "type": "Zoning Verification",
            "status": "Completed",
            "reference_number": "ZV-2023-00789",
            "filing_date": "2023-03-10",
            "last_update": "2023-03-25",
            "description": "Verification of zoning compliance for property",
        },
    ],
    "dallas": [
        {
            "type": "Building Permit",
            "status": "Approved",
            "reference_number": "BP-2023-1234",
            "filing_date": "2023-07-12",
            "last_update": "2023-08-20",
            "description": "New Multi-Family Development",
        },
        {
            "type": "Zoning Change",
            "status": "In Progress",
            "reference_number": "Z-2023-789",
            "filing_date": "2023-06-05",
            "last_update": "2023-09-15",
            "description": "PD Amendment for mixed-use development",
        },
    ],
}
