"""Known zoning and parcel records keyed by street address."""

ZONING_RECORDS: dict[str, dict] = {
    "123 N State St, Chicago, IL": {
        "coordinates": {"lat": 41.8838, "lng": -87.6278},
        "zoning": {"zoning_classification": "B3-5", "description": "Community Shopping District"},
        "parcel": {
            "pin": "17091230120000",
            "property_class": "5-99",
            "township_name": "CHICAGO",
            "square_footage": 5000,
        },
    },
    "456 N Michigan Ave, Chicago, IL": {
        "coordinates": {"lat": 41.8904, "lng": -87.6241},
        "zoning": {"zoning_classification": "DX-12", "description": "Downtown Mixed-Use District"},
        "parcel": {
            "pin": "17103121020000",
            "property_class": "5-91",
            "township_name": "CHICAGO",
            "square_footage": 12000,
        },
    },
    "100 W Randolph St, Chicago, IL": {
        "coordinates": {"lat": 41.8843, "lng": -87.6321},
        "zoning": {"zoning_classification": "DC-16", "description": "Downtown Core District"},
        "parcel": {
            "pin": "17092230450000",
            "property_class": "5-95",
            "township_name": "CHICAGO",
            "square_footage": 32000,
        },
    },
    "401 N Wabash Ave, Chicago, IL": {
        "coordinates": {"lat": 41.8892, "lng": -87.6268},
        "zoning": {"zoning_classification": "DX-16", "description": "Downtown Mixed-Use District"},
        "parcel": {
            "pin": "17322144780000",
            "property_class": "5-98",
            "township_name": "CHICAGO",
            "square_footage": 45000,
        },
    },
    "233 S Wacker Dr, Chicago, IL": {
        "coordinates": {"lat": 41.8789, "lng": -87.6359},
        "zoning": {"zoning_classification": "DC-16", "description": "Downtown Core District"},
        "parcel": {
            "pin": "17162100100000",
            "property_class": "5-97",
            "township_name": "CHICAGO",
            "square_footage": 38000,
        },
    },
}

# Returned for addresses with no known record
FALLBACK_ZONING: dict = {
    "coordinates": {"lat": 41.8781, "lng": -87.6298},
    "zoning": {"zoning_classification": "RS-3", "description": "Residential Single-Unit District"},
    "parcel": {
        "pin": "17000000000000",
        "property_class": "2-03",
        "township_name": "CHICAGO",
        "square_footage": 5000,
    },
}

PARCELS: dict[str, list[dict]] = {
    "charlotte": [
        {
            "address": "401 N Tryon St, Charlotte, NC",
            "parcel_id": "08117716",
            "zoning": "UMUD",
            "overlays": ["TOD-CC"],
            "lot_size": 22500,
            "opportunity_zone": True,
            "distance_to_transit": 0.2,
        },
        {
            "address": "500 S College St, Charlotte, NC",
            "parcel_id": "12345678",
            "zoning": "UMUD",
            "overlays": ["TOD-UC"],
            "lot_size": 15000,
            "opportunity_zone": True,
            "distance_to_transit": 0.15,
        },
        {
            "address": "1100 S Tryon St, Charlotte, NC",
            "parcel_id": "08117753",
            "zoning": "MUDD",
            "overlays": ["TOD-CC", "Historic District"],
            "lot_size": 18000,
            "opportunity_zone": False,
            "distance_to_transit": 0.3,
        },
        {
            "address": "525 N Tryon St, Charlotte, NC",
            "parcel_id": "08117734",
            "zoning": "UMUD",
            "overlays": ["TOD-CC"],
            "lot_size": 30000,
            "opportunity_zone": True,
            "distance_to_transit": 0.25,
        },
        {
            "address": "300 S Brevard St, Charlotte, NC",
            "parcel_id": "08117790",
            "zoning": "TOD-NC",
            "overlays": ["Historic District"],
            "lot_size": 12000,
            "opportunity_zone": False,
            "distance_to_transit": 0.4,
        },
    ],
    "raleigh": [
        {
            "address": "150 Fayetteville St, Raleigh, NC",
            "parcel_id": "1704923111",
            "zoning": "DX-12",
            "overlays": ["SHOD-1"],
            "lot_size": 20000,
            "opportunity_zone": True,
            "distance_to_transit": 0.3,
        },
        {
            "address": "327 Hillsborough St, Raleigh, NC",
            "parcel_id": "1704933222",
            "zoning": "DX-7",
            "overlays": ["SHOD-2"],
            "lot_size": 15000,
            "opportunity_zone": True,
            "distance_to_transit": 0.5,
        },
        {
            "address": "501 Glenwood Ave, Raleigh, NC",
            "parcel_id": "1704944333",
            "zoning": "CX-4",
            "overlays": ["SRPOD"],
            "lot_size": 25000,
            "opportunity_zone": False,
            "distance_to_transit": 0.7,
        },
        {
            "address": "711 Hillsborough St, Raleigh, NC",
            "parcel_id": "1704955444",
            "zoning": "NX-3",
            "overlays": ["NCOD"],
            "lot_size": 8000,
            "opportunity_zone": False,
            "distance_to_transit": 0.4,
        },
        {
            "address": "119 E Hargett St, Raleigh, NC",
            "parcel_id": "1704966555",
            "zoning": "DX-5",
            "overlays": ["HOD-G"],
            "lot_size": 10000,
            "opportunity_zone": True,
            "distance_to_transit": 0.2,
        },
    ],
}

# Street names that place a parcel inside a named neighborhood
NEIGHBORHOOD_STREETS: dict[str, tuple[str, ...]] = {
    "uptown": ("tryon", "college"),
    "downtown": ("fayetteville", "hargett"),
}
