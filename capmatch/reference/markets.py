"""Market averages by city and asset type."""

from capmatch.models import MarketStats

_RAW_MARKETS: dict[str, dict[str, dict]] = {
    "Chicago": {
        "multifamily": {
            "averageCapRate": 5.2,
            "averageRentPerSqFt": 2.15,
            "vacancyRate": 5.7,
            "averagePricePerUnit": 225000,
            "yearOverYearValueChange": 3.5,
        },
        "office": {
            "averageCapRate": 6.8,
            "averageRentPerSqFt": 36.5,
            "vacancyRate": 18.3,
            "averagePricePerSqFt": 285,
            "yearOverYearValueChange": -2.1,
        },
        "retail": {
            "averageCapRate": 7.5,
            "averageRentPerSqFt": 26.8,
            "vacancyRate": 8.9,
            "averagePricePerSqFt": 315,
            "yearOverYearValueChange": -1.5,
        },
        "industrial": {
            "averageCapRate": 4.8,
            "averageRentPerSqFt": 8.25,
            "vacancyRate": 3.2,
            "averagePricePerSqFt": 115,
            "yearOverYearValueChange": 8.7,
        },
    },
    "New York": {
        "multifamily": {
            "averageCapRate": 4.1,
            "averageRentPerSqFt": 5.35,
            "vacancyRate": 3.2,
            "averagePricePerUnit": 625000,
            "yearOverYearValueChange": 2.8,
        },
        "office": {
            "averageCapRate": 4.5,
            "averageRentPerSqFt": 86.5,
            "vacancyRate": 15.8,
            "averagePricePerSqFt": 1250,
            "yearOverYearValueChange": -3.2,
        },
        "retail": {
            "averageCapRate": 5.2,
            "averageRentPerSqFt": 95.0,
            "vacancyRate": 12.5,
            "averagePricePerSqFt": 1450,
            "yearOverYearValueChange": -4.8,
        },
        "industrial": {
            "averageCapRate": 3.9,
            "averageRentPerSqFt": 18.45,
            "vacancyRate": 4.1,
            "averagePricePerSqFt": 275,
            "yearOverYearValueChange": 7.5,
        },
    },
    "Los Angeles": {
        "multifamily": {
            "averageCapRate": 4.5,
            "averageRentPerSqFt": 3.45,
            "vacancyRate": 4.2,
            "averagePricePerUnit": 425000,
            "yearOverYearValueChange": 3.2,
        },
        "office": {
            "averageCapRate": 5.6,
            "averageRentPerSqFt": 48.5,
            "vacancyRate": 16.5,
            "averagePricePerSqFt": 650,
            "yearOverYearValueChange": -2.8,
        },
        "retail": {
            "averageCapRate": 6.1,
            "averageRentPerSqFt": 52.0,
            "vacancyRate": 9.5,
            "averagePricePerSqFt": 725,
            "yearOverYearValueChange": -3.2,
        },
        "industrial": {
            "averageCapRate": 4.2,
            "averageRentPerSqFt": 14.25,
            "vacancyRate": 2.8,
            "averagePricePerSqFt": 225,
            "yearOverYearValueChange": 12.5,
        },
    },
    "Miami": {
        "multifamily": {
            "averageCapRate": 4.8,
            "averageRentPerSqFt": 2.95,
            "vacancyRate": 3.8,
            "averagePricePerUnit": 375000,
            "yearOverYearValueChange": 8.5,
        },
        "office": {
            "averageCapRate": 5.9,
            "averageRentPerSqFt": 45.5,
            "vacancyRate": 14.2,
            "averagePricePerSqFt": 585,
            "yearOverYearValueChange": 2.1,
        },
        "retail": {
            "averageCapRate": 6.5,
            "averageRentPerSqFt": 55.0,
            "vacancyRate": 7.5,
            "averagePricePerSqFt": 685,
            "yearOverYearValueChange": 1.5,
        },
        "industrial": {
            "averageCapRate": 4.5,
            "averageRentPerSqFt": 11.25,
            "vacancyRate": 3.1,
            "averagePricePerSqFt": 175,
            "yearOverYearValueChange": 10.2,
        },
    },
    "Dallas": {
        "multifamily": {
            "averageCapRate": 5.5,
            "averageRentPerSqFt": 1.85,
            "vacancyRate": 5.1,
            "averagePricePerUnit": 195000,
            "yearOverYearValueChange": 6.2,
        },
        "office": {
            "averageCapRate": 6.2,
            "averageRentPerSqFt": 32.5,
            "vacancyRate": 16.9,
            "averagePricePerSqFt": 315,
            "yearOverYearValueChange": -1.2,
        },
        "retail": {
            "averageCapRate": 6.8,
            "averageRentPerSqFt": 28.0,
            "vacancyRate": 6.5,
            "averagePricePerSqFt": 285,
            "yearOverYearValueChange": 0.8,
        },
        "industrial": {
            "averageCapRate": 4.7,
            "averageRentPerSqFt": 7.85,
            "vacancyRate": 2.9,
            "averagePricePerSqFt": 105,
            "yearOverYearValueChange": 9.8,
        },
    },
}

MARKET_DATA: dict[str, dict[str, MarketStats]] = {
    city: {asset: MarketStats.model_validate(stats) for asset, stats in assets.items()}
    for city, assets in _RAW_MARKETS.items()
}
