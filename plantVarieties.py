"""Static variety catalogue.

One record per variety.  ``spacing_cm`` is the recommended distance
between two plants; companion lists hold variety ids and may mention ids
that are not (yet) in this file.

Companion data follows common allotment guides and is deliberately left
as published, including the odd one-sided relationship.
"""

_ALL_SOILS = ["clay", "sandy", "loamy", "chalky", "humus"]
_ALL_REGIONS = ["temperate", "mediterranean", "oceanic", "continental", "mountain"]
_LOWLAND = ["temperate", "mediterranean", "oceanic", "continental"]

variety_records = [
    # --- Fruiting vegetables ---
    {
        "id": "tomato", "name": "Tomato", "latin_name": "Solanum lycopersicum",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "clay"],
        "regions": _LOWLAND,
        "spacing_cm": 60,
        "good_companions": ["basil", "carrot", "parsley", "chives", "lettuce", "marigold"],
        "bad_companions": ["fennel", "potato", "cabbage", "corn"],
        "beginner_friendly": True,
        "category": "fruit",
    },
    {
        "id": "zucchini", "name": "Zucchini", "latin_name": "Cucurbita pepo",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "clay"],
        "regions": _LOWLAND,
        "spacing_cm": 90,
        "good_companions": ["green-bean", "corn", "nasturtium", "radish"],
        "bad_companions": ["potato"],
        "beginner_friendly": True,
        "category": "fruit",
    },
    {
        "id": "cucumber", "name": "Cucumber", "latin_name": "Cucumis sativus",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "sandy"],
        "regions": _LOWLAND,
        "spacing_cm": 45,
        "good_companions": ["green-bean", "pea", "lettuce", "dill", "radish", "corn"],
        "bad_companions": ["potato", "sage"],
        "beginner_friendly": True,
        "category": "fruit",
    },
    {
        "id": "pepper", "name": "Pepper", "latin_name": "Capsicum annuum",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "sandy"],
        "regions": ["mediterranean", "temperate"],
        "spacing_cm": 45,
        "good_companions": ["basil", "onion", "carrot"],
        "bad_companions": ["fennel", "green-bean"],
        "beginner_friendly": False,
        "category": "fruit",
    },
    {
        "id": "eggplant", "name": "Eggplant", "latin_name": "Solanum melongena",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus"],
        "regions": ["mediterranean", "temperate"],
        "spacing_cm": 60,
        "good_companions": ["green-bean", "thyme", "marigold"],
        "bad_companions": ["fennel", "potato"],
        "beginner_friendly": False,
        "category": "fruit",
    },
    {
        "id": "squash", "name": "Winter Squash", "latin_name": "Cucurbita maxima",
        "seasons": ["summer", "autumn"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "clay"],
        "regions": _LOWLAND,
        "spacing_cm": 120,
        "good_companions": ["corn", "green-bean", "nasturtium"],
        "bad_companions": ["potato"],
        "beginner_friendly": True,
        "category": "fruit",
    },
    {
        "id": "strawberry", "name": "Strawberry", "latin_name": "Fragaria x ananassa",
        "seasons": ["spring", "summer"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "sandy", "humus"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 30,
        "good_companions": ["lettuce", "spinach", "onion", "thyme", "borage"],
        "bad_companions": ["cabbage"],
        "beginner_friendly": True,
        "category": "fruit",
    },
    {
        "id": "corn", "name": "Sweet Corn", "latin_name": "Zea mays",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "clay"],
        "regions": _LOWLAND,
        "spacing_cm": 40,
        "good_companions": ["green-bean", "squash", "zucchini", "cucumber", "pea"],
        "bad_companions": ["tomato"],
        "beginner_friendly": True,
        "category": "produce",
    },
    # --- Pods ---
    {
        "id": "green-bean", "name": "Green Bean", "latin_name": "Phaseolus vulgaris",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "sandy", "humus"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 15,
        "good_companions": ["corn", "carrot", "cucumber", "zucchini", "eggplant", "squash"],
        "bad_companions": ["onion", "garlic", "leek", "chives", "fennel", "pepper"],
        "beginner_friendly": True,
        "category": "pod",
    },
    {
        "id": "pea", "name": "Pea", "latin_name": "Pisum sativum",
        "seasons": ["spring", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "clay", "chalky"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 10,
        "good_companions": ["carrot", "radish", "cucumber", "corn", "lettuce", "spinach"],
        "bad_companions": ["onion", "garlic", "leek", "chives"],
        "beginner_friendly": True,
        "category": "pod",
    },
    {
        "id": "broad-bean", "name": "Broad Bean", "latin_name": "Vicia faba",
        "seasons": ["winter", "spring"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["clay", "loamy", "chalky"],
        "regions": ["temperate", "oceanic", "mediterranean"],
        "spacing_cm": 20,
        "good_companions": ["potato", "spinach", "lettuce"],
        "bad_companions": ["onion", "garlic", "fennel"],
        "beginner_friendly": True,
        "category": "pod",
    },
    # --- Roots & tubers ---
    {
        "id": "carrot", "name": "Carrot", "latin_name": "Daucus carota",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["sandy", "loamy"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 5,
        "good_companions": ["onion", "leek", "tomato", "pea", "lettuce", "chives", "rosemary"],
        "bad_companions": ["dill", "parsnip"],
        "beginner_friendly": True,
        "category": "root",
    },
    {
        "id": "radish", "name": "Radish", "latin_name": "Raphanus sativus",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["sandy", "loamy", "humus", "clay"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 5,
        "good_companions": ["lettuce", "pea", "carrot", "cucumber", "spinach"],
        "bad_companions": ["hyssop"],
        "beginner_friendly": True,
        "category": "root",
    },
    {
        "id": "beetroot", "name": "Beetroot", "latin_name": "Beta vulgaris",
        "seasons": ["spring", "summer"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "sandy", "humus"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 10,
        "good_companions": ["onion", "lettuce", "cabbage"],
        "bad_companions": ["green-bean"],
        "beginner_friendly": True,
        "category": "root",
    },
    {
        "id": "potato", "name": "Potato", "latin_name": "Solanum tuberosum",
        "seasons": ["spring", "summer"],
        "sun": ["full_sun"],
        "soils": ["sandy", "loamy", "humus"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 35,
        "good_companions": ["broad-bean", "cabbage", "corn", "marigold"],
        "bad_companions": ["tomato", "zucchini", "cucumber", "squash", "eggplant"],
        "beginner_friendly": True,
        "category": "root",
    },
    {
        "id": "parsnip", "name": "Parsnip", "latin_name": "Pastinaca sativa",
        "seasons": ["spring", "autumn", "winter"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "sandy", "clay"],
        "regions": ["temperate", "oceanic", "continental", "mountain"],
        "spacing_cm": 15,
        "good_companions": ["onion", "garlic"],
        "bad_companions": ["carrot", "celery"],
        "beginner_friendly": False,
        "category": "root",
    },
    # --- Bulbs ---
    {
        "id": "onion", "name": "Onion", "latin_name": "Allium cepa",
        "seasons": ["spring", "autumn"],
        "sun": ["full_sun"],
        "soils": ["loamy", "sandy", "chalky"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 10,
        "good_companions": ["carrot", "beetroot", "lettuce", "strawberry", "tomato"],
        "bad_companions": ["green-bean", "pea", "broad-bean"],
        "beginner_friendly": True,
        "category": "bulb",
    },
    {
        "id": "garlic", "name": "Garlic", "latin_name": "Allium sativum",
        "seasons": ["autumn", "winter"],
        "sun": ["full_sun"],
        "soils": ["loamy", "sandy", "chalky"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 15,
        "good_companions": ["carrot", "strawberry", "tomato", "parsnip"],
        "bad_companions": ["green-bean", "pea", "broad-bean"],
        "beginner_friendly": True,
        "category": "bulb",
    },
    {
        "id": "leek", "name": "Leek", "latin_name": "Allium porrum",
        "seasons": ["autumn", "winter"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "clay", "humus"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 15,
        "good_companions": ["carrot", "celery", "onion"],
        "bad_companions": ["green-bean", "pea"],
        "beginner_friendly": True,
        "category": "bulb",
    },
    # --- Leafy greens ---
    {
        "id": "lettuce", "name": "Lettuce", "latin_name": "Lactuca sativa",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun", "partial_shade", "shade"],
        "soils": ["loamy", "humus", "clay", "sandy"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 30,
        "good_companions": ["radish", "carrot", "strawberry", "cucumber", "onion", "chives"],
        "bad_companions": ["parsley"],
        "beginner_friendly": True,
        "category": "leafy",
    },
    {
        "id": "spinach", "name": "Spinach", "latin_name": "Spinacia oleracea",
        "seasons": ["spring", "autumn", "winter"],
        "sun": ["partial_shade", "shade", "full_sun"],
        "soils": ["loamy", "humus", "clay"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 15,
        "good_companions": ["strawberry", "radish", "pea", "broad-bean", "cabbage"],
        "bad_companions": [],
        "beginner_friendly": True,
        "category": "leafy",
    },
    {
        "id": "chard", "name": "Swiss Chard", "latin_name": "Beta vulgaris subsp. vulgaris",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "humus", "clay", "chalky"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 30,
        "good_companions": ["onion", "lettuce", "cabbage"],
        "bad_companions": [],
        "beginner_friendly": True,
        "category": "leafy",
    },
    {
        "id": "lambs-lettuce", "name": "Lamb's Lettuce", "latin_name": "Valerianella locusta",
        "seasons": ["autumn", "winter"],
        "sun": ["full_sun", "partial_shade", "shade"],
        "soils": ["loamy", "clay", "chalky"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 10,
        "good_companions": ["leek", "onion"],
        "bad_companions": [],
        "beginner_friendly": True,
        "category": "leafy",
    },
    {
        "id": "cabbage", "name": "Cabbage", "latin_name": "Brassica oleracea var. capitata",
        "seasons": ["spring", "autumn", "winter"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["clay", "loamy", "chalky"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 50,
        "good_companions": ["celery", "dill", "potato", "beetroot", "thyme", "sage"],
        "bad_companions": ["tomato", "strawberry"],
        "beginner_friendly": True,
        "category": "leafy",
    },
    {
        "id": "kale", "name": "Kale", "latin_name": "Brassica oleracea var. sabellica",
        "seasons": ["autumn", "winter"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["clay", "loamy", "chalky", "humus"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 45,
        "good_companions": ["beetroot", "celery", "onion", "dill"],
        "bad_companions": ["strawberry", "tomato"],
        "beginner_friendly": True,
        "category": "leafy",
    },
    {
        "id": "celery", "name": "Celery", "latin_name": "Apium graveolens",
        "seasons": ["summer", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["humus", "loamy", "clay"],
        "regions": ["temperate", "oceanic", "continental"],
        "spacing_cm": 30,
        "good_companions": ["leek", "cabbage", "tomato"],
        "bad_companions": ["parsnip", "lettuce"],
        "beginner_friendly": False,
        "category": "produce",
    },
    {
        "id": "fennel", "name": "Fennel", "latin_name": "Foeniculum vulgare",
        "seasons": ["summer", "autumn"],
        "sun": ["full_sun"],
        "soils": ["loamy", "sandy", "chalky"],
        "regions": ["mediterranean", "temperate"],
        "spacing_cm": 30,
        "good_companions": [],
        "bad_companions": ["tomato", "green-bean", "pepper", "dill", "coriander", "eggplant"],
        "beginner_friendly": False,
        "category": "produce",
    },
    {
        "id": "asparagus", "name": "Asparagus", "latin_name": "Asparagus officinalis",
        "seasons": ["spring"],
        "sun": ["full_sun"],
        "soils": ["sandy", "loamy"],
        "regions": ["temperate", "mediterranean", "continental"],
        "spacing_cm": 45,
        "good_companions": ["tomato", "parsley", "basil"],
        "bad_companions": ["onion", "garlic"],
        "beginner_friendly": False,
        "category": "produce",
    },
    # --- Herbs ---
    {
        "id": "basil", "name": "Basil", "latin_name": "Ocimum basilicum",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "humus", "sandy"],
        "regions": _LOWLAND,
        "spacing_cm": 25,
        "good_companions": ["tomato", "pepper", "asparagus"],
        "bad_companions": ["sage", "thyme"],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "parsley", "name": "Parsley", "latin_name": "Petroselinum crispum",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "humus", "clay"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 15,
        "good_companions": ["tomato", "asparagus", "chives"],
        "bad_companions": ["lettuce"],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "chives", "name": "Chives", "latin_name": "Allium schoenoprasum",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": _ALL_SOILS,
        "regions": _ALL_REGIONS,
        "spacing_cm": 15,
        "good_companions": ["carrot", "tomato", "strawberry", "parsley"],
        "bad_companions": ["green-bean", "pea"],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "thyme", "name": "Thyme", "latin_name": "Thymus vulgaris",
        "seasons": ["spring", "summer"],
        "sun": ["full_sun"],
        "soils": ["sandy", "chalky", "loamy"],
        "regions": _ALL_REGIONS,
        "spacing_cm": 25,
        "good_companions": ["cabbage", "eggplant", "strawberry"],
        "bad_companions": [],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "dill", "name": "Dill", "latin_name": "Anethum graveolens",
        "seasons": ["spring", "summer"],
        "sun": ["full_sun"],
        "soils": ["loamy", "sandy"],
        "regions": _LOWLAND,
        "spacing_cm": 25,
        "good_companions": ["cabbage", "cucumber", "lettuce", "onion"],
        "bad_companions": ["carrot", "fennel"],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "sage", "name": "Sage", "latin_name": "Salvia officinalis",
        "seasons": ["spring", "summer"],
        "sun": ["full_sun"],
        "soils": ["sandy", "chalky", "loamy"],
        "regions": ["mediterranean", "temperate", "continental"],
        "spacing_cm": 45,
        "good_companions": ["cabbage", "carrot", "rosemary"],
        "bad_companions": ["cucumber", "basil"],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "rosemary", "name": "Rosemary", "latin_name": "Salvia rosmarinus",
        "seasons": ["spring", "summer", "autumn"],
        "sun": ["full_sun"],
        "soils": ["sandy", "chalky"],
        "regions": ["mediterranean", "temperate"],
        "spacing_cm": 60,
        "good_companions": ["carrot", "sage", "cabbage"],
        "bad_companions": [],
        "beginner_friendly": False,
        "category": "herb",
    },
    {
        "id": "coriander", "name": "Coriander", "latin_name": "Coriandrum sativum",
        "seasons": ["spring", "autumn"],
        "sun": ["full_sun", "partial_shade"],
        "soils": ["loamy", "sandy"],
        "regions": _LOWLAND,
        "spacing_cm": 15,
        "good_companions": ["spinach", "lettuce"],
        "bad_companions": ["fennel"],
        "beginner_friendly": True,
        "category": "herb",
    },
    {
        "id": "marigold", "name": "French Marigold", "latin_name": "Tagetes patula",
        "seasons": ["summer"],
        "sun": ["full_sun"],
        "soils": _ALL_SOILS,
        "regions": _ALL_REGIONS,
        "spacing_cm": 25,
        "good_companions": ["tomato", "potato", "eggplant", "cucumber"],
        "bad_companions": [],
        "beginner_friendly": True,
        "category": "herb",
    },
]
