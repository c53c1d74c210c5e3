"""Test data constants for the landmark catalog.

Provides predefined locations, missions and recommendations for consistent
testing across unit and integration tests.
"""

# Bangkok, Thailand: two missions, featured
WAT_ARUN = {
    "id": "loc-wat-arun",
    "name": "Wat Arun",
    "city": "Bangkok",
    "country": "Thailand",
    "description": "Temple of Dawn",
    "image_url": "https://images.example.com/wat-arun.jpg",
    "facts": ["Decorated with porcelain", "Pictured on the 10-baht coin"],
    "model_url": "https://models.example.com/wat-arun.glb",
    "latitude": 13.7437,
    "longitude": 100.4888,
    "featured": True,
}

# About 700 m north-east of Wat Arun: one mission, featured
GRAND_PALACE = {
    "id": "loc-grand-palace",
    "name": "Grand Palace",
    "city": "Bangkok",
    "country": "Thailand",
    "description": "Former royal residence",
    "image_url": "https://images.example.com/grand-palace.jpg",
    "facts": ["Construction began in 1782"],
    "latitude": 13.7500,
    "longitude": 100.4913,
    "featured": True,
}

# Not featured, two active missions and one inactive
WAT_PHO = {
    "id": "loc-wat-pho",
    "name": "Wat Pho",
    "city": "Bangkok",
    "country": "Thailand",
    "description": "Home of the Reclining Buddha",
    "image_url": "https://images.example.com/wat-pho.jpg",
    "facts": [],
    "latitude": 13.7465,
    "longitude": 100.4930,
    "featured": False,
}

# Far away and without missions
EIFFEL_TOWER = {
    "id": "loc-eiffel",
    "name": "Eiffel Tower",
    "city": "Paris",
    "country": "France",
    "description": "Wrought-iron lattice tower",
    "image_url": "https://images.example.com/eiffel.jpg",
    "facts": [],
    "latitude": 48.8584,
    "longitude": 2.2945,
    "featured": False,
}

ALL_LOCATIONS = [WAT_ARUN, GRAND_PALACE, WAT_PHO, EIFFEL_TOWER]

MISSIONS = [
    {"id": "m-arun-climb", "location_id": "loc-wat-arun", "title": "Climb the prang",
     "description": "Reach the first terrace", "points": 10, "active": True},
    {"id": "m-arun-porcelain", "location_id": "loc-wat-arun", "title": "Porcelain detail",
     "description": "Photograph a porcelain flower", "points": 20, "active": True},
    {"id": "m-palace-buddha", "location_id": "loc-grand-palace", "title": "Emerald Buddha",
     "description": "Visit the Emerald Buddha", "points": 30, "active": True},
    {"id": "m-pho-reclining", "location_id": "loc-wat-pho", "title": "Reclining Buddha",
     "description": "Find the mother-of-pearl soles", "points": 15, "active": True},
    {"id": "m-pho-coins", "location_id": "loc-wat-pho", "title": "Coin offering",
     "description": "Drop coins in the bronze bowls", "points": 15, "active": True},
    {"id": "m-pho-retired", "location_id": "loc-wat-pho", "title": "Retired mission",
     "description": "No longer offered", "points": 50, "active": False},
]

# (id, source, recommended, priority, reason)
RECOMMENDATIONS = [
    ("rec-1", "loc-wat-arun", "loc-grand-palace", 1, "A short ferry ride away"),
    ("rec-2", "loc-wat-arun", "loc-wat-pho", 2, None),
    ("rec-3", "loc-wat-arun", "loc-eiffel", 3, "Inactive suggestion"),
]
INACTIVE_RECOMMENDATIONS = {"rec-3"}
