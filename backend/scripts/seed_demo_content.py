#!/usr/bin/env python3
"""Populate the database with demo landmarks, missions and recommendations.

Creates a demo user (if needed) and a small catalog so the API can be
exercised locally. Running it twice does not duplicate content.

Usage:
    cd backend
    python scripts/seed_demo_content.py

Environment Variables:
    DATABASE_URL: Connection string for the database (defaults to development DB)
"""

import os
import sys

# Add parent directory to path so we can import from backend
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import SessionLocal
from models.locations import Location, LocationRecommendation, Mission
from models.user import User
from services.auth import create_access_token


LOCATIONS = [
    {
        "name": "Wat Arun",
        "city": "Bangkok",
        "country": "Thailand",
        "description": "Temple of Dawn on the west bank of the Chao Phraya river.",
        "image_url": "https://images.example.com/wat-arun.jpg",
        "facts": [
            "The central prang is decorated with Chinese porcelain.",
            "It appears on the 10-baht coin.",
        ],
        "latitude": 13.7437,
        "longitude": 100.4888,
        "featured": True,
        "missions": [
            ("Climb the prang", "Reach the first terrace of the central prang.", 10),
            ("Porcelain detail", "Photograph a porcelain flower on the prang.", 20),
        ],
    },
    {
        "name": "Grand Palace",
        "city": "Bangkok",
        "country": "Thailand",
        "description": "Former royal residence and home of the Emerald Buddha.",
        "image_url": "https://images.example.com/grand-palace.jpg",
        "facts": ["Construction began in 1782."],
        "latitude": 13.7500,
        "longitude": 100.4913,
        "featured": True,
        "missions": [
            ("Emerald Buddha", "Visit the Temple of the Emerald Buddha.", 30),
        ],
    },
    {
        "name": "Wat Pho",
        "city": "Bangkok",
        "country": "Thailand",
        "description": "Home of the Reclining Buddha.",
        "image_url": "https://images.example.com/wat-pho.jpg",
        "facts": ["The Reclining Buddha is 46 meters long."],
        "latitude": 13.7465,
        "longitude": 100.4930,
        "featured": False,
        "missions": [
            ("Reclining Buddha", "Find the mother-of-pearl soles.", 15),
            ("Coin offering", "Drop coins in the 108 bronze bowls.", 15),
        ],
    },
]

# (source, recommended, priority, reason)
RECOMMENDATIONS = [
    ("Wat Arun", "Grand Palace", 1, "A short ferry ride across the river"),
    ("Wat Arun", "Wat Pho", 2, None),
    ("Grand Palace", "Wat Pho", 1, "Walking distance to the south"),
]


def get_or_create_demo_user(db) -> User:
    """Create or retrieve the demo user."""
    user = db.query(User).filter(User.email == "demo@landmarkquest.app").first()
    if user:
        print(f"Found existing demo user: {user.username} (ID: {user.id})")
        return user

    user = User(username="demo_explorer", email="demo@landmarkquest.app")
    db.add(user)
    db.commit()
    db.refresh(user)
    print(f"Created demo user: {user.username} (ID: {user.id})")
    return user


def seed_locations(db) -> dict[str, Location]:
    """Insert demo locations and missions, keyed by name."""
    by_name = {}
    for data in LOCATIONS:
        data = dict(data)
        missions = data.pop("missions")

        location = db.query(Location).filter(Location.name == data["name"]).first()
        if location:
            by_name[location.name] = location
            continue

        location = Location(**data)
        db.add(location)
        db.flush()
        for title, description, points in missions:
            db.add(Mission(
                location_id=location.id,
                title=title,
                description=description,
                points=points,
            ))
        by_name[location.name] = location

    db.commit()
    print(f"Catalog has {len(by_name)} demo locations")
    return by_name


def seed_recommendations(db, locations: dict[str, Location]) -> None:
    created = 0
    for source, recommended, priority, reason in RECOMMENDATIONS:
        exists = db.query(LocationRecommendation).filter(
            LocationRecommendation.source_location_id == locations[source].id,
            LocationRecommendation.recommended_location_id == locations[recommended].id,
        ).first()
        if exists:
            continue
        db.add(LocationRecommendation(
            source_location_id=locations[source].id,
            recommended_location_id=locations[recommended].id,
            priority=priority,
            reason=reason,
        ))
        created += 1

    db.commit()
    print(f"Created {created} recommendations")


def main():
    db = SessionLocal()
    try:
        user = get_or_create_demo_user(db)
        locations = seed_locations(db)
        seed_recommendations(db, locations)
        print("\nDemo access token:")
        print(create_access_token(user, expires_minutes=24 * 60))
    finally:
        db.close()


if __name__ == "__main__":
    main()
