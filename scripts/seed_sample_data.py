#!/usr/bin/env python3
"""
Seed foundation breeding stock and a first breeding event.

This script:
1. Creates the schema if it does not exist yet
2. Skips seeding when the species already has animals
3. Creates two foundation bucks and two foundation does
4. Plans a breeding event between the first buck and doe

Usage:
  python scripts/seed_sample_data.py [--species rabbit]
"""

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from herdline.application.use_cases.animals import create_animal
from herdline.application.use_cases.breeding import create_breeding_event
from herdline.config.settings import get_settings
from herdline.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
)

FOUNDATION_STOCK = [
    create_animal.CreateAnimalInput(
        animal_code="M1",
        name="Buck Rogers",
        species="rabbit",
        gender="male",
        breed="New Zealand White",
        weight=4.2,
        color="white",
        date_of_birth=date(2024, 1, 15),
        health=95,
        fertility=90,
        notes="Foundation buck with excellent genetic traits",
        tags=["breeding", "show-quality"],
    ),
    create_animal.CreateAnimalInput(
        animal_code="F1",
        name="Daisy",
        species="rabbit",
        gender="female",
        breed="New Zealand White",
        weight=4.8,
        color="white",
        date_of_birth=date(2024, 1, 20),
        health=92,
        fertility=95,
        litter_size=8,
        notes="Foundation doe with high fertility",
        tags=["breeding", "show-quality"],
    ),
    create_animal.CreateAnimalInput(
        animal_code="M2",
        name="Thumper",
        species="rabbit",
        gender="male",
        breed="Californian",
        weight=3.9,
        color="white with black points",
        date_of_birth=date(2024, 2, 5),
        health=88,
        fertility=85,
        notes="Good meat production genetics",
        tags=["breeding", "meat"],
    ),
    create_animal.CreateAnimalInput(
        animal_code="F2",
        name="Flopsy",
        species="rabbit",
        gender="female",
        breed="Californian",
        weight=4.3,
        color="white with black points",
        date_of_birth=date(2024, 2, 10),
        health=90,
        fertility=92,
        litter_size=7,
        notes="Good mothering instincts",
        tags=["breeding", "meat"],
    ),
]


async def seed(species: str) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        await create_schema(engine)

        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            existing = await uow.animals.count(species=species)
        if existing:
            print(f"ℹ️  {existing} {species} records already exist, skipping seeding")
            return

        created = []
        for payload in FOUNDATION_STOCK:
            if payload.species != species:
                continue
            uow = SQLAlchemyUnitOfWork(session_factory)
            async with uow:
                animal = await create_animal.execute(uow, payload)
            created.append(animal)
            print(f"✨ Created {animal.animal_code} {animal.name} (id {animal.id})")

        if len(created) < 2:
            print(f"ℹ️  No foundation stock defined for {species}")
            return

        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            event = await create_breeding_event.execute(
                uow,
                create_breeding_event.CreateBreedingEventInput(
                    male_id=created[0].id,
                    female_id=created[1].id,
                    breeding_date=date(2025, 3, 1),
                    breeding_purpose="commercial",
                    notes="First breeding trial with foundation stock",
                ),
            )
        print(f"\n✅ Breeding event {event.event_code} planned")
        print(f"   Expected birth: {event.expected_birth_date}")
        print(f"   Predicted litter: {event.predicted_litter_size}")
        print(f"   Predicted ROI: {event.predicted_roi}")

    except Exception as exc:
        print(f"\n❌ Error seeding sample data: {exc}")
        import traceback

        traceback.print_exc()
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Seed foundation breeding stock",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--species", default="rabbit", help="Species to seed (default: rabbit)")
    args = parser.parse_args()

    print("=" * 60)
    print("🐇 Sample data seeder - Herdline")
    print("=" * 60)

    asyncio.run(seed(args.species.strip().lower()))

    print("\n" + "=" * 60)
    print("✨ Process completed")
    print("=" * 60)
